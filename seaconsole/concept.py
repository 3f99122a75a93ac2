"""Demonstration tasks shown in the debug menu."""

from __future__ import annotations

import time
from typing import List, Optional, TextIO

from .buffer import BufferManager
from .console import ConsoleManager
from .stack import Stack, print_stack

TASK_TITLES = (
    "Concept of the game",
    "Testing stack technology",
    "Testing text output",
)

CONCEPT_LINES = (
    "auf",
    "aub",
    "<><><><++>+><+>+>",
    "=================",
    "█████████████████",
    "=================",
)

_HELLO = "hello world"
_HELLO_POSITIONS = ((1, 4), (1, 3), (7, 4), (0, 4), (2, 1))
_BARS = "█▇▆▅▄▃▂▁"


def print_concept_game(buffer: BufferManager) -> None:
    """Write the sketch of the game screen into ``buffer``."""
    for line in CONCEPT_LINES:
        buffer.printb(line)


def test_stack(file: Optional[TextIO] = None) -> None:
    """Build a small stack and print it."""
    stack = Stack(7)
    for value in (5, 3, 1, -1):
        stack = stack.push(value)
    print_stack(stack, file)


def test_text(console: ConsoleManager, delay: float = 0.05) -> None:
    """Write text at several positions, then count from 0 to 9 in place."""
    for x_pos, y_pos in _HELLO_POSITIONS:
        console.print_to_pos(_HELLO, x_pos, y_pos)
    console.print_to_pos(_BARS, 8, 1)
    for number in range(10):
        console.print_to_pos(str(number), 0, 1)
        time.sleep(delay)


def task_titles() -> List[str]:
    """Titles of the demonstration tasks, in menu order."""
    return list(TASK_TITLES)