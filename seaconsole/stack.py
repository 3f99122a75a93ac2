"""A minimal immutable linked stack of integers."""

from __future__ import annotations

import sys
from typing import Iterator, Optional, TextIO


class Stack:
    """A stack node; pushing returns a new top node linked to this one."""

    __slots__ = ("data", "next")

    def __init__(self, data: int = 0) -> None:
        self.data = data
        self.next: Optional[Stack] = None

    def push(self, data: int) -> "Stack":
        """Return a new stack with ``data`` on top of this one."""
        top = Stack(data)
        top.next = self
        return top

    def __iter__(self) -> Iterator[int]:
        node: Optional[Stack] = self
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __repr__(self) -> str:
        return f"Stack({list(self)!r})"


def format_stack(stack: Stack) -> str:
    """Render the stack top first, one ``=> value`` line per item."""
    return "".join(f"=> {value}\n" for value in stack)


def print_stack(stack: Stack, file: Optional[TextIO] = None) -> None:
    """Write the rendered stack to ``file`` (standard output by default)."""
    (file or sys.stdout).write(format_stack(stack))