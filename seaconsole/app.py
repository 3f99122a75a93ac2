"""The task manager that runs the menu loop, and the command entry point."""

from __future__ import annotations

import os
import sys
from typing import Callable, Optional, Sequence

from .config import Key
from .console import ConsoleManager
from .concept import task_titles
from .elements import InteractList, Layer

try:
    import msvcrt as _msvcrt
except ImportError:
    _msvcrt = None

try:
    import termios as _termios
    import tty as _tty
except ImportError:
    _termios = None
    _tty = None

_ESCAPE_KEYS = {
    "A": int(Key.UP),
    "B": int(Key.DOWN),
    "C": int(Key.RIGHT),
    "D": int(Key.LEFT),
}


def read_key() -> Optional[int]:
    """Read one key press and return its code, or None at end of input.

    Arrow keys are reported with the same codes as on a Windows console
    and Enter as carriage return.
    """
    stdin = sys.stdin
    if not stdin.isatty():
        char = stdin.read(1)
        if not char:
            return None
        return int(Key.ENTER) if char == "\n" else ord(char)
    if _msvcrt is not None:
        return _msvcrt.getch()[0]
    fd = stdin.fileno()
    saved = _termios.tcgetattr(fd)
    try:
        _tty.setcbreak(fd)
        data = os.read(fd, 1)
        if not data:
            return None
        if data == b"\x1b":
            rest = os.read(fd, 2).decode("ascii", "replace")
            if rest[:1] == "[" and rest[1:] in _ESCAPE_KEYS:
                return _ESCAPE_KEYS[rest[1:]]
            return data[0]
        if data in (b"\n", b"\r"):
            return int(Key.ENTER)
        return data[0]
    finally:
        _termios.tcsetattr(fd, _termios.TCSADRAIN, saved)


class TaskManager:
    """Shows the task menu and feeds key presses to it."""

    def __init__(
        self,
        console: Optional[ConsoleManager] = None,
        read_key: Callable[[], Optional[int]] = read_key,
        sound: Optional[Callable[[], object]] = None,
    ) -> None:
        self.console = console if console is not None else ConsoleManager()
        self.read_key = read_key
        self.sound = sound
        self.layer: Optional[Layer] = None

    def start_loop(self, is_debug: bool) -> None:
        """Run the debug menu until the key source is exhausted.

        Outside debug mode there is nothing to run.
        """
        if not is_debug:
            return
        layer = Layer()
        task_list = InteractList(task_titles(), 0, 0, self.console, self.sound)
        layer.add_element(task_list, True)
        self.layer = layer
        self.console.setup()
        while True:
            layer.print_layer()
            key_code = self.read_key()
            if key_code is None:
                break
            layer.send_key_code(key_code)

    def start(self, is_debug: bool = True) -> None:
        """Start the manager."""
        self.start_loop(is_debug)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the game menu in debug mode and wait for a final key."""
    manager = TaskManager()
    try:
        manager.start(True)
        read_key()
    except KeyboardInterrupt:
        pass
    return 0