"""Positioned text output on an ANSI terminal."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from .config import GAME_TITLE, HEIGHT, WIDTH, EscColor

_CSI = "\x1b["


class ConsoleManager:
    """Writes text to fixed positions of a terminal of a given size."""

    def __init__(
        self, width: int = WIDTH, height: int = HEIGHT, stream: Optional[TextIO] = None
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("console dimensions must be positive")
        self.width = width
        self.height = height
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def setup(self) -> None:
        """Resize the window, hide the cursor, set the title and colours."""
        self._write(
            f"{_CSI}8;{self.height};{self.width}t"
            f"{_CSI}?25l"
            f"\x1b]0;{GAME_TITLE}\x07"
            f"{_CSI}{EscColor.BG_BLACK};{EscColor.FG_LBLUE}m"
        )

    def _cursor(self, x_pos: int, y_pos: int) -> str:
        if x_pos < 0 or y_pos < 0:
            raise ValueError("cursor position must not be negative")
        return f"{_CSI}{y_pos + 1};{x_pos + 1}H"

    def set_cursor_pos(self, x_pos: int, y_pos: int) -> None:
        """Move the cursor to zero-based column ``x_pos`` and row ``y_pos``."""
        self._write(self._cursor(x_pos, y_pos))

    def print_str(self, text: str) -> None:
        """Write ``text`` at the current cursor position."""
        self._write(str(text))

    def print_to_pos(self, text: str, x_pos: int, y_pos: int) -> None:
        """Write ``text`` starting at the given zero-based position."""
        self._write(self._cursor(x_pos, y_pos) + str(text))

    def clear_console(self) -> None:
        """Overwrite every row of the console with spaces."""
        blank = " " * self.width
        self._write("".join(self._cursor(0, row) + blank for row in range(self.height)))