"""A fixed-size character buffer that text is written into line by line."""

from __future__ import annotations


class BufferManager:
    """Grid of ``height`` rows of ``width`` characters with a write cursor line."""

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("buffer dimensions must be positive")
        self.width = width
        self.height = height
        self.line_position = 0
        self._rows: list[list[str]] = []
        self.clear()

    def clear(self) -> None:
        """Fill the buffer with spaces and move back to the first line."""
        self._rows = [[" "] * self.width for _ in range(self.height)]
        self.line_position = 0

    def _write_line(self, text: str) -> None:
        if self.line_position >= self.height:
            raise IndexError("buffer is full")
        if len(text) > self.width:
            raise ValueError(
                f"text of length {len(text)} does not fit a row of width {self.width}"
            )
        self._rows[self.line_position][: len(text)] = text

    def printb(self, output: str, is_new_line: bool = True) -> None:
        """Write ``output`` at the start of the current line."""
        self._write_line(output)
        if is_new_line:
            self.line_position += 1

    def printbn(self, output: str, is_new_line: bool = True) -> None:
        """Write ``output``, starting a new line at every newline character."""
        *head, last = output.split("\n")
        for segment in head:
            self._write_line(segment)
            self.line_position += 1
        self._write_line(last)
        if is_new_line:
            self.line_position += 1

    def to_output(self) -> str:
        """Return the whole buffer as one string, rows concatenated."""
        return "".join("".join(row) for row in self._rows)