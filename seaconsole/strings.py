"""Small string helpers and a text wrapper used by the console widgets."""

from __future__ import annotations

from typing import Iterable


class Str:
    """Immutable piece of console text with a known length."""

    __slots__ = ("_text",)

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise TypeError(f"expected str, got {type(text).__name__}")
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def __str__(self) -> str:
        return self._text

    def __repr__(self) -> str:
        return f"Str({self._text!r})"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Str):
            return self._text == other._text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._text)


def find_char(src: str, search_char: str) -> int:
    """Return the index of the first ``search_char`` in ``src``, or -1."""
    if len(search_char) != 1:
        raise ValueError("search_char must be a single character")
    return src.find(search_char)


def find_str_in_array(str_list: Iterable[str], search: str) -> bool:
    """Tell whether ``search`` equals any item of ``str_list``."""
    return any(item == search for item in str_list)


def get_int_length(number: int) -> int:
    """Number of characters in the decimal form of ``number``, sign included."""
    length = 2 if number < 0 else 1
    number = abs(number)
    while number >= 10:
        length += 1
        number //= 10
    return length