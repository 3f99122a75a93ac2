"""Screen geometry, key codes and colour codes shared across the game."""

from __future__ import annotations

from enum import Enum, IntEnum
from typing import Callable

# Console geometry. Aspect is 12:5; the smallest usable size is 120x30
# and the largest is 240x63.
WIDTH = 120
HEIGHT = 50

GAME_TITLE = "SeaBattle"

LIST_SELECTED_SYMBOL = ">"
LIST_EMPTY_SYMBOL = " "

Task = Callable[[], None]
"""A parameterless callable run as a menu task."""


class Key(IntEnum):
    """Key codes as reported by the keyboard reader."""

    ENTER = 13
    UP = 72
    LEFT = 75
    RIGHT = 77
    DOWN = 80
    Q = 113


class CmdColor(str, Enum):
    """Colour digits understood by the Windows ``color`` command."""

    BLACK = "0"
    BLUE = "1"
    GREEN = "2"
    AQUA = "3"
    RED = "4"
    PURPLE = "5"
    YELLOW = "6"
    WHITE = "7"
    GREY = "8"
    LBLUE = "9"
    LGREEN = "A"
    LLBLUE = "B"
    LRED = "C"
    LPURPLE = "D"
    LYELLOW = "E"
    LWHITE = "F"


class EscColor(IntEnum):
    """SGR parameters for ANSI escape sequences."""

    STYLE_UNDERLINED = 4

    FG_BLACK = 30
    FG_RED = 31
    FG_GREEN = 32
    FG_YELLOW = 33
    FG_BLUE = 34
    FG_PURPLE = 35
    FG_LBLUE = 36
    FG_WHITE = 37

    BG_BLACK = 40
    BG_RED = 41
    BG_GREEN = 42
    BG_YELLOW = 43
    BG_BLUE = 44
    BG_PURPLE = 45
    BG_LBLUE = 46
    BG_WHITE = 47