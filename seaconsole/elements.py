"""Screen elements: a focusable base element, a layer and a selectable list."""

from __future__ import annotations

from typing import Callable, Iterable, List, Optional

from .audio import play_select_sound
from .config import LIST_EMPTY_SYMBOL, LIST_SELECTED_SYMBOL, Key
from .console import ConsoleManager
from .strings import Str

WRONG_KEY_MESSAGE = "Wrong key"


class Element:
    """Something placed on the screen that may receive key presses."""

    def __init__(self, x_pos: int = -1, y_pos: int = -1) -> None:
        self.x_pos = x_pos
        self.y_pos = y_pos
        self.is_focus = False
        self.from_layer: Optional[Layer] = None

    def get_input_key(self, key_code: int) -> None:
        """React to a key press; the base element ignores it."""

    def print(self) -> None:
        """Draw the element; the base element has nothing to draw."""


class Layer:
    """A set of elements, one of which holds the input focus."""

    def __init__(self) -> None:
        self.elements: List[Element] = []
        self.focus_element: Optional[Element] = None

    def add_element(self, new_element: Element, is_focus: bool = False) -> None:
        """Add an element, optionally giving it the focus."""
        self.elements.append(new_element)
        new_element.from_layer = self
        if is_focus:
            new_element.is_focus = True
            self.focus_element = new_element

    def send_key_code(self, key_code: int) -> None:
        """Pass a key press to the focused element."""
        if self.focus_element is None:
            raise RuntimeError("layer has no focused element")
        self.focus_element.get_input_key(key_code)

    def print_layer(self) -> None:
        """Draw the focused element, if any."""
        if self.focus_element is not None:
            self.focus_element.print()


class InteractList(Element):
    """A numbered list of titles with one selected entry, moved by arrow keys."""

    def __init__(
        self,
        titles: Iterable[str],
        x_pos: int = 0,
        y_pos: int = 0,
        console: Optional[ConsoleManager] = None,
        sound: Optional[Callable[[], object]] = None,
    ) -> None:
        super().__init__(x_pos, y_pos)
        self.titles = [str(title) for title in titles]
        if not self.titles:
            raise ValueError("an interactive list needs at least one title")
        self.select_index = 0
        self.console = console if console is not None else ConsoleManager()
        self.sound = sound if sound is not None else play_select_sound

    def select_up(self) -> None:
        """Move the selection one entry up, stopping at the first."""
        if self.select_index > 0:
            self.select_index -= 1

    def select_down(self) -> None:
        """Move the selection one entry down, stopping at the last."""
        if self.select_index < len(self.titles) - 1:
            self.select_index += 1

    def lines(self) -> List[str]:
        """The rendered rows, the selected one marked."""
        return [
            f"{LIST_SELECTED_SYMBOL if number == self.select_index else LIST_EMPTY_SYMBOL}"
            f"{number + 1}) {title}"
            for number, title in enumerate(self.titles)
        ]

    def print(self) -> None:
        """Draw every row at the list's position, one row per title."""
        for offset, line in enumerate(self.lines()):
            self.console.print_to_pos(line, self.x_pos, self.y_pos + offset)

    def get_input_key(self, key_code: int) -> None:
        """Move the selection on arrow keys; report any key it does not know."""
        if key_code in (Key.ENTER, Key.Q):
            return
        if key_code == Key.DOWN:
            self.select_down()
            self.sound()
        elif key_code == Key.UP:
            self.select_up()
            self.sound()
        else:
            message = Str(WRONG_KEY_MESSAGE)
            self.console.set_cursor_pos(0, self.console.height - 1)
            self.console.print_str(str(message))