# seaconsole

The console front end of a sea battle game. It sets up an ANSI terminal
(120 columns by 50 rows by default, title "SeaBattle", light blue text on
black, hidden cursor) and shows a task menu that you move through with the
arrow keys.

## Installation

```
pip install .
```

To run the tests, install with the test extra:

```
pip install ".[test]"
pytest
```

## Running

```
seaconsole
```

The menu lists these tasks:

1. Concept of the game
2. Testing stack technology
3. Testing text output

The keys are:

- **Up** and **Down** move the `>` marker and play the selection sound.
  The sound plays only where the `winsound` module is available and the file
  `../resources/Select.wav` exists relative to the working directory;
  otherwise nothing is played.
- **Enter** and **q** are accepted and do nothing.
- Any other key prints `Wrong key` on the bottom line of the console.

When standard input is not a terminal, keys are read from it one character
at a time (a newline counts as Enter) and the menu ends at end of input.
Ctrl+C ends the program.

## Library use

The building blocks can be used on their own:

- `seaconsole.console.ConsoleManager` writes text at zero-based positions to
  a stream using ANSI escape sequences (`setup`, `set_cursor_pos`,
  `print_str`, `print_to_pos`, `clear_console`).
- `seaconsole.buffer.BufferManager` is a fixed-size text buffer filled line by
  line with `printb` and `printbn`; `to_output` returns all rows joined.
- `seaconsole.elements` holds `Element`, `Layer` and the `InteractList` menu.
- `seaconsole.stack.Stack` is a small linked stack of integers, with
  `format_stack` and `print_stack`.
- `seaconsole.strings` has `Str`, `find_char`, `find_str_in_array` and
  `get_int_length`.
- `seaconsole.concept` has the demonstration tasks `print_concept_game`,
  `test_stack` and `test_text`, and `task_titles`.
- `seaconsole.app` has `TaskManager`, `read_key` and the `main` entry point.
- `seaconsole.config` holds the screen size and the `Key`, `CmdColor` and
  `EscColor` enumerations.

```python
import io

from seaconsole.console import ConsoleManager
from seaconsole.elements import InteractList, Layer
from seaconsole.config import Key

console = ConsoleManager(40, 10, io.StringIO())
menu = InteractList(["Play", "Quit"], 0, 0, console, None)
layer = Layer()
layer.add_element(menu, True)
layer.send_key_code(Key.DOWN)
print(menu.lines())   # [' 1) Play', '>2) Quit']
```

## What it does not do

- Pressing Enter on a menu entry does not start the task; the demonstration
  tasks in `seaconsole.concept` can only be called from code.
- There is no sea battle game itself: no game field, ships, turns or
  opponents.