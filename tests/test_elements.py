import io

import pytest

from seaconsole.config import Key
from seaconsole.console import ConsoleManager
from seaconsole.elements import Element, InteractList, Layer


class _Recorder(Element):
    def __init__(self):
        super().__init__(0, 0)
        self.keys = []
        self.printed = 0

    def get_input_key(self, key_code):
        self.keys.append(key_code)

    def print(self):
        self.printed += 1


def _make_list(titles=("a", "b", "c"), height=5):
    stream = io.StringIO()
    console = ConsoleManager(20, height, stream)
    sounds = []
    lst = InteractList(list(titles), 0, 0, console, lambda: sounds.append(1))
    return lst, stream, sounds


def test_element_defaults():
    element = Element()
    assert (element.x_pos, element.y_pos) == (-1, -1)
    assert element.is_focus is False
    assert element.from_layer is None
    assert element.get_input_key(Key.UP) is None


def test_layer_add_without_focus():
    layer = Layer()
    element = _Recorder()
    layer.add_element(element)
    assert layer.elements == [element]
    assert layer.focus_element is None
    assert element.is_focus is False
    assert element.from_layer is layer


def test_layer_focus_receives_keys_and_prints():
    layer = Layer()
    first, second = _Recorder(), _Recorder()
    layer.add_element(first)
    layer.add_element(second, True)
    assert layer.focus_element is second
    assert second.is_focus is True
    layer.send_key_code(Key.DOWN)
    layer.print_layer()
    assert second.keys == [Key.DOWN]
    assert first.keys == []
    assert second.printed == 1
    assert first.printed == 0


def test_layer_without_focus_cannot_take_keys():
    layer = Layer()
    with pytest.raises(RuntimeError):
        layer.send_key_code(Key.UP)


def test_layer_print_without_focus_does_nothing():
    layer = Layer()
    element = _Recorder()
    layer.add_element(element)
    layer.print_layer()
    assert element.printed == 0


def test_interact_list_requires_titles():
    with pytest.raises(ValueError):
        InteractList([], 0, 0, ConsoleManager(10, 5, io.StringIO()), lambda: None)


def test_initial_selection_is_first():
    lst, _, _ = _make_list()
    assert lst.select_index == 0
    lines = lst.lines()
    assert lines[0] == ">1) a"
    assert all(line.startswith(" ") for line in lines[1:])


def test_select_down_and_up_bounds():
    lst, _, _ = _make_list()
    lst.select_up()
    assert lst.select_index == 0
    for _ in range(5):
        lst.select_down()
    assert lst.select_index == 2
    lst.select_up()
    assert lst.select_index == 1


def test_exactly_one_row_marked():
    lst, _, _ = _make_list(("x", "y", "z", "w"))
    for _ in range(3):
        lst.select_down()
        marked = [line for line in lst.lines() if line.startswith(">")]
        assert len(marked) == 1
        assert marked[0].endswith(lst.titles[lst.select_index])


def test_print_writes_every_line():
    lst, stream, _ = _make_list()
    lst.print()
    output = stream.getvalue()
    for line in lst.lines():
        assert line in output


def test_arrow_keys_move_and_play_sound():
    lst, _, sounds = _make_list()
    lst.get_input_key(Key.DOWN)
    assert lst.select_index == 1
    lst.get_input_key(Key.UP)
    assert lst.select_index == 0
    assert len(sounds) == 2


def test_enter_and_q_are_ignored():
    lst, stream, sounds = _make_list()
    lst.get_input_key(Key.ENTER)
    lst.get_input_key(Key.Q)
    assert lst.select_index == 0
    assert sounds == []
    assert stream.getvalue() == ""


def test_unknown_key_reports_on_last_row():
    lst, stream, sounds = _make_list(height=5)
    lst.get_input_key(ord("z"))
    output = stream.getvalue()
    assert output.endswith("Wrong key")
    assert "\x1b[5;1H" in output
    assert sounds == []