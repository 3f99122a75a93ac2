import io

from seaconsole.stack import Stack, format_stack, print_stack


def _sample():
    stack = Stack(7)
    for value in (5, 3, 1, -1):
        stack = stack.push(value)
    return stack


def test_default_data_is_zero():
    assert Stack().data == 0
    assert list(Stack()) == [0]


def test_iteration_is_top_first():
    assert list(_sample()) == [-1, 1, 3, 5, 7]


def test_len_counts_nodes():
    assert len(_sample()) == 5


def test_push_leaves_original_untouched():
    base = Stack(7)
    top = base.push(5)
    assert len(base) == 1
    assert top.next is base


def test_format_stack():
    assert format_stack(_sample()) == "=> -1\n=> 1\n=> 3\n=> 5\n=> 7\n"


def test_print_stack_writes_formatted_text():
    out = io.StringIO()
    stack = _sample()
    print_stack(stack, out)
    assert out.getvalue() == format_stack(stack)
    assert out.getvalue().count("\n") == len(stack)