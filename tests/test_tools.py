import io

import pytest

from greedysnake.tools import BACK_COLOR, TITLE, Key, Screen, decode_key


def _screen():
    stream = io.StringIO()
    return Screen(stream), stream


def test_cursor_position_uses_double_width_cells():
    screen, stream = _screen()
    screen.set_cursor_position(3, 5)
    assert stream.getvalue() == "\x1b[6;7H"


def test_cursor_positions_differ_per_cell():
    screen, stream = _screen()
    screen.set_cursor_position(0, 0)
    first = stream.getvalue()
    screen.set_cursor_position(1, 0)
    assert stream.getvalue()[len(first):] != first


def test_write_passes_text_through():
    screen, stream = _screen()
    screen.write("★")
    assert stream.getvalue() == "★"


def test_clear_erases_display():
    screen, stream = _screen()
    screen.clear()
    assert "\x1b[2J" in stream.getvalue()


def test_back_color_is_fixed_attribute():
    screen, stream = _screen()
    screen.set_back_color()
    other, other_stream = _screen()
    other.set_color(BACK_COLOR)
    assert stream.getvalue() == other_stream.getvalue()


def test_distinct_colors_give_distinct_output():
    screen, stream = _screen()
    screen.set_color(3)
    other, other_stream = _screen()
    other.set_color(11)
    assert stream.getvalue() != other_stream.getvalue()
    assert stream.getvalue().startswith("\x1b[")


def test_window_title_and_size():
    screen, stream = _screen()
    screen.set_window_size_and_title(41, 32)
    output = stream.getvalue()
    assert TITLE in output
    assert "32" in output


@pytest.mark.parametrize(
    "codes, expected",
    [
        ((224, 72), Key.UP),
        ((224, 80), Key.DOWN),
        ((224, 75), Key.LEFT),
        ((224, 77), Key.RIGHT),
        ((0, 72), Key.UP),
        ((27,), Key.ESC),
        ((13,), Key.ENTER),
        ((10,), Key.ENTER),
        ((27, 91, 65), Key.UP),
        ((27, 91, 66), Key.DOWN),
        ((27, 91, 67), Key.RIGHT),
        ((27, 91, 68), Key.LEFT),
        ((97,), Key.OTHER),
        ((224, 59), Key.OTHER),
    ],
)
def test_decode_key(codes, expected):
    assert decode_key(codes) is expected


def test_decode_key_rejects_empty():
    with pytest.raises(ValueError):
        decode_key(())