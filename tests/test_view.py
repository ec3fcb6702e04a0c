import pytest

from leafedit.buffer import TextBuffer
from leafedit.view import (
    CONTROL_OFFSET,
    Key,
    KeyTracker,
    jump_to_line,
    save_sensitive,
    selection_spans_lines,
    window_title,
)


def test_key_tracker_plain_and_control():
    keys = KeyTracker()
    assert keys.keyval == 0
    assert keys.press(ord("a")) == ord("a")
    assert keys.keyval == ord("a")
    assert keys.press(Key.TAB, control=True) == Key.TAB + 0x10000
    assert keys.keyval == Key.TAB + CONTROL_OFFSET


def test_key_tracker_control_keys_themselves():
    keys = KeyTracker()
    for key in (Key.CONTROL_L, Key.CONTROL_R):
        assert keys.press(key) == key + CONTROL_OFFSET


def test_key_tracker_clear():
    keys = KeyTracker()
    keys.press(Key.BACKSPACE)
    keys.clear()
    assert keys.keyval == 0


def test_selection_spans_lines():
    buf = TextBuffer("ab\ncd")
    assert selection_spans_lines(buf) is False
    buf.select_range(0, 2)
    assert selection_spans_lines(buf) is False
    buf.select_range(4, 1)
    assert selection_spans_lines(buf) is True


@pytest.mark.parametrize("modified", [True, False])
def test_window_title(modified):
    title = window_title("notes.txt", modified)
    assert title.endswith("notes.txt")
    assert title.startswith("*") is modified


@pytest.mark.parametrize(
    "modified, exists, expected",
    [(True, True, True), (False, True, False), (False, False, True), (True, False, True)],
)
def test_save_sensitive(modified, exists, expected):
    assert save_sensitive(modified, exists) is expected


def test_jump_to_line():
    buf = TextBuffer("alpha\nbeta\ngamma")
    offset = jump_to_line(buf, 3)
    assert buf.cursor == offset
    assert buf.line_at_offset(offset) == 2
    assert buf.get_text(offset) == "gamma"
    assert jump_to_line(buf, 99) == len(buf)
    with pytest.raises(ValueError):
        jump_to_line(buf, 0)