import pytest

from leafedit.buffer import TextBuffer
from leafedit.undo import Command, UndoManager
from leafedit.view import Key, KeyTracker


@pytest.fixture
def editor():
    buffer = TextBuffer()
    keys = KeyTracker()
    return buffer, keys, UndoManager(buffer, keys)


def type_text(buffer, keys, text):
    for ch in text:
        keys.press(ord(ch))
        with buffer.user_action():
            buffer.insert_at_cursor(ch)


def paste(buffer, keys, text):
    keys.press(ord("v"), control=True)
    with buffer.user_action():
        buffer.insert_at_cursor(text)


def backspace(buffer, keys):
    keys.press(Key.BACKSPACE)
    with buffer.user_action():
        cursor = buffer.cursor
        buffer.delete(cursor - 1, cursor)


def delete_forward(buffer, keys):
    keys.press(Key.DELETE)
    with buffer.user_action():
        cursor = buffer.cursor
        buffer.delete(cursor, cursor + 1)


def test_typed_run_undone_at_once(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "abc")
    assert buffer.text == "abc"
    undo.undo()
    assert buffer.text == ""
    assert buffer.cursor == 0


def test_space_ends_a_word_group(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "ab c")
    undo.undo()
    assert buffer.text == "ab "
    undo.undo()
    assert buffer.text == ""


def test_redo_restores_text(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "hello")
    undo.undo()
    undo.redo()
    assert buffer.text == "hello"
    assert buffer.cursor == len("hello")


def test_backspace_run_is_merged(editor):
    buffer, keys, undo = editor
    paste(buffer, keys, "abc")
    backspace(buffer, keys)
    backspace(buffer, keys)
    assert buffer.text == "a"
    undo.undo()
    assert buffer.text == "abc"
    assert buffer.cursor == 3
    last = undo.redo_stack[-1]
    assert last.command is Command.BACKSPACE
    assert last.text == "bc"


def test_delete_run_is_merged(editor):
    buffer, keys, undo = editor
    paste(buffer, keys, "abc")
    buffer.place_cursor(0)
    delete_forward(buffer, keys)
    delete_forward(buffer, keys)
    assert buffer.text == "c"
    undo.undo()
    assert buffer.text == "abc"
    assert buffer.cursor == 0
    assert undo.redo_stack[-1].command is Command.DELETE


def test_paste_is_a_single_record(editor):
    buffer, keys, undo = editor
    paste(buffer, keys, "hello")
    assert [info.text for info in undo.undo_stack] == ["hello"]
    undo.undo()
    assert buffer.text == ""


def test_edits_outside_user_action_are_not_recorded(editor):
    buffer, keys, undo = editor
    buffer.insert(0, "zz")
    assert undo.undo_stack == ()
    undo.undo()
    assert buffer.text == "zz"


def test_new_edit_clears_redo(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "a")
    undo.undo()
    assert len(undo.redo_stack) == 1
    type_text(buffer, keys, "b")
    assert undo.redo_stack == ()


def test_sensitivity_follows_history(editor):
    buffer, keys, undo = editor
    assert (undo.undo_sensitive, undo.redo_sensitive) == (False, False)
    type_text(buffer, keys, "a")
    assert (undo.undo_sensitive, undo.redo_sensitive) == (True, False)
    undo.undo()
    assert (undo.undo_sensitive, undo.redo_sensitive) == (False, True)
    undo.redo()
    assert (undo.undo_sensitive, undo.redo_sensitive) == (True, False)


def test_undo_back_to_start_clears_modified(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "abc")
    assert buffer.modified is True
    undo.undo()
    assert buffer.modified is False
    undo.redo()
    assert buffer.modified is True


def test_reset_modified_step_marks_saved_point(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "a")
    undo.reset_modified_step()
    buffer.set_modified(False)
    type_text(buffer, keys, "b")
    assert buffer.modified is True
    undo.undo()
    assert buffer.text == "a"
    assert buffer.modified is False


def test_set_sequence_chains_records(editor):
    buffer, keys, undo = editor
    paste(buffer, keys, "x")
    undo.set_sequence(True)
    paste(buffer, keys, "y")
    undo.undo()
    assert buffer.text == ""
    undo.redo()
    assert buffer.text == "xy"


def test_reserve_sequence_marks_next_record(editor):
    buffer, keys, undo = editor
    undo.reserve_sequence()
    paste(buffer, keys, "first")
    paste(buffer, keys, "second")
    assert [info.seq for info in undo.undo_stack] == [True, False]
    undo.undo()
    assert buffer.text == ""


def test_keyless_insert_after_typing_is_chained(editor):
    buffer, keys, undo = editor
    type_text(buffer, keys, "a")
    keys.clear()
    with buffer.user_action():
        buffer.insert_at_cursor("xyz")
    undo.undo()
    assert buffer.text == ""


def test_clear_all_forgets_history(editor):
    buffer, keys, undo = editor
    paste(buffer, keys, "one")
    paste(buffer, keys, "two")
    undo.clear_all()
    assert undo.undo_stack == ()
    assert undo.redo_stack == ()
    undo.undo()
    assert buffer.text == "onetwo"


def test_undo_with_empty_history_returns_false(editor):
    buffer, keys, undo = editor
    assert undo.undo_step() is False
    assert undo.redo_step() is False
    assert buffer.text == ""