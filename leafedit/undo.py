"""Undo and redo history for a text buffer, merging runs of typed keys."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from leafedit.buffer import TextBuffer
from leafedit.view import Key, KeyTracker

# Key values at or above this are function keys, not printable characters.
_FUNCTION_KEYS = 0xF000


class Command(IntEnum):
    """The kind of edit an undo record reverses."""

    INSERT = 0
    BACKSPACE = 1
    DELETE = 2


@dataclass
class UndoInfo:
    """One recorded edit; ``seq`` chains it to the record that follows."""

    command: Command
    start: int
    end: int
    text: str
    seq: bool = False


class UndoManager:
    """Records user edits on a buffer and replays them backwards and forwards.

    Only edits made inside :meth:`TextBuffer.user_action` are recorded, so
    the manager's own undo and redo edits never enter the history.
    """

    def __init__(self, buffer: TextBuffer, keys: KeyTracker) -> None:
        self._buffer = buffer
        self._keys = keys
        self._undo: list[UndoInfo] = []
        self._redo: list[UndoInfo] = []
        self._pending = ""
        self._pending_command = Command.INSERT
        self._pending_start = 0
        self._pending_end = 0
        self._modified_step = 0
        self._prev_keyval = 0
        self._seq_reserve = False
        self._recording = False
        self.undo_sensitive = False
        self.redo_sensitive = False

        buffer.connect("insert-text", self._on_insert_text)
        buffer.connect("delete-range", self._on_delete_range)
        buffer.connect("begin-user-action", self._on_begin_user_action)
        buffer.connect("end-user-action", self._on_end_user_action)
        self.clear_all()

    # -- inspection --------------------------------------------------------

    @property
    def undo_stack(self) -> tuple[UndoInfo, ...]:
        """Committed undo records, oldest first (the typing run is not included)."""
        return tuple(self._undo)

    @property
    def redo_stack(self) -> tuple[UndoInfo, ...]:
        """Redo records; the last one is redone first."""
        return tuple(self._redo)

    # -- signal handlers ---------------------------------------------------

    def _on_begin_user_action(self, buffer: TextBuffer) -> None:
        self._recording = True

    def _on_end_user_action(self, buffer: TextBuffer) -> None:
        self._recording = False

    def _on_insert_text(self, buffer: TextBuffer, end: int, text: str) -> None:
        if self._recording:
            self._record(Command.INSERT, end - len(text), end)

    def _on_delete_range(self, buffer: TextBuffer, start: int, end: int) -> None:
        if not self._recording:
            return
        if self._keys.keyval == Key.BACKSPACE:
            command = Command.BACKSPACE
        else:
            command = Command.DELETE
        self._record(command, start, end)

    # -- recording ---------------------------------------------------------

    def _append(self, command: Command, start: int, end: int, text: str) -> None:
        self._undo.append(UndoInfo(command, start, end, text, self._seq_reserve))
        self._seq_reserve = False

    def _flush(self) -> None:
        if self._pending:
            self._append(
                self._pending_command,
                self._pending_start,
                self._pending_end,
                self._pending,
            )
            self._pending = ""

    def _continues_run(self, command: Command, start: int, end: int, keyval: int) -> bool:
        if end - start != 1 or command != self._pending_command:
            return False
        if keyval == Key.BACKSPACE:
            return end == self._pending_start
        if keyval == Key.DELETE:
            return start == self._pending_start
        if keyval in (Key.TAB, Key.SPACE):
            return start == self._pending_end
        return (
            start == self._pending_end
            and 0 < keyval < _FUNCTION_KEYS
            and self._prev_keyval not in (Key.RETURN, Key.TAB, Key.SPACE)
        )

    def _record(self, command: Command, start: int, end: int) -> None:
        keyval = self._keys.keyval
        text = self._buffer.get_text(start, end)

        if self._pending:
            if self._continues_run(command, start, end, keyval):
                if command is Command.BACKSPACE:
                    self._pending = text + self._pending
                    self._pending_start -= 1
                else:
                    self._pending += text
                    self._pending_end += 1
                self._redo.clear()
                self._prev_keyval = keyval
                self.undo_sensitive = True
                self.redo_sensitive = False
                return
            self._flush()

        if not keyval and self._prev_keyval:
            self.set_sequence(True)

        single_key = (0 < keyval < _FUNCTION_KEYS) or keyval in (
            Key.BACKSPACE,
            Key.DELETE,
            Key.TAB,
        )
        if end - start == 1 and single_key:
            self._pending_command = command
            self._pending_start = start
            self._pending_end = end
            self._pending = text
        else:
            self._append(command, start, end, text)

        self._redo.clear()
        self._prev_keyval = keyval
        self._keys.clear()
        self.undo_sensitive = True
        self.redo_sensitive = False

    # -- public operations ---------------------------------------------------

    def clear_all(self) -> None:
        """Forget all history and mark the current state as the saved one."""
        self._undo.clear()
        self._redo.clear()
        self.reset_modified_step()
        self.undo_sensitive = False
        self.redo_sensitive = False
        self._pending_command = Command.INSERT
        self._pending = ""
        self._prev_keyval = 0

    def reset_modified_step(self) -> None:
        """Mark the current point in the history as the unmodified state."""
        self._flush()
        self._modified_step = len(self._undo)

    def _check_modified_step(self) -> None:
        at_saved = self._modified_step == len(self._undo)
        if self._buffer.modified == at_saved:
            self._buffer.set_modified(not at_saved)

    def set_sequence(self, seq: bool) -> None:
        """Chain (or unchain) the newest record with the one that will follow."""
        if self._undo:
            self._undo[-1].seq = bool(seq)

    def reserve_sequence(self) -> None:
        """Make the next recorded edit chain with the one after it."""
        self._seq_reserve = True

    def undo_step(self) -> bool:
        """Undo one record; return True when the next one belongs with it."""
        self._flush()
        if self._undo:
            info = self._undo.pop()
            if info.command is Command.INSERT:
                self._buffer.delete(info.start, info.end)
                cursor = info.start
            else:
                self._buffer.insert(info.start, info.text)
                if info.command is Command.DELETE:
                    cursor = info.start
                else:
                    cursor = info.start + len(info.text)
            self._redo.append(info)
            if self._undo:
                if self._undo[-1].seq:
                    return True
            else:
                self.undo_sensitive = False
            self.redo_sensitive = True
            self._buffer.place_cursor(cursor)
        self._check_modified_step()
        return False

    def redo_step(self) -> bool:
        """Redo one record; return True when the next one belongs with it."""
        if self._redo:
            info = self._redo.pop()
            if info.command is Command.INSERT:
                self._buffer.insert(info.start, info.text)
                cursor = info.start + len(info.text)
            else:
                self._buffer.delete(info.start, info.end)
                cursor = info.start
            self._undo.append(info)
            if info.seq:
                self.set_sequence(True)
                return True
            if not self._redo:
                self.redo_sensitive = False
            self.undo_sensitive = True
            self._buffer.place_cursor(cursor)
        self._check_modified_step()
        return False

    def undo(self) -> None:
        """Undo one whole chained group of records."""
        while self.undo_step():
            pass

    def redo(self) -> None:
        """Redo one whole chained group of records."""
        while self.redo_step():
            pass