"""An in-memory text buffer with a cursor, a selection and change signals."""

from __future__ import annotations

from collections import defaultdict
from contextlib import contextmanager
from itertools import count
from typing import Any, Callable, Iterator

Handler = Callable[..., Any]

SIGNALS = frozenset(
    {
        "insert-text",
        "delete-range",
        "modified-changed",
        "mark-set",
        "begin-user-action",
        "end-user-action",
    }
)


class TextBuffer:
    """Editable text with an insert mark, a selection bound and a modified flag.

    Signals and their handler arguments:

    * ``insert-text``: ``(buffer, end_offset, text)``, after the text went in.
    * ``delete-range``: ``(buffer, start, end)``, before the text goes away.
    * ``modified-changed``: ``(buffer,)``, when the modified flag flips.
    * ``mark-set``: ``(buffer,)``, when the cursor or selection moves.
    * ``begin-user-action`` / ``end-user-action``: ``(buffer,)``, around
      the outermost :meth:`user_action` block.
    """

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._insert = 0
        self._bound = 0
        self._modified = False
        self._action_depth = 0
        self._handlers: dict[str, dict[int, Handler]] = defaultdict(dict)
        self._ids = count(1)

    # -- signals -----------------------------------------------------------

    def connect(self, signal: str, handler: Handler) -> int:
        """Attach *handler* to *signal* and return an id for :meth:`disconnect`."""
        if signal not in SIGNALS:
            raise ValueError(f"unknown signal: {signal!r}")
        handler_id = next(self._ids)
        self._handlers[signal][handler_id] = handler
        return handler_id

    def disconnect(self, handler_id: int) -> None:
        """Detach the handler registered under *handler_id*."""
        for handlers in self._handlers.values():
            if handlers.pop(handler_id, None) is not None:
                return
        raise KeyError(handler_id)

    def _emit(self, signal: str, *args: Any) -> None:
        for handler in list(self._handlers[signal].values()):
            handler(self, *args)

    @contextmanager
    def user_action(self) -> Iterator[TextBuffer]:
        """Group edits into one user action; only the outermost block signals."""
        self._action_depth += 1
        if self._action_depth == 1:
            self._emit("begin-user-action")
        try:
            yield self
        finally:
            self._action_depth -= 1
            if self._action_depth == 0:
                self._emit("end-user-action")

    # -- text --------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._text

    def __len__(self) -> int:
        return len(self._text)

    def _check_offset(self, offset: int) -> int:
        if not 0 <= offset <= len(self._text):
            raise IndexError(f"offset {offset} outside 0..{len(self._text)}")
        return offset

    def get_text(self, start: int = 0, end: int | None = None) -> str:
        """Return the text between two offsets, in either order."""
        end = len(self._text) if end is None else end
        start, end = sorted((self._check_offset(start), self._check_offset(end)))
        return self._text[start:end]

    def insert(self, offset: int, text: str) -> None:
        """Insert *text* at *offset*; marks at or after it move past the text."""
        self._check_offset(offset)
        if not text:
            return
        size = len(text)
        self._text = self._text[:offset] + text + self._text[offset:]
        if self._insert >= offset:
            self._insert += size
        if self._bound >= offset:
            self._bound += size
        self.set_modified(True)
        self._emit("insert-text", offset + size, text)

    def delete(self, start: int, end: int) -> None:
        """Delete the text between two offsets, in either order."""
        start, end = sorted((self._check_offset(start), self._check_offset(end)))
        if start == end:
            return
        self._emit("delete-range", start, end)
        size = end - start
        self._text = self._text[:start] + self._text[end:]

        def shift(mark: int) -> int:
            if mark >= end:
                return mark - size
            return min(mark, start)

        self._insert = shift(self._insert)
        self._bound = shift(self._bound)
        self.set_modified(True)

    def insert_at_cursor(self, text: str) -> None:
        self.insert(self._insert, text)

    def delete_selection(self) -> bool:
        """Delete the selected text; return whether there was any."""
        if not self.has_selection():
            return False
        self.delete(*self.selection_bounds())
        return True

    # -- cursor and selection ---------------------------------------------

    @property
    def cursor(self) -> int:
        """Offset of the insert mark."""
        return self._insert

    @property
    def bound(self) -> int:
        """Offset of the selection-bound mark."""
        return self._bound

    def place_cursor(self, offset: int) -> None:
        """Move both marks to *offset*, clearing the selection."""
        self.select_range(offset, offset)

    def select_range(self, insert: int, bound: int) -> None:
        self._insert = self._check_offset(insert)
        self._bound = self._check_offset(bound)
        self._emit("mark-set")

    def selection_bounds(self) -> tuple[int, int]:
        """Return the selection as an ordered ``(start, end)`` pair."""
        start, end = sorted((self._insert, self._bound))
        return start, end

    def has_selection(self) -> bool:
        return self._insert != self._bound

    # -- lines -------------------------------------------------------------

    def line_count(self) -> int:
        return self._text.count("\n") + 1

    def line_at_offset(self, offset: int) -> int:
        """Zero-based line number holding *offset*."""
        return self._text.count("\n", 0, self._check_offset(offset))

    def offset_at_line(self, line: int) -> int:
        """Offset of the start of zero-based *line*; past the end gives the end."""
        if line < 0:
            raise ValueError(f"negative line number: {line}")
        offset = 0
        for _ in range(line):
            newline = self._text.find("\n", offset)
            if newline < 0:
                return len(self._text)
            offset = newline + 1
        return offset

    # -- modified flag -----------------------------------------------------

    @property
    def modified(self) -> bool:
        return self._modified

    def set_modified(self, modified: bool) -> None:
        modified = bool(modified)
        if modified != self._modified:
            self._modified = modified
            self._emit("modified-changed")