"""Find, find-next/previous and replace over a text buffer."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Callable, Optional

from leafedit.buffer import TextBuffer
from leafedit.undo import UndoManager

Span = tuple[int, int]
Confirm = Callable[[int, int], Optional[bool]]

NOT_FOUND_MESSAGE = "Search string not found"
REPLACED_MESSAGE = "{} strings replaced"


class Direction(IntEnum):
    """How a search was started.

    ``DIALOG`` comes from the Find dialog: it always re-highlights and reports
    a miss.  ``REPLACE`` is used while replacing and never re-highlights.
    """

    BACKWARD = -1
    DIALOG = 0
    FORWARD = 1
    REPLACE = 2


@dataclass
class SearchState:
    """The remembered search settings shared by the Find and Replace dialogs."""

    find: str | None = None
    replace: str = ""
    match_case: bool = False
    replace_all: bool = False


def _pattern(pattern: str, match_case: bool) -> re.Pattern[str]:
    if not pattern:
        raise ValueError("empty search pattern")
    flags = 0 if match_case else re.IGNORECASE
    return re.compile(re.escape(pattern), flags)


def find_forward(text: str, pattern: str, start: int, match_case: bool) -> Span | None:
    """Return the first match starting at or after *start*, or None."""
    match = _pattern(pattern, match_case).search(text, start)
    return match.span() if match else None


def find_backward(text: str, pattern: str, start: int, match_case: bool) -> Span | None:
    """Return the last match ending at or before *start*, or None."""
    regex = _pattern(pattern, match_case)
    for position in range(start - 1, -1, -1):
        match = regex.match(text, position, start)
        if match:
            return match.span()
    return None


class Searcher:
    """Runs searches and replacements on a buffer using a shared state."""

    def __init__(
        self,
        buffer: TextBuffer,
        state: SearchState,
        undo: UndoManager | None = None,
    ) -> None:
        self.buffer = buffer
        self.state = state
        self.undo = undo
        self.searched: list[Span] = []
        self.replaced: list[Span] = []
        self.notify: Callable[[str], None] = lambda message: None

    @property
    def highlighted(self) -> bool:
        """Whether matches of the current search are highlighted."""
        return bool(self.searched)

    def _find_forward(self, start: int) -> Span | None:
        return find_forward(
            self.buffer.text, self.state.find or "", start, self.state.match_case
        )

    def _find_backward(self, start: int) -> Span | None:
        return find_backward(
            self.buffer.text, self.state.find or "", start, self.state.match_case
        )

    def highlight(self) -> bool:
        """Highlight every match of the search string; return whether any."""
        if not self.state.find:
            return False
        self.searched = []
        self.replaced = []
        position = 0
        while (span := self._find_forward(position)) is not None:
            self.searched.append(span)
            position = span[1]
        return bool(self.searched)

    def search(self, direction: Direction | int = Direction.FORWARD) -> bool:
        """Select the next match in *direction*, wrapping around; return success."""
        if not self.state.find:
            return False

        if direction == Direction.DIALOG or (
            direction != Direction.REPLACE and not self.highlighted
        ):
            self.highlight()

        cursor = self.buffer.cursor
        if direction < 0:
            span = self._find_backward(cursor)
            if span is not None and span[1] == cursor:
                span = self._find_backward(span[0])
            if span is None:
                span = self._find_backward(len(self.buffer))
        else:
            span = self._find_forward(cursor)
            if span is None:
                span = self._find_forward(0)

        if span is not None:
            start, end = span
            self.buffer.select_range(end, start)
            return True
        if direction == Direction.DIALOG:
            self.notify(NOT_FOUND_MESSAGE)
        return False

    def _set_sequence(self, seq: bool) -> None:
        if self.undo is not None:
            self.undo.set_sequence(seq)

    def _replace_selection(self) -> int:
        """Replace the selected match; return the offset just after the new text."""
        with self.buffer.user_action():
            self.buffer.delete_selection()
        replacement = self.state.replace
        if replacement:
            offset = self.buffer.cursor
            self._set_sequence(True)
            with self.buffer.user_action():
                self.buffer.insert_at_cursor(replacement)
            self.replaced.append((offset, self.buffer.cursor))
        return self.buffer.cursor

    def replace(self, confirm: Confirm | None = None) -> int:
        """Replace matches of the search string and return how many were replaced.

        Unless ``replace_all`` is set, *confirm* is asked about each match with
        its ``(start, end)``: True replaces it, False skips it and None stops.
        Stopping before any replacement returns -1.
        """
        if not self.state.find:
            return 0
        replace_all = self.state.replace_all
        if not replace_all and confirm is None:
            raise ValueError("interactive replace needs a confirm callback")

        count = 0
        initial = self.buffer.cursor
        position = 0
        if replace_all:
            self.searched = []
            self.replaced = []
        else:
            self.highlight()

        while True:
            if replace_all:
                span = self._find_forward(position)
                if span is None:
                    break
                start, end = span
                self.buffer.select_range(end, start)
            else:
                if not self.search(Direction.REPLACE):
                    break
                start, end = self.buffer.selection_bounds()
                answer = confirm(start, end)
                if answer is None:
                    if count == 0:
                        count = -1
                    break
                if not answer:
                    continue
                self.buffer.select_range(start, end)

            removed = end - start
            position = self._replace_selection()
            added = len(self.state.replace)
            if initial >= end:
                initial += added - removed
            elif initial >= start:
                initial = start + added
            count += 1
            self._set_sequence(replace_all)

        if replace_all:
            self.buffer.place_cursor(min(initial, len(self.buffer)))
            self.notify(REPLACED_MESSAGE.format(count))
            self._set_sequence(False)
        return count