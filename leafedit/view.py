"""Editor-view helpers: key tracking, window titles and cursor movement."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from leafedit.buffer import TextBuffer

CONTROL_OFFSET = 0x10000


class Key(IntEnum):
    """Key values the editor treats specially."""

    SPACE = 0x0020
    BACKSPACE = 0xFF08
    TAB = 0xFF09
    RETURN = 0xFF0D
    ISO_LEFT_TAB = 0xFE20
    UP = 0xFF52
    DOWN = 0xFF54
    PAGE_UP = 0xFF55
    PAGE_DOWN = 0xFF56
    CONTROL_L = 0xFFE3
    CONTROL_R = 0xFFE4
    DELETE = 0xFFFF


@dataclass
class KeyTracker:
    """Remembers the last key pressed, shifted out of range when Control is held."""

    keyval: int = 0

    def __init__(self) -> None:
        self.keyval = 0

    def press(self, keyval: int, control: bool = False) -> int:
        """Record a key press and return the value stored for it."""
        if control or keyval in (Key.CONTROL_L, Key.CONTROL_R):
            keyval += CONTROL_OFFSET
        self.keyval = keyval
        return keyval

    def clear(self) -> None:
        self.keyval = 0


def selection_spans_lines(buffer: TextBuffer) -> bool:
    """Whether the selection contains a line break."""
    if not buffer.has_selection():
        return False
    return "\n" in buffer.get_text(*buffer.selection_bounds())


def window_title(basename: str, modified: bool) -> str:
    """The main window title, starred while there are unsaved changes."""
    return f"*{basename}" if modified else basename


def save_sensitive(modified: bool, file_exists: bool) -> bool:
    """Whether Save is offered: for unsaved changes or a file not yet on disk."""
    return modified or not file_exists


def jump_to_line(buffer: TextBuffer, line: int) -> int:
    """Put the cursor at the start of one-based *line*; return its offset."""
    if line < 1:
        raise ValueError(f"line numbers start at 1, got {line}")
    offset = buffer.offset_at_line(line - 1)
    buffer.place_cursor(offset)
    return offset