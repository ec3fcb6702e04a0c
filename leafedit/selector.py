"""Character-coding and line-ending choices offered by the open and save dialogs."""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Iterable, Optional

AUTO_DETECT_LABEL = "Auto-Detect"
OTHER_CODESET_TITLE = "Other Codeset"
CURRENT_LOCALE_LABEL = "Current Locale ({})"
UTF8 = "UTF-8"


class LineEnd(Enum):
    """Line terminators, in the order the save dialog lists them."""

    LF = "LF"
    CRLF = "CR+LF"
    CR = "CR"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_index(cls, index: int) -> LineEnd:
        """The line end for a menu position; unknown positions mean LF."""
        return {1: cls.CRLF, 2: cls.CR}.get(index, cls.LF)


class DialogMode(IntEnum):
    """Whether a file dialog saves or opens."""

    SAVE = 0
    OPEN = 1


@dataclass
class FileInfo:
    """What is known about the file being edited."""

    filename: Optional[str] = None
    charset: Optional[str] = None
    charset_flag: bool = False
    lineend: LineEnd = LineEnd.LF

    def copy(self) -> FileInfo:
        return replace(self)


def lineend_index(lineend: LineEnd) -> int:
    """Position of *lineend* in the line-ending menu."""
    return list(LineEnd).index(lineend)


def manual_charset_label(manual_charset: Optional[str]) -> str:
    """Label of the menu entry for a codeset typed in by hand."""
    if manual_charset:
        return f"{OTHER_CODESET_TITLE} ({manual_charset})"
    return f"{OTHER_CODESET_TITLE}..."


def charset_supported(name: str) -> bool:
    """Whether text in codeset *name* can be converted to Unicode."""
    if not name:
        return False
    try:
        b"TEST".decode(name)
    except (LookupError, UnicodeError, TypeError, ValueError):
        return False
    return True


def set_manual_charset(info: FileInfo, name: str) -> str:
    """Use a hand-typed codeset for *info*; return the new menu label.

    Raises ValueError when the codeset is not supported.
    """
    if not charset_supported(name):
        raise ValueError(f"'{name}' is not supported")
    info.charset = name
    info.charset_flag = True
    return manual_charset_label(name)


def directory_path(path: str) -> str:
    """*path* with a trailing directory separator, for descending into it."""
    if not path or not path.endswith(os.sep):
        return path + os.sep
    return path


class CharsetTable:
    """The fixed codeset entries: the locale's, UTF-8, then the region's extras."""

    def __init__(self, default_charset: str, encoding_items: Iterable[Optional[str]] = ()) -> None:
        self.charsets: list[str] = [default_charset, UTF8]
        self.labels: list[str] = [CURRENT_LOCALE_LABEL.format(default_charset), UTF8]
        for item in encoding_items:
            if item:
                self.charsets.append(item)
                self.labels.append(item)

    def __len__(self) -> int:
        return len(self.charsets)

    def menu_labels(self, mode: DialogMode, manual_charset: Optional[str] = None) -> list[str]:
        """All labels of the codeset menu, including the hand-typed entry at the end."""
        labels = [AUTO_DETECT_LABEL] if mode == DialogMode.OPEN else []
        labels.extend(self.labels)
        labels.append(manual_charset_label(manual_charset))
        return labels

    def initial_index(self, info: FileInfo, mode: DialogMode) -> Optional[int]:
        """Menu position to preselect for *info*, or None to leave it unset.

        When opening without a hand-picked codeset, the codeset in *info* is
        dropped so that it is detected again.  A codeset missing from the
        table maps to the hand-typed entry.
        """
        index = 0
        if info.charset:
            wanted = info.charset.lower()
            index = next(
                (i for i, charset in enumerate(self.charsets) if charset.lower() == wanted),
                len(self.charsets),
            )
            if mode == DialogMode.OPEN and not info.charset_flag:
                info.charset = None
            index += int(mode)
        if mode == DialogMode.SAVE or info.charset_flag:
            return index
        return None

    def select(self, info: FileInfo, index: int, mode: DialogMode) -> bool:
        """Apply the menu entry at *index* to *info*.

        Returns False when *index* is the hand-typed entry, which the caller
        settles with :func:`set_manual_charset`.
        """
        offset = int(mode)
        manual = len(self.charsets) + offset
        if not 0 <= index <= manual:
            raise IndexError(f"menu index {index} outside 0..{manual}")
        if index == manual:
            return False
        if index == 0 and mode == DialogMode.OPEN:
            info.charset = None
        else:
            info.charset = self.charsets[index - offset]
        return True