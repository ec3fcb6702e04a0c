"""Search-history lists and reading piped standard input."""

from __future__ import annotations

import io
import select
from typing import IO, AnyStr, Iterator, Optional

STDIN_DELAY = 0.1


class History:
    """Recently used entries, newest first and without duplicates."""

    def __init__(self) -> None:
        self.items: list[str] = []

    def update(self, text: str) -> None:
        """Move *text* to the front; empty text is ignored."""
        if not text:
            return
        if text in self.items:
            self.items.remove(text)
        self.items.insert(0, text)

    def __iter__(self) -> Iterator[str]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def _ready(stream: IO[AnyStr], timeout: float) -> bool:
    try:
        fd = stream.fileno()
    except (AttributeError, io.UnsupportedOperation, ValueError):
        return True
    readable, _, _ = select.select([fd], [], [], timeout)
    return bool(readable)


def read_stdin(stream: IO[AnyStr], timeout: float = STDIN_DELAY) -> Optional[AnyStr]:
    """Read all of *stream* if data arrives within *timeout* seconds.

    Returns None when nothing is waiting or the read fails.  The stream is
    closed after a successful read.
    """
    if not _ready(stream, timeout):
        return None
    try:
        data = stream.read()
    except OSError:
        return None
    stream.close()
    return data