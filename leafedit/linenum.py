"""Layout of the line-number gutter beside the text."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

MARGIN = 5
SUBMARGIN = 2
MIN_COLUMNS = 2
MIN_LABEL_VALUE = 99


@dataclass(frozen=True)
class NumberLabel:
    """A line number to draw at a position in the gutter."""

    x: int
    y: int
    text: str


def _line_at_y(line_heights: Sequence[int], y: int) -> tuple[int, int]:
    """Return ``(line, top)`` of the line covering *y*, clamped to the buffer."""
    top = 0
    for line, height in enumerate(line_heights):
        if y < top + height:
            return line, top
        top += height
    last = len(line_heights) - 1
    return last, top - line_heights[last]


def visible_lines(line_heights: Sequence[int], y1: int, y2: int) -> list[tuple[int, int]]:
    """Return ``(y, line)`` pairs for lines from the one at *y1* until one reaches *y2*."""
    if not line_heights:
        return []
    first, top = _line_at_y(line_heights, y1)
    result = []
    for line, height in enumerate(line_heights[first:], start=first):
        result.append((top, line))
        if top + height >= y2:
            break
        top += height
    return result


def number_label_width(line_count: int, char_width: int) -> int:
    """Width of the widest label, never narrower than a two-digit number."""
    return len(str(max(MIN_LABEL_VALUE, line_count))) * char_width


class LineNumberGutter:
    """The left border window showing line numbers, hidden by default."""

    def __init__(self, char_width: int) -> None:
        if char_width <= 0:
            raise ValueError(f"character width must be positive, got {char_width}")
        self.char_width = char_width
        self.min_width = MIN_COLUMNS * char_width
        self.visible = False
        self.border_width = SUBMARGIN
        self.show(False)

    def show(self, visible: bool) -> None:
        """Show or hide the numbers, resizing the border to match."""
        self.visible = bool(visible)
        if self.visible:
            self.border_width = self.min_width + MARGIN + SUBMARGIN
        else:
            self.border_width = SUBMARGIN

    def layout(self, line_heights: Sequence[int], y1: int, y2: int) -> list[NumberLabel]:
        """Labels to draw for the area from *y1* to *y2*; empty while hidden."""
        if not self.visible:
            return []

        lines = visible_lines(line_heights, y1, y2) or [(0, 0)]

        label_width = number_label_width(len(line_heights), self.char_width)
        justify = 0
        if label_width > self.min_width:
            self.border_width = label_width + MARGIN + SUBMARGIN
        else:
            self.border_width = self.min_width + MARGIN + SUBMARGIN
            justify = self.min_width - label_width

        x = label_width + justify + MARGIN // 2 + 1
        return [NumberLabel(x, y, str(line + 1)) for y, line in lines]