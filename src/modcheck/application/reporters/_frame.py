"""Code frame: source excerpt around a location with caret markers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modcheck.domain.model.location import Location

# Same line breaks as SourceFile's line table
_LINE_BREAK = re.compile(r"\r\n|\r|\n|\u2028|\u2029")


@dataclass(frozen=True, slots=True)
class FrameLine:
    """One excerpt line.

    Attributes:
        number: Line number (1-based)
        text: Line text without line break
        marker: Caret line under the located range, None outside it
    """

    number: int
    text: str
    marker: str | None = None


def build_frame(text: str, location: Location, context_lines: int = 2) -> tuple[FrameLine, ...]:
    """Excerpt lines around location.

    Args:
        text: Source text
        location: Range to mark
        context_lines: Lines shown before start and after end (must be >= 0)

    Returns:
        Lines from start.line - context_lines to end.line + context_lines
    """
    if context_lines < 0:
        raise ValueError(f"context_lines must be >= 0, got {context_lines}")

    lines = _LINE_BREAK.split(text)
    start, end = location.start, location.end
    first = max(start.line - context_lines, 1)
    last = min(end.line + context_lines, len(lines))

    frame: list[FrameLine] = []
    for number in range(first, last + 1):
        line_text = lines[number - 1]
        marker = None
        if start.line <= number <= end.line:
            col_start = start.column if number == start.line else 0
            col_end = end.column if number == end.line else len(line_text)
            marker = " " * col_start + "^" * max(col_end - col_start, 1)
        frame.append(FrameLine(number=number, text=line_text, marker=marker))

    return tuple(frame)


def gutter_width(frame: tuple[FrameLine, ...]) -> int:
    """Width of the widest line number in frame."""
    if not frame:
        return 1
    return len(str(frame[-1].number))
