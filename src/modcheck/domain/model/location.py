"""Source code location value objects."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Position:
    """Point in source text.

    Attributes:
        line: Line number (1-based, must be > 0)
        column: Column number (0-based, must be >= 0)
    """

    line: int
    column: int

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.line <= 0:
            raise ValueError(f"line must be > 0, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")

    def __str__(self) -> str:
        """Format as line:column."""
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, slots=True)
class Location:
    """Range in source text, derived from a node when an error is raised.

    Attributes:
        start: First position of the range
        end: Position just past the range (must not precede start)
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.start is None or self.end is None:
            raise TypeError("start and end must not be None")
        if (self.end.line, self.end.column) < (self.start.line, self.start.column):
            raise ValueError(f"end ({self.end}) must not precede start ({self.start})")

    def __str__(self) -> str:
        """Format as start-end."""
        return f"{self.start}-{self.end}"
