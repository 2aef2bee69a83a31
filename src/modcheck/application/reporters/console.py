"""Console reporter: PlacementError -> rich formatted string."""

from __future__ import annotations

from dataclasses import dataclass
from io import StringIO
from typing import TYPE_CHECKING

from rich.console import Console
from rich.text import Text

from modcheck.application.reporters._frame import build_frame, gutter_width

if TYPE_CHECKING:
    from modcheck.domain.exceptions.placement import PlacementError


@dataclass(frozen=True, slots=True)
class ConsoleConfig:
    """Configuration for console reporter.

    Attributes:
        color: Emit ANSI styles. False = plain text.
        width: Console width.
        context_lines: Source lines shown around the error.
    """

    color: bool = True
    width: int = 120
    context_lines: int = 2

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.width < 20:
            raise ValueError(f"width must be >= 20, got {self.width}")
        if self.context_lines < 0:
            raise ValueError(f"context_lines must be >= 0, got {self.context_lines}")


class ConsoleReporter:
    """Console reporter: outputs rich formatted text.

    Output is str, not print(). Caller decides destination.
    Source text goes through rich.text.Text, never through markup, so
    brackets in source are printed as-is.
    """

    def __init__(self, config: ConsoleConfig | None = None) -> None:
        """Initialize reporter.

        Args:
            config: Reporter configuration. Uses defaults if None.
        """
        self._config = config or ConsoleConfig()

    def report(self, error: PlacementError, text: str) -> str:
        """Format placement error with a code frame.

        Args:
            error: Error raised by the validator
            text: Source text the error points into

        Returns:
            Formatted string (with colors if configured)
        """
        output = StringIO()
        console = Console(
            file=output,
            force_terminal=self._config.color,
            color_system="standard" if self._config.color else None,
            width=self._config.width,
            highlight=False,
        )

        header = Text()
        header.append("SyntaxError", style="bold red")
        header.append(f": {error}")
        console.print(header, soft_wrap=True)

        frame = build_frame(text, error.location, self._config.context_lines)
        width = gutter_width(frame)

        for line in frame:
            row = Text()
            if line.marker is not None:
                row.append(">", style="bold red")
            else:
                row.append(" ")
            row.append(f" {line.number:>{width}} | ", style="dim")
            row.append(line.text)
            row.rstrip()
            console.print(row, soft_wrap=True)

            if line.marker is not None:
                caret = Text(f"  {'':>{width}} | ", style="dim")
                caret.append(line.marker, style="bold red")
                console.print(caret, soft_wrap=True)

        return output.getvalue()
