"""Plain text reporter using print().

Stdlib-only reporter for simple text output.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, TextIO

from modcheck.application.reporters._frame import build_frame, gutter_width

if TYPE_CHECKING:
    from modcheck.domain.exceptions.placement import PlacementError


class PlainTextReporter:
    """Plain text reporter using print().

    Renders the error the way a parser syntax error is rendered: header
    line, then a code frame. Outputs to stdout by default.
    """

    def __init__(self, output: TextIO | None = None, *, context_lines: int = 2) -> None:
        """Initialize reporter.

        Args:
            output: Output stream (default: sys.stdout)
            context_lines: Source lines shown around the error
        """
        self._output = output if output is not None else sys.stdout
        self._context_lines = context_lines

    def report(self, error: PlacementError, text: str) -> None:
        """Report placement error as plain text.

        Args:
            error: Error raised by the validator
            text: Source text the error points into
        """
        self._write(f"SyntaxError: {error}")

        frame = build_frame(text, error.location, self._context_lines)
        width = gutter_width(frame)

        for line in frame:
            pointer = ">" if line.marker is not None else " "
            self._write(f"{pointer} {line.number:>{width}} | {line.text}".rstrip())
            if line.marker is not None:
                self._write(f"  {'':>{width}} | {line.marker}")

    def _write(self, text: str = "") -> None:
        """Write line to output."""
        print(text, file=self._output)
