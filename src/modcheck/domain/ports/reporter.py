"""Reporter protocol for placement errors.

Users implement this Protocol for custom output formats.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from modcheck.domain.exceptions.placement import PlacementError


class ReporterProtocol(Protocol):
    """Contract for reporters.

    Example:
        class GitHubReporter:
            def report(self, error: PlacementError, text: str) -> None:
                loc = error.location.start
                print(f"::error line={loc.line},col={loc.column + 1}::{error.reason}")
    """

    def report(self, error: PlacementError, text: str) -> object:
        """Report placement error.

        Args:
            error: Error raised by the validator
            text: Source text the error points into

        Returns:
            Implementation-defined (rendered string, None, ...)
        """
        ...
