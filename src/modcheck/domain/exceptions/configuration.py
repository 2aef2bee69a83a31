"""Configuration exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from modcheck.domain.exceptions.base import ModCheckError

if TYPE_CHECKING:
    from collections.abc import Iterable


class UnknownCheckError(ModCheckError, ValueError):
    """Configuration names a check that does not exist.

    Inherits ValueError for semantic correctness.

    Attributes:
        name: Unknown check name
        known: Names of existing checks
    """

    def __init__(self, name: str, known: Iterable[str]) -> None:
        """Initialize with unknown name and known names."""
        self.name = name
        self.known = tuple(known)
        super().__init__(f"unknown check {name!r}, expected one of: {', '.join(self.known)}")

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.name, self.known)
