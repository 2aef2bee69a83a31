"""Placement exceptions: decorators and modifiers in invalid positions."""

from __future__ import annotations

from functools import partial
from typing import TYPE_CHECKING, Any, ClassVar

from modcheck.domain.exceptions.base import ModCheckError
from modcheck.domain.model.enums import ModifierRule, ViolationKind

if TYPE_CHECKING:
    from modcheck.domain.model.location import Location


class PlacementError(ModCheckError, SyntaxError):
    """Grammar placement violated.

    Shaped like a parser syntax error: message plus start position, so
    tooling renders it the same way. Inherits SyntaxError for semantic
    correctness; lineno/offset/end_lineno/end_offset follow SyntaxError
    conventions (offset is 1-based).

    Attributes:
        location: Range of the offending token or node
        reason: Diagnostic message, without position
        kind: Violation kind
    """

    kind: ClassVar[ViolationKind]

    def __init__(self, location: Location, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if location is None:
            raise TypeError("location must not be None")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.location = location
        self.reason = reason
        super().__init__(f"{reason} ({location.start.line}:{location.start.column})")
        self.lineno = location.start.line
        self.offset = location.start.column + 1
        self.end_lineno = location.end.line
        self.end_offset = location.end.column + 1

    def __str__(self) -> str:
        """Format as message (line:column)."""
        return str(self.msg)

    def __reduce__(self) -> tuple[Any, ...]:
        """Rebuild from constructor arguments when unpickled."""
        return type(self), (self.location, self.reason)


class InvalidDecoratorPlacementError(PlacementError):
    """Decorator attached where the grammar forbids decorators."""

    kind = ViolationKind.INVALID_DECORATOR_PLACEMENT


class AbstractPropertyInitializerError(PlacementError):
    """Abstract property declared with an initializer."""

    kind = ViolationKind.ABSTRACT_PROPERTY_WITH_INITIALIZER


class InvalidModifierPlacementError(PlacementError):
    """Keyword modifier on a node kind that does not accept it.

    Attributes:
        rule: Placement rule that fired
        modifier: Source spelling of the modifier
    """

    kind = ViolationKind.INVALID_MODIFIER_PLACEMENT

    def __init__(
        self,
        location: Location,
        reason: str,
        *,
        rule: ModifierRule,
        modifier: str,
    ) -> None:
        # FAIL-FIRST: validate required parameters
        if rule is None:
            raise TypeError("rule must not be None")
        if not modifier:
            raise ValueError("modifier must be non-empty string")

        self.rule = rule
        self.modifier = modifier
        super().__init__(location, reason)

    def __reduce__(self) -> tuple[Any, ...]:
        """Rebuild with keyword-only rule and modifier."""
        factory = partial(type(self), rule=self.rule, modifier=self.modifier)
        return factory, (self.location, self.reason)
