"""Application services."""

from modcheck.application.services.placement_validator import (
    DECORATOR_OR_MODIFIER_PATTERN,
    POSSIBLE_MODIFIERS,
    PlacementValidator,
    might_have_placement_errors,
    walk_public,
)

__all__ = [
    "PlacementValidator",
    "POSSIBLE_MODIFIERS",
    "DECORATOR_OR_MODIFIER_PATTERN",
    "might_have_placement_errors",
    "walk_public",
]
