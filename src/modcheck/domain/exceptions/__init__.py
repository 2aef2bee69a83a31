"""Domain exceptions."""

from modcheck.domain.exceptions.base import ModCheckError
from modcheck.domain.exceptions.configuration import UnknownCheckError
from modcheck.domain.exceptions.loading import CompilerApiLoadError
from modcheck.domain.exceptions.placement import (
    AbstractPropertyInitializerError,
    InvalidDecoratorPlacementError,
    InvalidModifierPlacementError,
    PlacementError,
)

__all__ = [
    "ModCheckError",
    "PlacementError",
    "InvalidDecoratorPlacementError",
    "AbstractPropertyInitializerError",
    "InvalidModifierPlacementError",
    "CompilerApiLoadError",
    "UnknownCheckError",
]
