"""modcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, abc, dataclasses, enum, bisect, types, collections.abc
"""

from modcheck.domain.exceptions import (
    AbstractPropertyInitializerError,
    CompilerApiLoadError,
    InvalidDecoratorPlacementError,
    InvalidModifierPlacementError,
    ModCheckError,
    PlacementError,
    UnknownCheckError,
)
from modcheck.domain.model import (
    CompilerApi,
    Location,
    ModifierRule,
    NodeCorrelation,
    ParseResult,
    Position,
    PublicNode,
    SourceFile,
    SyntaxKind,
    SyntaxNode,
    ValidatorConfig,
    ViolationKind,
)
from modcheck.domain.ports import (
    CheckProtocol,
    CompilerApiLoaderPort,
    ReporterProtocol,
)

__all__ = [
    # Exceptions
    "ModCheckError",
    "PlacementError",
    "InvalidDecoratorPlacementError",
    "AbstractPropertyInitializerError",
    "InvalidModifierPlacementError",
    "CompilerApiLoadError",
    "UnknownCheckError",
    # Enums
    "SyntaxKind",
    "ViolationKind",
    "ModifierRule",
    # Value objects
    "Position",
    "Location",
    "SyntaxNode",
    "SourceFile",
    "PublicNode",
    "NodeCorrelation",
    "ParseResult",
    "CompilerApi",
    "ValidatorConfig",
    # Ports
    "CheckProtocol",
    "CompilerApiLoaderPort",
    "ReporterProtocol",
]
