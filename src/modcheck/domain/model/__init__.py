"""Domain model entities."""

from modcheck.domain.model.compiler_api import CompilerApi
from modcheck.domain.model.configuration import (
    CHECK_NAMES,
    DEFAULT_COMPILER_API_MODULE,
    ValidatorConfig,
)
from modcheck.domain.model.correlation import NodeCorrelation
from modcheck.domain.model.enums import ModifierRule, ViolationKind
from modcheck.domain.model.location import Location, Position
from modcheck.domain.model.parse_result import ParseResult
from modcheck.domain.model.public_node import PublicNode
from modcheck.domain.model.source_file import SourceFile
from modcheck.domain.model.syntax_kind import MODIFIER_KINDS, SyntaxKind, is_modifier_kind
from modcheck.domain.model.syntax_node import SyntaxNode

__all__ = [
    # Enums
    "SyntaxKind",
    "ViolationKind",
    "ModifierRule",
    "MODIFIER_KINDS",
    "is_modifier_kind",
    # Value objects
    "Position",
    "Location",
    # Trees
    "SyntaxNode",
    "SourceFile",
    "PublicNode",
    "NodeCorrelation",
    "ParseResult",
    # Library surface
    "CompilerApi",
    # Configuration
    "ValidatorConfig",
    "CHECK_NAMES",
    "DEFAULT_COMPILER_API_MODULE",
]
