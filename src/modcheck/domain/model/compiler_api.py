"""Compiler-API surface used by placement checks."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modcheck.domain.model.syntax_kind import SyntaxKind
    from modcheck.domain.model.syntax_node import SyntaxNode


@dataclass(frozen=True, slots=True)
class CompilerApi:
    """Node-kind metadata and predicates, resolved once by the loader.

    Attributes:
        syntax_kind: Node kind enumeration
        token_to_string: Keyword kind -> source spelling, None for non-tokens
        is_class_like: True for class declarations and class expressions
        is_decorator: True for decorator nodes
        is_property_declaration: True for class property declarations
    """

    syntax_kind: type[SyntaxKind]
    token_to_string: Callable[[SyntaxKind], str | None]
    is_class_like: Callable[[SyntaxNode | None], bool]
    is_decorator: Callable[[SyntaxNode], bool]
    is_property_declaration: Callable[[SyntaxNode], bool]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.syntax_kind is None:
            raise TypeError("syntax_kind must not be None")
        for name in ("token_to_string", "is_class_like", "is_decorator", "is_property_declaration"):
            if not callable(getattr(self, name)):
                raise TypeError(f"{name} must be callable")

    def keyword_text(self, kind: SyntaxKind) -> str:
        """Source spelling of a keyword kind.

        Raises:
            ValueError: If kind has no token text
        """
        text = self.token_to_string(kind)
        if text is None:
            raise ValueError(f"{kind.name} has no token text")
        return text
