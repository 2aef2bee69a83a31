"""TypeScript compiler API surface.

Imported lazily by CompilerApiLoader; exposes COMPILER_API.
"""

from __future__ import annotations

from types import MappingProxyType

from modcheck.domain.model.compiler_api import CompilerApi
from modcheck.domain.model.syntax_kind import SyntaxKind
from modcheck.domain.model.syntax_node import SyntaxNode

TOKEN_TEXT = MappingProxyType(
    {
        SyntaxKind.ABSTRACT_KEYWORD: "abstract",
        SyntaxKind.ACCESSOR_KEYWORD: "accessor",
        SyntaxKind.ASYNC_KEYWORD: "async",
        SyntaxKind.CONST_KEYWORD: "const",
        SyntaxKind.DECLARE_KEYWORD: "declare",
        SyntaxKind.DEFAULT_KEYWORD: "default",
        SyntaxKind.EXPORT_KEYWORD: "export",
        SyntaxKind.IN_KEYWORD: "in",
        SyntaxKind.OUT_KEYWORD: "out",
        SyntaxKind.OVERRIDE_KEYWORD: "override",
        SyntaxKind.PRIVATE_KEYWORD: "private",
        SyntaxKind.PROTECTED_KEYWORD: "protected",
        SyntaxKind.PUBLIC_KEYWORD: "public",
        SyntaxKind.READONLY_KEYWORD: "readonly",
        SyntaxKind.STATIC_KEYWORD: "static",
    }
)

_CLASS_LIKE_KINDS = frozenset({SyntaxKind.CLASS_DECLARATION, SyntaxKind.CLASS_EXPRESSION})


def token_to_string(kind: SyntaxKind) -> str | None:
    """Source spelling of token kind, None if kind is not a token."""
    return TOKEN_TEXT.get(kind)


def is_class_like(node: SyntaxNode | None) -> bool:
    """Check if node introduces a class body."""
    return node is not None and node.kind in _CLASS_LIKE_KINDS


def is_decorator(node: SyntaxNode) -> bool:
    return node.kind is SyntaxKind.DECORATOR


def is_property_declaration(node: SyntaxNode) -> bool:
    return node.kind is SyntaxKind.PROPERTY_DECLARATION


COMPILER_API = CompilerApi(
    syntax_kind=SyntaxKind,
    token_to_string=token_to_string,
    is_class_like=is_class_like,
    is_decorator=is_decorator,
    is_property_declaration=is_property_declaration,
)
