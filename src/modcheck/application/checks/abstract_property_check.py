"""Abstract property initializer check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modcheck.application.checks._base import BaseCheck
from modcheck.application.location import resolve_location
from modcheck.domain.exceptions.placement import AbstractPropertyInitializerError

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.source_file import SourceFile
    from modcheck.domain.model.syntax_node import SyntaxNode

ABSTRACT_PROPERTY_MESSAGE = "Abstract property cannot have an initializer"


class AbstractPropertyInitializerCheck(BaseCheck):
    """Rejects `abstract x = value` class properties.

    The public tree normalizes abstract properties to `value=None`, hiding
    the initializer; the raw node still has it. The error points at the
    public node, i.e. the property as the user sees it.
    """

    name = "abstract_property"

    def check(
        self,
        raw: SyntaxNode,
        public: PublicNode,
        api: CompilerApi,
        source_file: SourceFile,
    ) -> None:
        if not api.is_property_declaration(raw):
            return
        if raw.initializer is None or public.value is not None:
            return
        if not raw.has_modifier(api.syntax_kind.ABSTRACT_KEYWORD):
            return

        raise AbstractPropertyInitializerError(
            resolve_location(public, source_file),
            ABSTRACT_PROPERTY_MESSAGE,
        )
