"""Decorator placement check."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modcheck.application.checks._base import BaseCheck
from modcheck.application.location import resolve_location
from modcheck.domain.exceptions.placement import InvalidDecoratorPlacementError

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.source_file import SourceFile
    from modcheck.domain.model.syntax_node import SyntaxNode

DECORATOR_MESSAGE = "Decorators are not valid here."


class DecoratorPlacementCheck(BaseCheck):
    """Rejects decorators the parser recorded as illegal on a node.

    The public tree drops such decorators, so they are only visible on the
    raw node. Only the first one is reported.
    """

    name = "decorators"

    def check(
        self,
        raw: SyntaxNode,
        public: PublicNode,
        api: CompilerApi,
        source_file: SourceFile,
    ) -> None:
        if not raw.illegal_decorators:
            return

        expression = raw.illegal_decorators[0].expression
        if expression is None:
            raise ValueError("illegal decorator must have an expression")

        raise InvalidDecoratorPlacementError(
            resolve_location(expression, source_file),
            DECORATOR_MESSAGE,
        )
