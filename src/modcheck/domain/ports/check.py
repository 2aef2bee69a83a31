"""Check protocol for placement checks.

Users extend modcheck by implementing this Protocol.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.source_file import SourceFile
    from modcheck.domain.model.syntax_node import SyntaxNode


class CheckProtocol(Protocol):
    """Contract for placement checks.

    Checks are stateless. A check returns None when the node is valid and
    raises a PlacementError on the first violation it sees.

    Example:
        class NoExportDefault:
            name = "no_export_default"

            def check(self, raw, public, api, source_file) -> None:
                if raw.has_modifier(api.syntax_kind.DEFAULT_KEYWORD):
                    raise InvalidModifierPlacementError(...)
    """

    name: str
    """Check name used in configuration."""

    def check(
        self,
        raw: SyntaxNode,
        public: PublicNode,
        api: CompilerApi,
        source_file: SourceFile,
    ) -> None:
        """Check one correlated node pair.

        Args:
            raw: Raw node
            public: Public node correlated with raw
            api: Resolved compiler API surface
            source_file: Source file owning raw (line table, parent index)

        Raises:
            PlacementError: On the first violation found
        """
        ...
