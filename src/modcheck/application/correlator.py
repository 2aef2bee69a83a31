"""Node correlator: public node -> raw node."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modcheck.domain.model.correlation import NodeCorrelation
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.syntax_node import SyntaxNode


def correlate(public: PublicNode, correlation: NodeCorrelation) -> SyntaxNode | None:
    """Find raw node for public node, confirmed in both directions.

    The raw node must record exactly this public node as its counterpart.
    Aliases (several public nodes sharing one raw origin) resolve only for
    the recorded one, so a raw node is never checked twice.

    Args:
        public: Public tree node
        correlation: Public <-> raw maps

    Returns:
        Raw node, or None if unmapped or aliased
    """
    raw = correlation.raw_for(public)
    if raw is None:
        return None

    if correlation.public_for(raw) is not public:
        return None

    return raw
