"""Public <-> raw node correlation maps."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Self

if TYPE_CHECKING:
    from collections.abc import Iterable

    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.syntax_node import SyntaxNode


@dataclass(frozen=True, slots=True, eq=False)
class NodeCorrelation:
    """Two one-directional maps maintained by the parse pipeline.

    The maps are not required to be inverse of each other: several public
    nodes may point at one raw node (synthetic nodes sharing a raw origin),
    while the raw node records only one public counterpart.

    Attributes:
        public_to_raw: Public node -> raw node it was converted from
        raw_to_public: Raw node -> public node recorded for it
    """

    public_to_raw: Mapping[PublicNode, SyntaxNode] = field(default_factory=dict)
    raw_to_public: Mapping[SyntaxNode, PublicNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Validate invariants and freeze maps. FAIL-FIRST."""
        if self.public_to_raw is None or self.raw_to_public is None:
            raise TypeError("correlation maps must not be None")
        object.__setattr__(self, "public_to_raw", MappingProxyType(dict(self.public_to_raw)))
        object.__setattr__(self, "raw_to_public", MappingProxyType(dict(self.raw_to_public)))

    @classmethod
    def from_pairs(cls, pairs: Iterable[tuple[PublicNode, SyntaxNode]]) -> Self:
        """Build consistent maps from (public, raw) pairs.

        Later pairs win the raw -> public direction, like a converter that
        records the last public node produced for a raw node.
        """
        public_to_raw: dict[PublicNode, SyntaxNode] = {}
        raw_to_public: dict[SyntaxNode, PublicNode] = {}
        for public, raw in pairs:
            public_to_raw[public] = raw
            raw_to_public[raw] = public
        return cls(public_to_raw=public_to_raw, raw_to_public=raw_to_public)

    def raw_for(self, public: PublicNode) -> SyntaxNode | None:
        """Raw node recorded for public node (no consistency check)."""
        return self.public_to_raw.get(public)

    def public_for(self, raw: SyntaxNode) -> PublicNode | None:
        """Public node recorded for raw node (no consistency check)."""
        return self.raw_to_public.get(raw)
