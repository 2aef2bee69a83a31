"""Public (normalized) syntax tree node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(frozen=True, slots=True, eq=False)
class PublicNode:
    """Node consumed by downstream tooling (ESTree-style shape).

    Semantically equivalent to a raw SyntaxNode, with a normalized shape:
    e.g. an abstract property keeps `value=None` even when the source had
    an initializer. Nodes compare and hash by identity.

    Attributes:
        type: Node type name (e.g. "PropertyDefinition")
        start: Start offset, exclusive of trivia (must be >= 0)
        end: End offset, exclusive (must be >= start)
        children: Sub-nodes in document order
        value: Normalized initializer, must be one of children when set
    """

    type: str
    start: int
    end: int
    children: tuple[PublicNode, ...] = ()
    value: PublicNode | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.type:
            raise ValueError("type must not be empty")
        if self.start < 0:
            raise ValueError(f"start must be >= 0, got {self.start}")
        if self.end < self.start:
            raise ValueError(f"end ({self.end}) must be >= start ({self.start})")
        if self.value is not None and not any(child is self.value for child in self.children):
            raise ValueError("value must be one of children")

    def iter_children(self) -> Iterator[PublicNode]:
        """Yield direct sub-nodes in document order."""
        yield from self.children
