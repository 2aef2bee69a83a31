"""Raw syntax tree node."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from modcheck.domain.model.syntax_kind import SyntaxKind, is_modifier_kind


@dataclass(frozen=True, slots=True, eq=False)
class SyntaxNode:
    """Node of the raw parse tree, as produced by the permissive parser.

    Nodes compare and hash by identity: two nodes with the same kind and
    range are still different nodes. There is no parent attribute; the
    owning SourceFile indexes parents.

    Attributes:
        kind: Node kind
        pos: Start offset, may include leading trivia (must be >= 0)
        end: End offset, exclusive (must be >= pos)
        modifiers: Keyword modifiers and decorators in source order, None if absent
        illegal_decorators: Decorators the parser judged misplaced, None if absent
        initializer: Initializer expression (properties, parameters, variables)
        expression: Decorator expression
        children: Remaining sub-nodes
    """

    kind: SyntaxKind
    pos: int
    end: int
    modifiers: tuple[SyntaxNode, ...] | None = None
    illegal_decorators: tuple[SyntaxNode, ...] | None = None
    initializer: SyntaxNode | None = None
    expression: SyntaxNode | None = None
    children: tuple[SyntaxNode, ...] = ()

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.kind is None:
            raise TypeError("kind must not be None")
        if self.pos < 0:
            raise ValueError(f"pos must be >= 0, got {self.pos}")
        if self.end < self.pos:
            raise ValueError(f"end ({self.end}) must be >= pos ({self.pos})")

        if self.modifiers is not None:
            if not self.modifiers:
                raise ValueError("modifiers must be None or non-empty")
            for modifier in self.modifiers:
                if modifier.kind is SyntaxKind.DECORATOR:
                    continue
                if not is_modifier_kind(modifier.kind):
                    raise ValueError(f"{modifier.kind.name} is not a modifier")
            starts = [modifier.pos for modifier in self.modifiers]
            if starts != sorted(starts):
                raise ValueError("modifiers must be in source order")

        if self.illegal_decorators is not None:
            if not self.illegal_decorators:
                raise ValueError("illegal_decorators must be None or non-empty")
            for decorator in self.illegal_decorators:
                if decorator.kind is not SyntaxKind.DECORATOR:
                    raise ValueError(f"illegal decorator has kind {decorator.kind.name}")
                if decorator.expression is None:
                    raise ValueError("illegal decorator must have an expression")

    def iter_children(self) -> Iterator[SyntaxNode]:
        """Yield all direct sub-nodes in document order."""
        nodes: list[SyntaxNode] = []
        if self.illegal_decorators:
            nodes.extend(self.illegal_decorators)
        if self.modifiers:
            nodes.extend(self.modifiers)
        if self.expression is not None:
            nodes.append(self.expression)
        nodes.extend(self.children)
        if self.initializer is not None:
            nodes.append(self.initializer)
        # Stable sort keeps equal-offset siblings in declaration order
        yield from sorted(nodes, key=lambda node: node.pos)

    def has_modifier(self, kind: SyntaxKind) -> bool:
        """Check if a keyword modifier of given kind is present."""
        if not self.modifiers:
            return False
        return any(modifier.kind is kind for modifier in self.modifiers)
