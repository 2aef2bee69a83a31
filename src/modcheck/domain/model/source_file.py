"""Source file: text, line table and parent index of the raw tree."""

from __future__ import annotations

from bisect import bisect_right
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from modcheck.domain.model.syntax_kind import SyntaxKind
from modcheck.domain.model.syntax_node import SyntaxNode

_LINE_BREAKS = frozenset("\n\r\u2028\u2029")


@dataclass(frozen=True, slots=True, eq=False)
class SourceFile:
    """Immutable source text with the raw tree parsed from it.

    Line starts and the parent index are computed once at construction.
    The parent index is the only place parent relations live: nodes never
    point back to their parent.

    Attributes:
        text: Original source text
        root: Raw root node (SOURCE_FILE kind, spans whole text)
    """

    text: str
    root: SyntaxNode
    _line_starts: tuple[int, ...] = field(init=False, repr=False)
    _parents: Mapping[SyntaxNode, SyntaxNode] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        """Validate invariants and build indexes. FAIL-FIRST."""
        if self.text is None:
            raise TypeError("text must not be None")
        if self.root is None:
            raise TypeError("root must not be None")
        if self.root.kind is not SyntaxKind.SOURCE_FILE:
            raise ValueError(f"root must be SOURCE_FILE, got {self.root.kind.name}")
        if self.root.end > len(self.text):
            raise ValueError(f"root end ({self.root.end}) exceeds text length ({len(self.text)})")

        object.__setattr__(self, "_line_starts", _compute_line_starts(self.text))
        object.__setattr__(self, "_parents", MappingProxyType(_index_parents(self.root)))

    @property
    def line_count(self) -> int:
        """Number of lines in text."""
        return len(self._line_starts)

    def get_line_and_character(self, offset: int) -> tuple[int, int]:
        """Convert offset to (line, character), both 0-based.

        Args:
            offset: Character offset into text (0 <= offset <= len(text))

        Returns:
            Zero-based line index and column

        Raises:
            ValueError: If offset is out of range
        """
        if not 0 <= offset <= len(self.text):
            raise ValueError(f"offset {offset} out of range 0..{len(self.text)}")
        line = bisect_right(self._line_starts, offset) - 1
        return line, offset - self._line_starts[line]

    def skip_trivia(self, offset: int) -> int:
        """Return first offset at or after `offset` that is not whitespace or a comment."""
        text = self.text
        length = len(text)
        while offset < length:
            char = text[offset]
            if char.isspace():
                offset += 1
            elif text.startswith("//", offset):
                while offset < length and text[offset] not in _LINE_BREAKS:
                    offset += 1
            elif text.startswith("/*", offset):
                close = text.find("*/", offset + 2)
                offset = length if close == -1 else close + 2
            else:
                break
        return offset

    def parent_of(self, node: SyntaxNode) -> SyntaxNode | None:
        """Get parent node, None for root or foreign nodes."""
        return self._parents.get(node)

    def contains(self, node: SyntaxNode) -> bool:
        """Check if node belongs to this file's tree."""
        return node is self.root or node in self._parents


def _compute_line_starts(text: str) -> tuple[int, ...]:
    """Offsets of line starts. CRLF counts as one break."""
    starts = [0]
    index = 0
    length = len(text)
    while index < length:
        char = text[index]
        if char == "\r" and index + 1 < length and text[index + 1] == "\n":
            index += 1
        if char in _LINE_BREAKS:
            starts.append(index + 1)
        index += 1
    return tuple(starts)


def _index_parents(root: SyntaxNode) -> dict[SyntaxNode, SyntaxNode]:
    """Build child -> parent mapping by walking the tree from root."""
    parents: dict[SyntaxNode, SyntaxNode] = {}
    stack = [root]
    while stack:
        node = stack.pop()
        for child in node.iter_children():
            if child in parents or child is root:
                raise ValueError(f"{child.kind.name} node at {child.pos} is reachable twice")
            parents[child] = node
            stack.append(child)
    return parents
