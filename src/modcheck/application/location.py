"""Position resolver: node range -> Location."""

from __future__ import annotations

from typing import TYPE_CHECKING

from modcheck.domain.model.location import Location, Position
from modcheck.domain.model.public_node import PublicNode
from modcheck.domain.model.syntax_node import SyntaxNode

if TYPE_CHECKING:
    from modcheck.domain.model.source_file import SourceFile


def node_range(node: SyntaxNode | PublicNode, source_file: SourceFile) -> tuple[int, int]:
    """Get [start, end) offsets of node.

    Raw nodes start at their first token (leading trivia skipped);
    public nodes already exclude trivia.

    Args:
        node: Raw or public node
        source_file: File the node's offsets point into

    Returns:
        Start and end offsets
    """
    match node:
        case SyntaxNode(pos=pos, end=end):
            return min(source_file.skip_trivia(pos), end), end
        case PublicNode(start=start, end=end):
            return start, end
    raise TypeError(f"expected SyntaxNode or PublicNode, got {type(node).__name__}")


def resolve_location(node: SyntaxNode | PublicNode, source_file: SourceFile) -> Location:
    """Resolve node range to 1-based lines and 0-based columns.

    Args:
        node: Raw or public node
        source_file: File the node's offsets point into

    Returns:
        Location of node
    """
    start, end = node_range(node, source_file)
    return Location(
        start=_position(source_file, start),
        end=_position(source_file, end),
    )


def _position(source_file: SourceFile, offset: int) -> Position:
    line, column = source_file.get_line_and_character(offset)
    return Position(line=line + 1, column=column)
