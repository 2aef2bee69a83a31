"""Parse result bundle handed to the validator."""

from __future__ import annotations

from dataclasses import dataclass

from modcheck.domain.model.correlation import NodeCorrelation
from modcheck.domain.model.public_node import PublicNode
from modcheck.domain.model.source_file import SourceFile


@dataclass(frozen=True, slots=True, eq=False)
class ParseResult:
    """Everything the parser produced for one source text.

    Attributes:
        ast: Public tree root
        correlation: Public <-> raw node maps
        text: Original source text
        source_file: Raw tree with line table
    """

    ast: PublicNode
    correlation: NodeCorrelation
    text: str
    source_file: SourceFile

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.ast is None:
            raise TypeError("ast must not be None")
        if self.correlation is None:
            raise TypeError("correlation must not be None")
        if self.source_file is None:
            raise TypeError("source_file must not be None")
        if self.text != self.source_file.text:
            raise ValueError("text must match source_file.text")
