"""Tests for application/location.py."""

import pytest

from modcheck.application.location import node_range, resolve_location
from modcheck.domain.model.location import Position
from modcheck.domain.model.public_node import PublicNode
from modcheck.domain.model.syntax_kind import SyntaxKind
from modcheck.domain.model.syntax_node import SyntaxNode
from tests.factories import make_source_file


class TestNodeRange:
    """Tests for node_range."""

    def test_raw_node_skips_leading_trivia(self) -> None:
        text = "class A {\n  /* c */ static x;\n}"
        start = text.index("{") + 1
        static = SyntaxNode(kind=SyntaxKind.STATIC_KEYWORD, pos=start, end=text.index("static") + 6)
        sf = make_source_file(text)
        assert node_range(static, sf) == (text.index("static"), text.index("static") + 6)

    def test_public_node_as_is(self) -> None:
        sf = make_source_file("  abc")
        node = PublicNode(type="Identifier", start=2, end=5)
        assert node_range(node, sf) == (2, 5)

    def test_empty_raw_node_not_past_end(self) -> None:
        sf = make_source_file("x   ")
        node = SyntaxNode(kind=SyntaxKind.IDENTIFIER, pos=1, end=1)
        assert node_range(node, sf) == (1, 1)

    def test_unknown_node_type_raises(self) -> None:
        sf = make_source_file("x")
        with pytest.raises(TypeError, match="SyntaxNode or PublicNode"):
            node_range("x", sf)  # type: ignore[arg-type]


class TestResolveLocation:
    """Tests for resolve_location."""

    def test_one_based_line_zero_based_column(self) -> None:
        text = "let a;\n  static x;"
        sf = make_source_file(text)
        start = text.index("static")
        node = SyntaxNode(kind=SyntaxKind.STATIC_KEYWORD, pos=start, end=start + 6)

        location = resolve_location(node, sf)

        assert location.start == Position(line=2, column=2)
        assert location.end == Position(line=2, column=8)

    def test_multi_line_public_node(self) -> None:
        text = "abstract class A {\n  abstract x = 1;\n}"
        sf = make_source_file(text)
        node = PublicNode(type="ClassDeclaration", start=0, end=len(text))

        location = resolve_location(node, sf)

        assert location.start == Position(line=1, column=0)
        assert location.end == Position(line=3, column=1)
