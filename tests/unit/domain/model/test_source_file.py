"""Tests for domain/model/source_file.py."""

import pytest

from modcheck.domain.model.source_file import SourceFile
from modcheck.domain.model.syntax_kind import SyntaxKind
from modcheck.domain.model.syntax_node import SyntaxNode
from tests.factories import make_source_file


def ident(pos: int, end: int) -> SyntaxNode:
    return SyntaxNode(kind=SyntaxKind.IDENTIFIER, pos=pos, end=end)


class TestSourceFileValidation:
    """FAIL-FIRST validation of SourceFile."""

    def test_root_must_be_source_file(self) -> None:
        with pytest.raises(ValueError, match="SOURCE_FILE"):
            SourceFile(text="x", root=ident(0, 1))

    def test_root_beyond_text_raises(self) -> None:
        root = SyntaxNode(kind=SyntaxKind.SOURCE_FILE, pos=0, end=10)
        with pytest.raises(ValueError, match="exceeds text length"):
            SourceFile(text="short", root=root)

    def test_none_text_raises(self) -> None:
        root = SyntaxNode(kind=SyntaxKind.SOURCE_FILE, pos=0, end=0)
        with pytest.raises(TypeError):
            SourceFile(text=None, root=root)  # type: ignore[arg-type]

    def test_node_reachable_twice_raises(self) -> None:
        shared = ident(0, 1)
        root = SyntaxNode(kind=SyntaxKind.SOURCE_FILE, pos=0, end=1, children=(shared, shared))
        with pytest.raises(ValueError, match="reachable twice"):
            SourceFile(text="x", root=root)


class TestLineAndCharacter:
    """Tests for offset -> (line, character) conversion."""

    def test_first_line(self) -> None:
        sf = make_source_file("let x;")
        assert sf.get_line_and_character(4) == (0, 4)

    def test_line_feed(self) -> None:
        sf = make_source_file("a\nbc")
        assert sf.get_line_and_character(3) == (1, 1)

    def test_crlf_is_one_break(self) -> None:
        sf = make_source_file("a\r\nb")
        assert sf.line_count == 2
        assert sf.get_line_and_character(3) == (1, 0)

    def test_lone_carriage_return(self) -> None:
        sf = make_source_file("a\rb")
        assert sf.get_line_and_character(2) == (1, 0)

    def test_unicode_line_separators(self) -> None:
        sf = make_source_file("a\u2028b\u2029c")
        assert sf.line_count == 3
        assert sf.get_line_and_character(4) == (2, 0)

    def test_mixed_breaks(self) -> None:
        sf = make_source_file("a\nb\r\nc\u2028d")
        assert sf.line_count == 4
        assert sf.get_line_and_character(6) == (2, 1)
        assert sf.get_line_and_character(8) == (3, 1)

    def test_end_of_text_allowed(self) -> None:
        sf = make_source_file("ab")
        assert sf.get_line_and_character(2) == (0, 2)

    def test_out_of_range_raises(self) -> None:
        sf = make_source_file("ab")
        with pytest.raises(ValueError, match="out of range"):
            sf.get_line_and_character(3)

    def test_negative_raises(self) -> None:
        sf = make_source_file("ab")
        with pytest.raises(ValueError, match="out of range"):
            sf.get_line_and_character(-1)


class TestSkipTrivia:
    """Tests for skip_trivia."""

    def test_whitespace(self) -> None:
        sf = make_source_file("   static")
        assert sf.skip_trivia(0) == 3

    def test_line_comment(self) -> None:
        text = "// note\n  static"
        sf = make_source_file(text)
        assert sf.skip_trivia(0) == text.index("static")

    def test_block_comment(self) -> None:
        text = " /* a\n b */ static"
        sf = make_source_file(text)
        assert sf.skip_trivia(0) == text.index("static")

    def test_unterminated_block_comment(self) -> None:
        text = "/* open"
        sf = make_source_file(text)
        assert sf.skip_trivia(0) == len(text)

    def test_no_trivia(self) -> None:
        sf = make_source_file("static")
        assert sf.skip_trivia(0) == 0

    def test_slash_is_not_trivia(self) -> None:
        sf = make_source_file(" /x/")
        assert sf.skip_trivia(0) == 1


class TestParentIndex:
    """Tests for parent_of and contains."""

    def test_parent_of_statement_is_root(self) -> None:
        stmt = ident(0, 1)
        sf = make_source_file("x", stmt)
        assert sf.parent_of(stmt) is sf.root

    def test_root_has_no_parent(self) -> None:
        sf = make_source_file("x")
        assert sf.parent_of(sf.root) is None

    def test_modifier_parent_is_owner(self) -> None:
        static = SyntaxNode(kind=SyntaxKind.STATIC_KEYWORD, pos=0, end=6)
        stmt = SyntaxNode(
            kind=SyntaxKind.VARIABLE_STATEMENT, pos=0, end=12, modifiers=(static,)
        )
        sf = make_source_file("static x = 1", stmt)
        assert sf.parent_of(static) is stmt

    def test_nested_parent(self) -> None:
        inner = ident(7, 8)
        block = SyntaxNode(kind=SyntaxKind.MODULE_BLOCK, pos=5, end=10, children=(inner,))
        module = SyntaxNode(kind=SyntaxKind.MODULE_DECLARATION, pos=0, end=10, children=(block,))
        sf = make_source_file("ns N { x }", module)
        assert sf.parent_of(inner) is block
        assert sf.parent_of(block) is module

    def test_foreign_node(self) -> None:
        sf = make_source_file("x", ident(0, 1))
        foreign = ident(0, 1)
        assert sf.parent_of(foreign) is None
        assert not sf.contains(foreign)

    def test_contains(self) -> None:
        stmt = ident(0, 1)
        sf = make_source_file("x", stmt)
        assert sf.contains(stmt)
        assert sf.contains(sf.root)
