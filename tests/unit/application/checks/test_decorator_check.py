"""Tests for application/checks/decorator_check.py."""

import pytest

from modcheck.application.checks.decorator_check import DECORATOR_MESSAGE, DecoratorPlacementCheck
from modcheck.domain.exceptions import InvalidDecoratorPlacementError
from modcheck.domain.model.location import Position
from modcheck.domain.model.syntax_kind import SyntaxKind
from tests.factories import API, TreeBuilder


class TestDecoratorPlacementCheck:
    """Tests for DecoratorPlacementCheck."""

    def test_name(self) -> None:
        assert DecoratorPlacementCheck.name == "decorators"

    def test_decorated_enum_raises(self) -> None:
        text = "@dec enum E {}"
        b = TreeBuilder(text)
        decorator = b.decorator("@dec")
        enum = b.raw(SyntaxKind.ENUM_DECLARATION, text, illegal_decorators=(decorator,))
        public = b.public("TSEnumDeclaration", "enum E {}", raw=enum)
        result = b.build([enum], [public])

        with pytest.raises(InvalidDecoratorPlacementError) as exc_info:
            DecoratorPlacementCheck().check(enum, public, API, result.source_file)

        error = exc_info.value
        assert error.reason == DECORATOR_MESSAGE
        assert error.location.start == Position(line=1, column=1)
        assert error.location.end == Position(line=1, column=4)
        assert str(error) == "Decorators are not valid here. (1:1)"

    def test_first_illegal_decorator_reported(self) -> None:
        text = "@first @second enum E {}"
        b = TreeBuilder(text)
        first = b.decorator("@first")
        second = b.decorator("@second")
        enum = b.raw(SyntaxKind.ENUM_DECLARATION, text, illegal_decorators=(first, second))
        public = b.public("TSEnumDeclaration", "enum E {}", raw=enum)
        result = b.build([enum], [public])

        with pytest.raises(InvalidDecoratorPlacementError) as exc_info:
            DecoratorPlacementCheck().check(enum, public, API, result.source_file)

        assert exc_info.value.location.start.column == 1

    def test_no_illegal_decorators_passes(self) -> None:
        text = "@dec class A {}"
        b = TreeBuilder(text)
        decorator = b.decorator("@dec")
        cls = b.raw(SyntaxKind.CLASS_DECLARATION, text, modifiers=(decorator,))
        public = b.public("ClassDeclaration", text, raw=cls)
        result = b.build([cls], [public])

        DecoratorPlacementCheck().check(cls, public, API, result.source_file)
