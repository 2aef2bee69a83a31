"""Tests for domain/exceptions/placement.py."""

import pickle

import pytest

from modcheck.domain.exceptions import (
    AbstractPropertyInitializerError,
    InvalidDecoratorPlacementError,
    InvalidModifierPlacementError,
    ModCheckError,
    PlacementError,
)
from modcheck.domain.model.enums import ModifierRule, ViolationKind
from modcheck.domain.model.location import Location, Position

ABSTRACT_MESSAGE = "Abstract property cannot have an initializer"


def loc(line: int = 2, column: int = 4, end_column: int = 10) -> Location:
    return Location(start=Position(line, column), end=Position(line, end_column))


class TestPlacementError:
    """Tests for PlacementError shape."""

    def test_str_has_reason_and_position(self) -> None:
        error = InvalidDecoratorPlacementError(loc(), "Decorators are not valid here.")
        assert str(error) == "Decorators are not valid here. (2:4)"

    def test_syntax_error_fields(self) -> None:
        error = InvalidDecoratorPlacementError(loc(3, 0, 5), "Decorators are not valid here.")
        assert error.lineno == 3
        assert error.offset == 1
        assert error.end_lineno == 3
        assert error.end_offset == 6

    def test_is_syntax_error(self) -> None:
        with pytest.raises(SyntaxError):
            raise AbstractPropertyInitializerError(loc(), ABSTRACT_MESSAGE)

    def test_is_modcheck_error(self) -> None:
        with pytest.raises(ModCheckError):
            raise AbstractPropertyInitializerError(loc(), ABSTRACT_MESSAGE)

    def test_keeps_location_and_reason(self) -> None:
        location = loc()
        error = InvalidDecoratorPlacementError(location, "Decorators are not valid here.")
        assert error.location is location
        assert error.reason == "Decorators are not valid here."

    def test_none_location_raises(self) -> None:
        with pytest.raises(TypeError):
            InvalidDecoratorPlacementError(None, "x")  # type: ignore[arg-type]

    def test_empty_reason_raises(self) -> None:
        with pytest.raises(ValueError, match="reason"):
            InvalidDecoratorPlacementError(loc(), "")

    @pytest.mark.parametrize(
        ("error_cls", "kind"),
        [
            (InvalidDecoratorPlacementError, ViolationKind.INVALID_DECORATOR_PLACEMENT),
            (AbstractPropertyInitializerError, ViolationKind.ABSTRACT_PROPERTY_WITH_INITIALIZER),
        ],
    )
    def test_kind(self, error_cls: type[PlacementError], kind: ViolationKind) -> None:
        assert error_cls(loc(), "message").kind is kind

    def test_pickle_keeps_location_and_message(self) -> None:
        error = AbstractPropertyInitializerError(loc(), ABSTRACT_MESSAGE)

        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is AbstractPropertyInitializerError
        assert restored.location == error.location
        assert restored.reason == ABSTRACT_MESSAGE
        assert str(restored) == str(error)
        assert restored.lineno == 2
        assert restored.offset == 5


class TestInvalidModifierPlacementError:
    """Tests for InvalidModifierPlacementError."""

    def test_rule_and_modifier(self) -> None:
        error = InvalidModifierPlacementError(
            loc(1, 0, 6),
            "'static' modifier cannot appear on a module or namespace element.",
            rule=ModifierRule.MODULE_ELEMENT,
            modifier="static",
        )
        assert error.rule is ModifierRule.MODULE_ELEMENT
        assert error.modifier == "static"
        assert error.kind is ViolationKind.INVALID_MODIFIER_PLACEMENT
        assert str(error) == (
            "'static' modifier cannot appear on a module or namespace element. (1:0)"
        )

    def test_none_rule_raises(self) -> None:
        with pytest.raises(TypeError, match="rule"):
            InvalidModifierPlacementError(
                loc(), "m", rule=None, modifier="static"  # type: ignore[arg-type]
            )

    def test_empty_modifier_raises(self) -> None:
        with pytest.raises(ValueError, match="modifier"):
            InvalidModifierPlacementError(loc(), "m", rule=ModifierRule.ASYNC, modifier="")

    def test_rule_numbers(self) -> None:
        assert [rule.value for rule in ModifierRule] == list(range(1, 10))

    def test_pickle_keeps_rule_and_modifier(self) -> None:
        error = InvalidModifierPlacementError(
            loc(1, 10, 15),
            "'async' modifier cannot be used here.",
            rule=ModifierRule.ASYNC,
            modifier="async",
        )

        restored = pickle.loads(pickle.dumps(error))

        assert type(restored) is InvalidModifierPlacementError
        assert restored.rule is ModifierRule.ASYNC
        assert restored.modifier == "async"
        assert restored.location == error.location
        assert str(restored) == "'async' modifier cannot be used here. (1:10)"
