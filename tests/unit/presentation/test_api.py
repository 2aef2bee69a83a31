"""Tests for presentation/api."""

import pytest

import modcheck
from modcheck.domain.exceptions import InvalidModifierPlacementError, PlacementError
from modcheck.domain.model.configuration import ValidatorConfig
from modcheck.domain.model.parse_result import ParseResult
from modcheck.domain.model.syntax_kind import SyntaxKind
from modcheck.infrastructure.compiler_api.loader import default_loader
from modcheck.presentation.api import create_validator, validate, validate_sync
from tests.factories import member_in_class, top_level


def async_property() -> ParseResult:
    return member_in_class(
        "class C { async x = 1; }",
        SyntaxKind.PROPERTY_DECLARATION,
        "async x = 1;",
        [(SyntaxKind.ASYNC_KEYWORD, "async")],
    )


class TestCreateValidator:
    """Tests for create_validator."""

    def test_defaults(self) -> None:
        validator = create_validator()
        assert len(validator.checks) == 3

    def test_config_subset(self) -> None:
        validator = create_validator(ValidatorConfig(enabled_checks=frozenset({"decorators"})))
        assert [check.name for check in validator.checks] == ["decorators"]


class TestValidate:
    """Tests for validate and validate_sync."""

    @pytest.mark.asyncio
    async def test_async_violation(self) -> None:
        with pytest.raises(InvalidModifierPlacementError):
            await validate(async_property())

    @pytest.mark.asyncio
    async def test_valid_source(self) -> None:
        result = top_level(
            "export class C {}",
            SyntaxKind.CLASS_DECLARATION,
            [(SyntaxKind.EXPORT_KEYWORD, "export")],
        )
        await validate(result)

    @pytest.mark.asyncio
    async def test_loads_shared_surface_once(self) -> None:
        await validate(
            top_level(
                "export class C {}",
                SyntaxKind.CLASS_DECLARATION,
                [(SyntaxKind.EXPORT_KEYWORD, "export")],
            )
        )
        assert default_loader().is_loaded

    def test_sync_violation(self) -> None:
        with pytest.raises(PlacementError) as exc_info:
            validate_sync(async_property())
        assert isinstance(exc_info.value, SyntaxError)

    def test_sync_disabled_check_passes(self) -> None:
        validate_sync(async_property(), ValidatorConfig(enabled_checks=frozenset({"decorators"})))

    def test_package_exports(self) -> None:
        assert modcheck.validate is validate
        assert modcheck.validate_sync is validate_sync
        assert modcheck.create_validator is create_validator
        assert issubclass(modcheck.PlacementError, modcheck.ModCheckError)
