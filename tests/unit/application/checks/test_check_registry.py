"""Tests for application/checks/_registry.py and BaseCheck.from_config."""

from modcheck.application.checks import (
    AbstractPropertyInitializerCheck,
    DecoratorPlacementCheck,
    ModifierPlacementCheck,
    checks_from_config,
    default_checks,
)
from modcheck.domain.model.configuration import CHECK_NAMES, ValidatorConfig


class TestDefaultChecks:
    """Tests for default_checks."""

    def test_run_order(self) -> None:
        checks = default_checks()
        assert [type(check) for check in checks] == [
            DecoratorPlacementCheck,
            AbstractPropertyInitializerCheck,
            ModifierPlacementCheck,
        ]

    def test_names_match_config_names(self) -> None:
        assert tuple(check.name for check in default_checks()) == CHECK_NAMES


class TestChecksFromConfig:
    """Tests for checks_from_config."""

    def test_all_enabled(self) -> None:
        assert len(checks_from_config(ValidatorConfig())) == 3

    def test_subset_keeps_order(self) -> None:
        config = ValidatorConfig(enabled_checks=frozenset({"modifiers", "decorators"}))
        names = [check.name for check in checks_from_config(config)]
        assert names == ["decorators", "modifiers"]

    def test_from_config_disabled(self) -> None:
        config = ValidatorConfig(enabled_checks=frozenset({"modifiers"}))
        assert DecoratorPlacementCheck.from_config(config) is None
        assert isinstance(ModifierPlacementCheck.from_config(config), ModifierPlacementCheck)
