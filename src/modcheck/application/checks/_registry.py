"""Check registry for placement checks.

Central registry of all checks with factory functions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from modcheck.application.checks._base import BaseCheck
from modcheck.application.checks.abstract_property_check import AbstractPropertyInitializerCheck
from modcheck.application.checks.decorator_check import DecoratorPlacementCheck
from modcheck.application.checks.modifier_check import ModifierPlacementCheck
from modcheck.domain.ports.check import CheckProtocol

if TYPE_CHECKING:
    from modcheck.domain.model.configuration import ValidatorConfig


# Registry - tuple for immutability
# Order matters: checks run in this order for every node
_ALL_CHECKS: tuple[type[BaseCheck], ...] = (
    DecoratorPlacementCheck,
    AbstractPropertyInitializerCheck,
    ModifierPlacementCheck,
)


def default_checks() -> tuple[CheckProtocol, ...]:
    """Instantiate all checks.

    Returns:
        Tuple of checks in run order
    """
    return tuple(check_cls() for check_cls in _ALL_CHECKS)


def checks_from_config(config: ValidatorConfig) -> tuple[CheckProtocol, ...]:
    """Instantiate checks enabled by config.

    Checks are created using their from_config() factory method.
    If from_config() returns None, the check is disabled.

    Args:
        config: Validator configuration

    Returns:
        Tuple of enabled checks in run order
    """
    checks: list[CheckProtocol] = []

    for check_cls in _ALL_CHECKS:
        check = check_cls.from_config(config)
        if check is not None:
            checks.append(check)

    return tuple(checks)
