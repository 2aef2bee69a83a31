"""Placement checks run on every correlated node pair.

- DecoratorPlacementCheck: decorators the parser marked illegal
- AbstractPropertyInitializerCheck: abstract properties with initializers
- ModifierPlacementCheck: keyword modifiers against the rule table
"""

from modcheck.application.checks._base import BaseCheck
from modcheck.application.checks._registry import checks_from_config, default_checks
from modcheck.application.checks.abstract_property_check import AbstractPropertyInitializerCheck
from modcheck.application.checks.decorator_check import DecoratorPlacementCheck
from modcheck.application.checks.modifier_check import (
    MODIFIER_RULES,
    ModifierPlacementCheck,
    ModifierRuleEntry,
    find_violated_rule,
)

__all__ = [
    # Base
    "BaseCheck",
    # Checks
    "DecoratorPlacementCheck",
    "AbstractPropertyInitializerCheck",
    "ModifierPlacementCheck",
    # Rule table
    "MODIFIER_RULES",
    "ModifierRuleEntry",
    "find_violated_rule",
    # Factory functions
    "default_checks",
    "checks_from_config",
]
