"""Application layer for placement validation.

- location: node range -> line/column
- correlator: public node -> raw node
- checks: decorator, abstract property and modifier checks
- services: PlacementValidator facade
- reporters: console (rich) and plain text output
"""

from modcheck.application.checks import (
    AbstractPropertyInitializerCheck,
    BaseCheck,
    DecoratorPlacementCheck,
    ModifierPlacementCheck,
    checks_from_config,
    default_checks,
)
from modcheck.application.correlator import correlate
from modcheck.application.location import resolve_location
from modcheck.application.reporters import ConsoleConfig, ConsoleReporter, PlainTextReporter
from modcheck.application.services import POSSIBLE_MODIFIERS, PlacementValidator

__all__ = [
    # Core
    "resolve_location",
    "correlate",
    # Checks
    "BaseCheck",
    "DecoratorPlacementCheck",
    "AbstractPropertyInitializerCheck",
    "ModifierPlacementCheck",
    "default_checks",
    "checks_from_config",
    # Services
    "PlacementValidator",
    "POSSIBLE_MODIFIERS",
    # Reporters
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
