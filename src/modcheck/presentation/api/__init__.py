"""Public entry points.

Wires the application facade to the process-wide compiler API loader.
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

from modcheck.application.services.placement_validator import PlacementValidator
from modcheck.domain.model.configuration import ValidatorConfig
from modcheck.infrastructure.compiler_api.loader import default_loader

if TYPE_CHECKING:
    from modcheck.domain.model.parse_result import ParseResult


def create_validator(config: ValidatorConfig | None = None) -> PlacementValidator:
    """Build validator for config, sharing the process-wide loader.

    Args:
        config: Validator configuration. Uses defaults if None.

    Returns:
        Configured PlacementValidator
    """
    config = config or ValidatorConfig()
    return PlacementValidator.from_config(config, default_loader(config.compiler_api_module))


async def validate(parse_result: ParseResult, config: ValidatorConfig | None = None) -> None:
    """Validate decorator and modifier placement in a parse result.

    Args:
        parse_result: Parser output
        config: Validator configuration. Uses defaults if None.

    Raises:
        PlacementError: On the first violation in document order
        CompilerApiLoadError: If the compiler API cannot be loaded
    """
    await create_validator(config).validate(parse_result)


def validate_sync(parse_result: ParseResult, config: ValidatorConfig | None = None) -> None:
    """Blocking variant of validate() for callers without an event loop.

    Raises:
        RuntimeError: If called from a running event loop
    """
    asyncio.run(validate(parse_result, config))


__all__ = [
    "create_validator",
    "validate",
    "validate_sync",
]
