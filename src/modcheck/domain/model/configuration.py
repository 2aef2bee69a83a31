"""Validator configuration.

None = default behaviour, value = override.
"""

from __future__ import annotations

from dataclasses import dataclass

from modcheck.domain.exceptions.configuration import UnknownCheckError

DEFAULT_COMPILER_API_MODULE = "modcheck.infrastructure.compiler_api.typescript"

# Names of built-in checks, in the order they run for each node
CHECK_NAMES: tuple[str, ...] = ("decorators", "abstract_property", "modifiers")


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Configuration DTO for PlacementValidator.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        enabled_checks: Check names to run. None = all checks.
        use_fast_path: Skip the walk when no modifier keyword or "@" occurs in text.
        compiler_api_module: Module exposing COMPILER_API, imported on first use.
    """

    enabled_checks: frozenset[str] | None = None
    use_fast_path: bool = True
    compiler_api_module: str = DEFAULT_COMPILER_API_MODULE

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.enabled_checks is not None:
            if not self.enabled_checks:
                raise ValueError("enabled_checks must be None or non-empty")
            unknown = self.enabled_checks - frozenset(CHECK_NAMES)
            if unknown:
                raise UnknownCheckError(sorted(unknown)[0], CHECK_NAMES)

        if not self.compiler_api_module:
            raise ValueError("compiler_api_module must not be empty")

    def is_enabled(self, check_name: str) -> bool:
        """Check if named check should run."""
        return self.enabled_checks is None or check_name in self.enabled_checks
