"""Compiler API loading exceptions."""

from typing import Any

from modcheck.domain.exceptions.base import ModCheckError


class CompilerApiLoadError(ModCheckError, ImportError):
    """Compiler API module could not be loaded.

    Inherits ImportError for semantic correctness.

    Attributes:
        module_name: Module that was imported
        reason: Why loading failed
    """

    def __init__(self, module_name: str, reason: str) -> None:
        # FAIL-FIRST: validate required parameters
        if not module_name:
            raise ValueError("module_name must be non-empty string")
        if not reason:
            raise ValueError("reason must be non-empty string")

        self.module_name = module_name
        self.reason = reason
        super().__init__(
            f"Failed to load compiler API from {module_name}: {reason}",
            name=module_name,
        )

    def __reduce__(self) -> tuple[Any, ...]:
        return type(self), (self.module_name, self.reason)
