"""Base check class for placement checks.

Provides default implementation of CheckProtocol.
Concrete checks inherit from this.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, ClassVar, Self

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi
    from modcheck.domain.model.configuration import ValidatorConfig
    from modcheck.domain.model.public_node import PublicNode
    from modcheck.domain.model.source_file import SourceFile
    from modcheck.domain.model.syntax_node import SyntaxNode


class BaseCheck(ABC):
    """Base class for checks implementing CheckProtocol.

    Concrete checks must:
    1. Set `name` class attribute
    2. Implement `check()` method
    3. Optionally override `from_config()` for conditional activation
    """

    name: ClassVar[str]
    """Check name used in configuration."""

    @abstractmethod
    def check(
        self,
        raw: SyntaxNode,
        public: PublicNode,
        api: CompilerApi,
        source_file: SourceFile,
    ) -> None:
        """Check one correlated node pair.

        Args:
            raw: Raw node
            public: Public node correlated with raw
            api: Resolved compiler API surface
            source_file: Source file owning raw

        Raises:
            PlacementError: On the first violation found
        """

    @classmethod
    def from_config(cls, config: ValidatorConfig) -> Self | None:
        """Create check from config.

        Default: enabled unless config.enabled_checks excludes `name`.

        Args:
            config: Validator configuration

        Returns:
            Check instance if enabled, None if disabled
        """
        if not config.is_enabled(cls.name):
            return None
        return cls()
