"""Compiler API loader port (interface)."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from modcheck.domain.model.compiler_api import CompilerApi


class CompilerApiLoaderPort(ABC):
    """Port for acquiring the compiler API surface.

    Infrastructure layer must provide implementation.
    """

    @abstractmethod
    async def load(self) -> CompilerApi:
        """Resolve the compiler API surface.

        Returns:
            Compiler API

        Raises:
            CompilerApiLoadError: If the surface cannot be loaded
        """
        ...
