"""Lazy, memoized loader of the compiler API surface.

The surface module is imported on first use only: the validator's fast
path never pays for it. Concurrent callers share one in-flight load.
"""

from __future__ import annotations

import asyncio
import importlib
import logging
from collections.abc import Callable
from types import ModuleType

from modcheck.domain.exceptions.loading import CompilerApiLoadError
from modcheck.domain.model.compiler_api import CompilerApi
from modcheck.domain.model.configuration import DEFAULT_COMPILER_API_MODULE
from modcheck.domain.ports.compiler_api_loader import CompilerApiLoaderPort

logger = logging.getLogger(__name__)

API_ATTRIBUTE = "COMPILER_API"


class CompilerApiLoader(CompilerApiLoaderPort):
    """Imports a module exposing COMPILER_API, exactly once per success.

    Write-once handle: after the first successful load every call returns
    the memoized surface without suspending. Before that, all callers await
    the same task; the task is shielded so a cancelled caller does not
    cancel the load for the others. A failed load is not memoized.
    """

    def __init__(
        self,
        module_name: str = DEFAULT_COMPILER_API_MODULE,
        *,
        importer: Callable[[str], ModuleType] = importlib.import_module,
    ) -> None:
        """Initialize loader.

        Args:
            module_name: Module to import
            importer: Import function (default: importlib.import_module)

        Raises:
            ValueError: If module_name is empty
        """
        if not module_name:
            raise ValueError("module_name must not be empty")

        self._module_name = module_name
        self._importer = importer
        self._api: CompilerApi | None = None
        self._pending: asyncio.Task[CompilerApi] | None = None

    @property
    def module_name(self) -> str:
        """Module this loader imports."""
        return self._module_name

    @property
    def is_loaded(self) -> bool:
        """True once the surface has been resolved."""
        return self._api is not None

    async def load(self) -> CompilerApi:
        """Resolve the compiler API, importing the module on first call.

        Returns:
            Memoized compiler API

        Raises:
            CompilerApiLoadError: If import fails or the module has no COMPILER_API
        """
        if self._api is not None:
            return self._api

        loop = asyncio.get_running_loop()
        pending = self._pending
        if pending is None or pending.done() or pending.get_loop() is not loop:
            pending = loop.create_task(self._import())
            self._pending = pending

        return await asyncio.shield(pending)

    async def _import(self) -> CompilerApi:
        """Import module and extract COMPILER_API."""
        logger.debug("Loading compiler API from %s", self._module_name)

        try:
            module = await asyncio.to_thread(self._importer, self._module_name)
        except ImportError as e:
            logger.error("Compiler API module %s could not be imported: %s", self._module_name, e)
            raise CompilerApiLoadError(self._module_name, str(e) or type(e).__name__) from e

        api = getattr(module, API_ATTRIBUTE, None)
        if not isinstance(api, CompilerApi):
            logger.error("Module %s does not expose %s", self._module_name, API_ATTRIBUTE)
            raise CompilerApiLoadError(
                self._module_name,
                f"{API_ATTRIBUTE} missing or not a CompilerApi",
            )

        self._api = api
        logger.debug("Compiler API loaded from %s", self._module_name)
        return api


_shared_loaders: dict[str, CompilerApiLoader] = {}


def default_loader(module_name: str = DEFAULT_COMPILER_API_MODULE) -> CompilerApiLoader:
    """Process-wide loader for module_name.

    Every validator configured with the same module shares one handle, so
    the module is loaded once per process.
    """
    loader = _shared_loaders.get(module_name)
    if loader is None:
        loader = _shared_loaders.setdefault(module_name, CompilerApiLoader(module_name))
    return loader
