"""Compiler API surface and its loader.

The surface module itself (typescript) is not imported here: it is
loaded on demand by CompilerApiLoader.
"""

from modcheck.infrastructure.compiler_api.loader import (
    API_ATTRIBUTE,
    CompilerApiLoader,
    default_loader,
)

__all__ = [
    "API_ATTRIBUTE",
    "CompilerApiLoader",
    "default_loader",
]
