"""Domain ports (interfaces)."""

from modcheck.domain.ports.check import CheckProtocol
from modcheck.domain.ports.compiler_api_loader import CompilerApiLoaderPort
from modcheck.domain.ports.reporter import ReporterProtocol

__all__ = [
    "CheckProtocol",
    "CompilerApiLoaderPort",
    "ReporterProtocol",
]
