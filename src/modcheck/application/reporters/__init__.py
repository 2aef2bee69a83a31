"""Reporters: render placement errors like parser syntax errors."""

from modcheck.application.reporters.console import ConsoleConfig, ConsoleReporter
from modcheck.application.reporters.plain_text import PlainTextReporter

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "PlainTextReporter",
]
