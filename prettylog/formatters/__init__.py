"""
Log formatters module

Provides the console formatter and the pieces it is built from.
"""

from prettylog.formatters.base_formatter import BaseFormatter
from prettylog.formatters.console_formatter import ConsoleFormatter, DEFAULT_FORMATTER
from prettylog.formatters.stdlib_adapter import LoggingFormatter
from prettylog.formatters.terminal import TerminalGate, TerminalMode
from prettylog.formatters.value_renderer import JsonPrettyPrinter, ValueRenderer

__all__ = [
    "BaseFormatter",
    "ConsoleFormatter",
    "DEFAULT_FORMATTER",
    "LoggingFormatter",
    "TerminalGate",
    "TerminalMode",
    "JsonPrettyPrinter",
    "ValueRenderer",
]
