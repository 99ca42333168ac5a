"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

Python Pretty Log - A structured log record formatter for consoles and pipes
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from prettylog.core.log_entry import LogEntry, ORDER_FIELD
from prettylog.core.log_level import LogLevel, LevelCase
from prettylog.core.formatter_config import FormatterConfig
from prettylog.formatters.console_formatter import ConsoleFormatter, DEFAULT_FORMATTER
from prettylog.formatters.stdlib_adapter import LoggingFormatter
from prettylog.writers.console_writer import ConsoleWriter

# Import submodules (not all classes by default)
from prettylog import formatters
from prettylog import writers

__all__ = [
    "LogEntry",
    "ORDER_FIELD",
    "LogLevel",
    "LevelCase",
    "FormatterConfig",
    "ConsoleFormatter",
    "DEFAULT_FORMATTER",
    "LoggingFormatter",
    "ConsoleWriter",
    "formatters",
    "writers",
]
