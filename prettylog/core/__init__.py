"""
Core module for the pretty log formatter

This module contains the fundamental classes:
- LogEntry: Log entry data structure
- LogLevel: Log level enumeration and presentation
- FormatterConfig: Configuration management
"""

from prettylog.core.log_entry import LogEntry, ORDER_FIELD
from prettylog.core.log_level import LogLevel, LevelCase, LevelStyle, level_style, level_text
from prettylog.core.formatter_config import FormatterConfig

__all__ = [
    "LogEntry",
    "ORDER_FIELD",
    "LogLevel",
    "LevelCase",
    "LevelStyle",
    "level_style",
    "level_text",
    "FormatterConfig",
]
