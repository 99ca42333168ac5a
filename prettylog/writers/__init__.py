"""Log writers module"""

from prettylog.writers.console_writer import ConsoleWriter

__all__ = ["ConsoleWriter"]
