"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from prettylog.core.log_entry import LogEntry


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Formatters convert LogEntry objects into formatted strings.
    """

    @abstractmethod
    def format(self, entry: LogEntry) -> str:
        """
        Format a log entry into a string.

        Args:
            entry: The log entry to format

        Returns:
            Formatted string representation of the log entry
        """
        pass

    def render(self, entry: LogEntry) -> bytes:
        """Format a log entry into UTF-8 bytes."""
        return self.format(entry).encode("utf-8", errors="backslashreplace")

    def __call__(self, entry: LogEntry) -> str:
        """Allow formatters to be callable."""
        return self.format(entry)
