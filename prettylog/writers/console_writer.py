"""Console writer for formatted records"""

import io
import sys
from typing import Optional

from prettylog.core.log_entry import LogEntry
from prettylog.formatters.base_formatter import BaseFormatter
from prettylog.formatters.console_formatter import ConsoleFormatter


class ConsoleWriter:
    """Write formatted log records to a console stream."""

    def __init__(self, formatter: Optional[BaseFormatter] = None, stream=None):
        """
        Initialize console writer.

        Args:
            formatter: Log formatter (default: a new ConsoleFormatter)
            stream: Output stream, text or binary (default: sys.stderr)
        """
        self.formatter = formatter or ConsoleFormatter()
        self.stream = stream or sys.stderr

    def write(self, entry: LogEntry):
        """Write log entry to the stream."""
        # The formatter probes the entry's destination for a terminal
        if entry.destination is None:
            entry = entry.with_destination(self.stream)

        data = self.formatter.render(entry)
        if isinstance(self.stream, io.TextIOBase):
            self.stream.write(data.decode("utf-8"))
        else:
            self.stream.write(data)
        self.flush()

    def flush(self):
        """Flush stream."""
        self.stream.flush()
