"""
Adapter for the standard logging module

Lets a ConsoleFormatter be installed on any logging.Handler.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Optional

from prettylog.core.log_entry import LogEntry
from prettylog.core.log_level import LogLevel
from prettylog.formatters.console_formatter import ConsoleFormatter

# Attributes every LogRecord has; anything else came in through `extra`
RESERVED_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None)).keys()) | {
    "message",
    "asctime",
}

ERROR_FIELD = "error"


def level_from_record(levelno: int) -> LogLevel:
    """Map a logging level number onto a LogLevel."""
    if levelno >= logging.CRITICAL:
        return LogLevel.FATAL
    if levelno >= logging.ERROR:
        return LogLevel.ERROR
    if levelno >= logging.WARNING:
        return LogLevel.WARN
    if levelno >= logging.INFO:
        return LogLevel.INFO
    if levelno >= logging.DEBUG:
        return LogLevel.DEBUG
    return LogLevel.TRACE


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Collect the fields passed through `extra` plus any exception."""
    fields = {
        key: value
        for key, value in record.__dict__.items()
        if key not in RESERVED_ATTRS and not key.startswith("_")
    }
    if record.exc_info and record.exc_info[1] is not None:
        fields.setdefault(ERROR_FIELD, record.exc_info[1])
    return fields


def entry_from_record(record: logging.LogRecord, destination: Any = None) -> LogEntry:
    """Convert a logging.LogRecord into a LogEntry."""
    try:
        message = record.getMessage()
    except (TypeError, ValueError):
        message = str(record.msg)

    fields = extra_fields(record)
    order_hint = getattr(record, "_order", None)

    return LogEntry(
        level=level_from_record(record.levelno),
        message=message,
        timestamp=datetime.fromtimestamp(record.created),
        fields=fields,
        order_hint=order_hint,
        destination=destination,
    )


class LoggingFormatter(logging.Formatter):
    """
    logging.Formatter that renders records with a ConsoleFormatter.

    Example:
        handler = logging.StreamHandler()
        handler.setFormatter(LoggingFormatter(stream=handler.stream))
        logging.getLogger().addHandler(handler)

        logging.getLogger(__name__).info("ready", extra={"user": "bob"})
    """

    def __init__(self, formatter: Optional[ConsoleFormatter] = None, stream: Any = None):
        """
        Initialize the adapter.

        Args:
            formatter: Console formatter to delegate to
            stream: Stream the handler writes to, probed for a terminal
        """
        super().__init__()
        self.formatter = formatter or ConsoleFormatter()
        self.stream = stream

    def format(self, record: logging.LogRecord) -> str:
        """Render a record; the trailing newline is left to the handler."""
        entry = entry_from_record(record, self.stream)
        text = self.formatter.format(entry)
        if text.endswith("\n"):
            text = text[:-1]
        return text
