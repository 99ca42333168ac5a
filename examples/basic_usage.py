#!/usr/bin/env python3
"""Basic usage example"""

import logging
import sys

from prettylog import (
    ConsoleFormatter,
    ConsoleWriter,
    FormatterConfig,
    LogEntry,
    LoggingFormatter,
    LogLevel,
)


def main():
    # Create formatter with field priorities
    formatter = (ConsoleFormatter(FormatterConfig(level_letters=4))
        .order(10, "request_id")
        .order(-1, "stack"))

    writer = ConsoleWriter(formatter=formatter, stream=sys.stdout)

    # Write records directly
    writer.write(LogEntry(level=LogLevel.INFO, message="Application started"))
    writer.write(LogEntry(
        level=LogLevel.WARN,
        message="Slow request",
        fields={
            "user": "bob",
            "rpc": "Orders.List",
            "request_id": "4f1c",
            "elapsed_ms": 1520,
            "query": {"status": ["open", "pending"], "limit": 50},
        },
    ))
    writer.write(LogEntry(
        level=LogLevel.ERROR,
        message="Request failed",
        fields={"error": ConnectionError("upstream closed"), "stack": ["a.py:1", "b.py:2"]},
    ))

    # Or use it from the logging module
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(LoggingFormatter(stream=handler.stream))
    logger = logging.getLogger("example")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    logger.info("Through logging", extra={"prefix": "worker", "jobs": 3})


if __name__ == "__main__":
    main()
