"""Tests for the console writer"""

import io
from datetime import datetime
from unittest.mock import Mock

import pytest

from prettylog import ConsoleFormatter, ConsoleWriter, LogEntry, LogLevel

TIMESTAMP = datetime(2024, 1, 2, 15, 4, 5, 123456)


def make_entry(message="ready", **fields):
    return LogEntry(level=LogLevel.INFO, message=message, timestamp=TIMESTAMP, fields=fields)


class FailingStream(io.StringIO):
    def write(self, text):
        raise OSError("disk full")


class TestConsoleWriter:
    """Test writing formatted records."""

    def test_text_stream(self):
        stream = io.StringIO()
        ConsoleWriter(stream=stream).write(make_entry())
        assert stream.getvalue() == "[Jan 02 15:04:05.123] INF ready\n"

    def test_binary_stream(self):
        stream = io.BytesIO()
        ConsoleWriter(stream=stream).write(make_entry("héllo"))
        assert stream.getvalue() == "[Jan 02 15:04:05.123] INF héllo\n".encode("utf-8")

    def test_stream_bound_as_destination(self):
        stream = io.StringIO()
        formatter = Mock()
        formatter.render.return_value = b"line\n"
        ConsoleWriter(formatter=formatter, stream=stream).write(make_entry())

        entry = formatter.render.call_args[0][0]
        assert entry.destination is stream
        assert stream.getvalue() == "line\n"

    def test_existing_destination_kept(self):
        destination = io.StringIO()
        formatter = Mock()
        formatter.render.return_value = b""
        writer = ConsoleWriter(formatter=formatter, stream=io.StringIO())
        writer.write(make_entry().with_destination(destination))

        assert formatter.render.call_args[0][0].destination is destination

    def test_records_appended(self):
        stream = io.StringIO()
        writer = ConsoleWriter(formatter=ConsoleFormatter(), stream=stream)
        writer.write(make_entry("first"))
        writer.write(make_entry("second", a=1))
        assert stream.getvalue().splitlines() == [
            "[Jan 02 15:04:05.123] INF first",
            "[Jan 02 15:04:05.123] INF  a=1",
            "  second",
        ]

    def test_write_error_propagates(self):
        writer = ConsoleWriter(stream=FailingStream())
        with pytest.raises(OSError):
            writer.write(make_entry())

    def test_default_stream(self, capsys):
        ConsoleWriter().write(make_entry())
        assert capsys.readouterr().err.endswith("INF ready\n")
