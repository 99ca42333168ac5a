"""
Console formatter for human-readable structured logs

Renders a header line (time, level, prefix, message) followed by the record's
fields. On a terminal, fields get one colored, column-aligned line each and
structured values are pretty-printed; elsewhere the output is plain
key=value text.

Example output on a terminal:

    Jan 02 15:04:05.000 INF bob@Svc.Method:
      count: 3
      tags:  [ "a", "b" ]
      request served
"""

import io
from datetime import datetime
from typing import Optional

from prettylog.core.formatter_config import FormatterConfig
from prettylog.core.log_entry import ORDER_FIELD, LogEntry
from prettylog.core.log_level import level_style, level_text
from prettylog.formatters.base_formatter import BaseFormatter
from prettylog.formatters.field_sorter import key_width, sort_fields
from prettylog.formatters.prefix import compose_prefix
from prettylog.formatters.terminal import TerminalGate, TerminalMode
from prettylog.formatters.value_renderer import ValueRenderer

MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
          "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")


def format_timestamp(timestamp: datetime) -> str:
    """Format a timestamp as "Jan 02 15:04:05.000"."""
    try:
        return (
            f"{MONTHS[timestamp.month - 1]} {timestamp.day:02d} "
            f"{timestamp.hour:02d}:{timestamp.minute:02d}:{timestamp.second:02d}"
            f".{timestamp.microsecond // 1000:03d}"
        )
    except (AttributeError, TypeError, IndexError):
        return str(timestamp)


class ConsoleFormatter(BaseFormatter):
    """
    Format log entries for consoles, pipes and files.

    The first record rendered decides whether the destination is a terminal;
    that decision holds for the life of the formatter. A formatter can be
    shared by many threads once its configuration is complete.
    """

    def __init__(self, config: Optional[FormatterConfig] = None):
        """
        Initialize console formatter.

        Args:
            config: Layout options (default: FormatterConfig.default())

        Example:
            formatter = ConsoleFormatter().order(10, "request_id").order(-1, "stack")

            formatter = ConsoleFormatter(FormatterConfig(
                level_letters=5,
                message_after=False,
            ))
        """
        self.config = config or FormatterConfig.default()
        self._gate = TerminalGate()

    def order(self, priority: int, *names: str) -> "ConsoleFormatter":
        """
        Give field names a sort priority (chainable).

        Higher numbers appear earlier; negative numbers appear after fields
        without a priority. Call before the formatter is in use.
        """
        for name in names:
            self.config.priority[name] = priority
        return self

    set_priority = order

    @property
    def mode(self) -> Optional[TerminalMode]:
        """Terminal mode, or None until the first record is rendered."""
        return self._gate.mode

    def format(self, entry: LogEntry) -> str:
        """
        Format log entry for the console.

        Args:
            entry: Log entry to format

        Returns:
            The rendered record, ending in a newline
        """
        config = self.config
        mode = self._gate.resolve(entry.destination, config.interactive)
        palette = mode.palette

        level_color = palette.level(level_style(entry.level).color)
        level = level_color(level_text(entry.level, config.level_letters, config.level_case))

        fields = {str(name): value for name, value in entry.fields.items()}
        prefix = compose_prefix(fields, palette)

        names = [name for name in fields if name != ORDER_FIELD and name not in prefix.consumed]
        names = sort_fields(names, config.priority, entry.resolved_order_hint())
        width = key_width(names)

        # The message stays on the header line unless told to go after the
        # data, except when it is short and there is no data to go after.
        message = entry.message
        cuddle = not config.message_after or (
            config.compact_message and not names and len(message) < config.compact_limit
        )

        out = io.StringIO()

        header = [palette.time(format_timestamp(entry.timestamp)), level]
        if prefix:
            header.append(prefix.label)
        if cuddle and message:
            header.append(message)
        out.write(" ".join(header))

        for name in names:
            rendered = mode.values.render(fields[name])
            if mode.interactive:
                text = ValueRenderer.layout(
                    rendered.text,
                    width,
                    compact_full=config.compact_full,
                    compact_simple=config.compact_simple,
                    limit=config.compact_limit,
                )
                if rendered.failed:
                    text = palette.failed(text)
                padding = " " * max(width - len(name), 0)
                out.write(f"\n  {palette.data(name)}: {padding}{text}")
            else:
                out.write(f"  {name}={rendered.text}")
        out.write("\n")

        if not cuddle:
            out.write(f"  {message}\n")
            if config.paragraph_all or config.paragraph_block:
                out.write("\n")
        elif config.paragraph_all:
            out.write("\n")

        return out.getvalue()

    def render(self, entry: LogEntry, buffer: Optional[bytearray] = None) -> bytes:
        """
        Render log entry as UTF-8 bytes.

        Args:
            entry: Log entry to render
            buffer: Optional buffer the output is appended to

        Returns:
            The bytes of this record
        """
        data = super().render(entry)
        if buffer is not None:
            buffer.extend(data)
        return data

    def __repr__(self) -> str:
        """String representation."""
        return f"ConsoleFormatter(config={self.config!r}, gate={self._gate!r})"


# Ready to use formatter with the default layout
DEFAULT_FORMATTER = ConsoleFormatter()
