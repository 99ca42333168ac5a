"""
Log entry data structure

One structured log event handed to a formatter.
"""

from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

from prettylog.core.log_level import LogLevel

# Reserved field carrying the insertion order of the other fields
ORDER_FIELD = "_order"


@dataclass
class LogEntry:
    """
    Log entry data structure.

    Contains everything a formatter needs to render a single log message.
    The entry is not modified while it is being rendered.
    """

    level: LogLevel
    message: str
    timestamp: datetime = field(default_factory=datetime.now)
    fields: Dict[str, Any] = field(default_factory=dict)
    order_hint: Optional[Sequence[str]] = None
    destination: Any = None

    def __post_init__(self):
        """Validate log entry after initialization."""
        if not isinstance(self.level, LogLevel):
            raise TypeError("level must be LogLevel enum")
        if not isinstance(self.message, str):
            self.message = str(self.message)
        if self.fields is None:
            self.fields = {}

    def resolved_order_hint(self) -> List[str]:
        """
        Return the insertion order of the fields.

        The explicit order_hint wins; otherwise the reserved ORDER_FIELD is
        consulted. Anything that is not a sequence of strings is ignored.
        """
        hint = self.order_hint
        if hint is None:
            hint = self.fields.get(ORDER_FIELD)
        if isinstance(hint, (str, bytes)) or not isinstance(hint, (list, tuple)):
            return []
        if not all(isinstance(name, str) for name in hint):
            return []
        return list(hint)

    def with_destination(self, destination: Any) -> "LogEntry":
        """Return a copy of this entry bound to an output stream."""
        return replace(self, destination=destination)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert log entry to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "level": self.level.name,
            "message": self.message,
            "timestamp": self.timestamp.isoformat(),
            "fields": dict(self.fields),
            "order_hint": self.resolved_order_hint(),
        }
