"""
Field value rendering

Turns an arbitrary field value into canonical JSON text and decides whether
it is shown on one line or as an indented block.
"""

import dataclasses
import json
import re
from collections.abc import Iterable, Iterator, Mapping, Set
from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum
from pathlib import PurePath
from typing import Any, Callable, List, NamedTuple, Optional
from uuid import UUID

MAX_DEPTH = 32
CYCLE_MARKER = "<cycle>"
DEPTH_MARKER = "<max depth>"
EMPTY_OBJECT = "{}"

_COMPACT_RE = re.compile(r"\s*\n\s*")


def portray(value: Any) -> Any:
    """
    Convert any value into a tree of JSON-compatible types.

    Containers are walked recursively. Objects become dictionaries of their
    public attributes. Self references are replaced by "<cycle>" and nesting
    deeper than MAX_DEPTH by "<max depth>".

    Args:
        value: Value to convert

    Returns:
        A tree of dict, list, str, int, float, bool and None
    """
    return _portray(value, set(), 0)


def _portray(value: Any, active: set, depth: int) -> Any:
    if isinstance(value, Enum):
        return _portray(value.value, active, depth)
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value).decode("utf-8", errors="backslashreplace")
    if isinstance(value, (Decimal, UUID, PurePath, complex)):
        return str(value)

    if depth >= MAX_DEPTH:
        return DEPTH_MARKER
    if id(value) in active:
        return CYCLE_MARKER

    active.add(id(value))
    try:
        return _portray_container(value, active, depth + 1)
    finally:
        active.discard(id(value))


def _portray_container(value: Any, active: set, depth: int) -> Any:
    if isinstance(value, dict):
        return {str(k): _portray(v, active, depth) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_portray(item, active, depth) for item in value]
    if isinstance(value, (set, frozenset)):
        items = [_portray(item, active, depth) for item in value]
        return sorted(items, key=canonical_json)
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {
            f.name: _portray(getattr(value, f.name), active, depth)
            for f in dataclasses.fields(value)
            if not f.name.startswith("_")
        }
    if isinstance(value, Mapping):
        return {str(k): _portray(v, active, depth) for k, v in value.items()}
    if isinstance(value, Set):
        items = [_portray(item, active, depth) for item in value]
        return sorted(items, key=canonical_json)
    # Iterators are not walked
    if isinstance(value, Iterable) and not isinstance(value, Iterator):
        return [_portray(item, active, depth) for item in value]
    return {
        name: _portray(attr, active, depth)
        for name, attr in _public_attributes(value).items()
    }


def _public_attributes(value: Any) -> dict:
    attrs = {}
    for cls in reversed(type(value).__mro__):
        slots = cls.__dict__.get("__slots__", ())
        if isinstance(slots, str):
            slots = (slots,)
        for name in slots:
            if not name.startswith("_") and hasattr(value, name):
                attrs[name] = getattr(value, name)
    instance_dict = getattr(value, "__dict__", None)
    if isinstance(instance_dict, dict):
        for name, attr in instance_dict.items():
            if not str(name).startswith("_"):
                attrs[str(name)] = attr
    return attrs


def canonical_json(value: Any) -> str:
    """Encode a JSON-compatible tree with sorted keys and no whitespace."""
    return json.dumps(
        value,
        sort_keys=True,
        separators=(",", ":"),
        allow_nan=False,
        ensure_ascii=False,
    )


def error_text(value: Any) -> Optional[str]:
    """Message of an exception value."""
    if isinstance(value, BaseException):
        return str(value)
    return None


def display_text(value: Any) -> Optional[str]:
    """Text of a value whose type defines its own __str__."""
    if type(value).__str__ is not object.__str__:
        return str(value)
    return None


# Tried in order when a value serializes to an empty object
TEXT_EXTRACTORS: List[Callable[[Any], Optional[str]]] = [error_text, display_text]


def rescue_text(value: Any) -> Optional[str]:
    """Return the first non-empty textual representation of a value."""
    for extract in TEXT_EXTRACTORS:
        try:
            text = extract(value)
        except Exception:
            continue
        if text:
            return text
    return None


def fallback_text(value: Any) -> str:
    """Escaped representation used when a value cannot be serialized."""
    try:
        return ascii(value)
    except Exception:
        return f"<unrepresentable {type(value).__name__}>"


class JsonPrettyPrinter:
    """Re-indents JSON text for terminal display."""

    def __init__(self, indent: int = 1):
        self.indent = indent

    def format(self, text: str) -> str:
        """
        Pretty-print JSON text.

        Raises:
            ValueError: If text is not valid JSON
        """
        return json.dumps(
            json.loads(text),
            indent=self.indent,
            sort_keys=True,
            ensure_ascii=False,
        )

    def __repr__(self) -> str:
        return f"JsonPrettyPrinter(indent={self.indent})"


class RenderedValue(NamedTuple):
    text: str
    failed: bool = False


class ValueRenderer:
    """
    Render field values for one output mode.

    A renderer with a pretty printer produces indented text for terminals;
    without one it produces canonical single-line JSON.
    """

    def __init__(self, pretty_printer: Optional[JsonPrettyPrinter] = None):
        self.pretty_printer = pretty_printer

    def render(self, value: Any) -> RenderedValue:
        """
        Render a single field value.

        Never raises: values that cannot be serialized are shown as their
        escaped repr and flagged as failed.
        """
        try:
            text = canonical_json(portray(value))
            if text == EMPTY_OBJECT:
                rescued = rescue_text(value)
                if rescued:
                    text = canonical_json(rescued)
        except Exception:
            return RenderedValue(fallback_text(value), failed=True)

        if self.pretty_printer is not None:
            try:
                text = self.pretty_printer.format(text)
            except ValueError:
                pass

        return RenderedValue(text)

    @staticmethod
    def layout(
        text: str,
        key_width: int,
        compact_full: bool = False,
        compact_simple: bool = True,
        limit: int = 100,
    ) -> str:
        """
        Lay out rendered text under its key.

        Short (or all, with compact_full) values are collapsed onto one line;
        longer values keep their lines, indented to the value column.
        """
        if compact_full or (compact_simple and len(text) < limit):
            return _COMPACT_RE.sub(" ", text)
        return text.replace("\n", "\n" + " " * (key_width + 4))

    def __repr__(self) -> str:
        return f"ValueRenderer(pretty_printer={self.pretty_printer!r})"
