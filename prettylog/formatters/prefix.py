"""
Context prefix composition

Builds the "user@prefix/rpc:" segment shown before the message.
"""

from dataclasses import dataclass, field
from typing import Any, FrozenSet, Mapping

from prettylog.formatters.colors import PLAIN_PALETTE, Palette

USER_FIELD = "user"
PREFIX_FIELD = "prefix"
RPC_FIELD = "rpc"

PREFIX_FIELDS: FrozenSet[str] = frozenset({USER_FIELD, PREFIX_FIELD, RPC_FIELD})


@dataclass(frozen=True)
class Prefix:
    """A composed prefix and the field names it used up."""

    label: str = ""
    consumed: FrozenSet[str] = field(default_factory=frozenset)

    def __bool__(self) -> bool:
        return bool(self.label)


def _text_field(fields: Mapping[str, Any], name: str) -> str:
    value = fields.get(name)
    if isinstance(value, str):
        return value
    return ""


def compose_prefix(fields: Mapping[str, Any], palette: Palette = PLAIN_PALETTE) -> Prefix:
    """
    Compose the prefix from the user, prefix and rpc fields.

    Args:
        fields: Record fields
        palette: Colors for the user and origin parts

    Returns:
        Prefix whose consumed set lists the fields to leave out of the
        field block (empty when no prefix was built)

    Example:
        compose_prefix({"user": "bob", "rpc": "Svc.Method"}).label
        # "bob@Svc.Method:"
    """
    user = _text_field(fields, USER_FIELD)
    origin = _text_field(fields, RPC_FIELD)
    prefix = _text_field(fields, PREFIX_FIELD)

    user_part = palette.user(user + "@") if user else ""

    if prefix:
        origin = f"{prefix}/{origin}" if origin else prefix

    origin_part = palette.prefix(origin + ":") if origin else ""

    label = user_part + origin_part
    if not label:
        return Prefix()
    return Prefix(label, PREFIX_FIELDS)
