"""
Field ordering

Orders field names for deterministic output and computes the key column width.
"""

from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

MIN_KEY_WIDTH = 5
MAX_KEY_WIDTH = 20


def _priority_key(priority: Mapping[str, int]) -> Callable[[str], Tuple]:
    return lambda name: (-priority.get(name, 0), name)


def _hint_key(order_hint: Sequence[str]) -> Callable[[str], Tuple]:
    positions: Dict[str, int] = {}
    for index, name in enumerate(order_hint):
        positions.setdefault(name, index)
    unhinted = len(order_hint)
    return lambda name: (positions.get(name, unhinted), name)


def sort_fields(
    names: Iterable[str],
    priority: Optional[Mapping[str, int]] = None,
    order_hint: Optional[Sequence[str]] = None,
) -> List[str]:
    """
    Sort field names.

    With a priority map, higher priorities come first (unlisted names count
    as 0, so negative priorities sort after them). Otherwise, with an order
    hint, hinted names come first in hint order. Ties, and everything when
    neither is given, are broken by name.

    Args:
        names: Field names to sort
        priority: Name to priority mapping
        order_hint: Field names in insertion order

    Returns:
        A new sorted list
    """
    if priority:
        return sorted(names, key=_priority_key(priority))
    if order_hint:
        return sorted(names, key=_hint_key(order_hint))
    return sorted(names)


def key_width(names: Iterable[str]) -> int:
    """Width of the key column: the longest name, bounded to [5, 20]."""
    longest = max((len(name) for name in names), default=0)
    return max(MIN_KEY_WIDTH, min(MAX_KEY_WIDTH, longest))
