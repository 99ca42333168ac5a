"""
Terminal mode detection

Decides once per formatter whether output goes to an interactive terminal,
and caches everything that depends on that answer.
"""

import threading
from dataclasses import dataclass
from typing import Any, Optional

from prettylog.formatters.colors import PLAIN_PALETTE, TERMINAL_PALETTE, Palette
from prettylog.formatters.value_renderer import JsonPrettyPrinter, ValueRenderer


@dataclass(frozen=True)
class TerminalMode:
    """Mode-dependent state shared by every render of one formatter."""

    interactive: bool
    palette: Palette
    values: ValueRenderer

    @classmethod
    def for_terminal(cls, interactive: bool) -> "TerminalMode":
        if interactive:
            return cls(True, TERMINAL_PALETTE, ValueRenderer(JsonPrettyPrinter(indent=1)))
        return cls(False, PLAIN_PALETTE, ValueRenderer())


def is_terminal(destination: Any) -> bool:
    """
    Check whether a stream is attached to a terminal.

    Missing handles, handles without isatty() and closed streams are not
    terminals.
    """
    if destination is None:
        return False
    isatty = getattr(destination, "isatty", None)
    if not callable(isatty):
        return False
    try:
        return bool(isatty())
    except (ValueError, OSError):
        return False


class TerminalGate:
    """
    Run-once guard around terminal detection.

    The first call to resolve() probes the destination and builds the
    TerminalMode; every later call returns the same object without
    locking. Concurrent first calls probe exactly once.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._mode: Optional[TerminalMode] = None
        self.probe_count = 0

    @property
    def resolved(self) -> bool:
        return self._mode is not None

    @property
    def mode(self) -> Optional[TerminalMode]:
        return self._mode

    def resolve(self, destination: Any = None, forced: Optional[bool] = None) -> TerminalMode:
        """
        Return the cached mode, probing the destination on first use.

        Args:
            destination: Output stream of the first record seen
            forced: Skip the probe and use this answer instead

        Returns:
            The mode fixed for the lifetime of the gate
        """
        mode = self._mode
        if mode is not None:
            return mode

        with self._lock:
            if self._mode is None:
                if forced is None:
                    interactive = is_terminal(destination)
                else:
                    interactive = bool(forced)
                self.probe_count += 1
                self._mode = TerminalMode.for_terminal(interactive)
            return self._mode

    def __repr__(self) -> str:
        if self._mode is None:
            return "TerminalGate(unresolved)"
        return f"TerminalGate(interactive={self._mode.interactive})"
