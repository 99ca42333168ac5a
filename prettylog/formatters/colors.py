"""
Color table for console output

Each output role (level, data, prefix, user, time, failed value) maps to a transform
applied to its text. The table is chosen once per formatter depending on
whether the destination is a terminal.
"""

from dataclasses import dataclass
from typing import Callable, Dict

RESET = "\033[0m"

ANSI_CODES: Dict[str, str] = {
    "black": "\033[30m",
    "red": "\033[31m",
    "green": "\033[32m",
    "yellow": "\033[33m",
    "blue": "\033[34m",
    "magenta": "\033[35m",
    "cyan": "\033[36m",
    "white": "\033[37m",
    "black+h": "\033[90m",
    "magenta+h": "\033[95m",
}

Colorizer = Callable[[str], str]


def ansi(color: str) -> Colorizer:
    """Return a function wrapping text in the given ANSI color."""
    code = ANSI_CODES[color]

    def colorize(text: str) -> str:
        if not text:
            return text
        return f"{code}{text}{RESET}"

    return colorize


def no_color(text: str) -> str:
    return text


def bracketise(text: str) -> str:
    return f"[{text}]"


@dataclass(frozen=True)
class Palette:
    """Transforms for every output role."""

    data: Colorizer
    prefix: Colorizer
    user: Colorizer
    time: Colorizer
    failed: Colorizer
    levels: Dict[str, Colorizer]

    def level(self, color: str) -> Colorizer:
        """Transform for a level color name (see LevelStyle.color)."""
        return self.levels.get(color, no_color)


LEVEL_COLORS = ("blue", "green", "yellow", "red")

TERMINAL_PALETTE = Palette(
    data=ansi("cyan"),
    prefix=ansi("magenta"),
    user=ansi("magenta+h"),
    time=ansi("black+h"),
    failed=ansi("red"),
    levels={name: ansi(name) for name in LEVEL_COLORS},
)

# Pipes and files: no escape sequences, the time is bracketed instead
PLAIN_PALETTE = Palette(
    data=no_color,
    prefix=no_color,
    user=no_color,
    time=bracketise,
    failed=no_color,
    levels={},
)
