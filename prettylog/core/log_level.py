"""
Log level enumeration and level presentation

Maps each severity to the abbreviations and color shown in the header line.
"""

from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Dict


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Severity increases with the value. TRACE has no presentation of its own
    and is displayed like DEBUG.
    """

    TRACE = 5       # Most verbose, detailed tracing
    DEBUG = 10      # Debug information
    INFO = 20       # Informational messages
    WARN = 30       # Warning messages
    ERROR = 40      # Error messages
    FATAL = 50      # Errors that end the program
    PANIC = 60      # Errors that unwind the program

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive). WARNING and CRITICAL
                       are accepted as aliases of WARN and FATAL.

        Returns:
            LogLevel enum value

        Raises:
            ValueError: If level_str is not valid
        """
        level_str = level_str.upper()
        level_str = LEVEL_ALIASES.get(level_str, level_str)
        if level_str in cls.__members__:
            return cls[level_str]
        raise ValueError(f"Invalid log level: {level_str}")


LEVEL_ALIASES: Dict[str, str] = {
    "WARNING": "WARN",
    "CRITICAL": "FATAL",
}


class LevelCase(Enum):
    """Case folding applied to the level abbreviation."""

    UPPER = "upper"
    LOWER = "lower"
    AS_DEFINED = "as-defined"


@dataclass(frozen=True)
class LevelStyle:
    """Display abbreviations and color name for one level."""

    short: str  # 3 letters
    long: str   # padded to 5 letters
    color: str


DEFAULT_STYLE = LevelStyle("Dbg", "Debug", "blue")

LEVEL_STYLES: Dict[LogLevel, LevelStyle] = {
    LogLevel.INFO: LevelStyle("Inf", "Info ", "green"),
    LogLevel.WARN: LevelStyle("Wrn", "Warn ", "yellow"),
    LogLevel.ERROR: LevelStyle("Err", "Error", "red"),
    LogLevel.FATAL: LevelStyle("Ftl", "Fatal", "red"),
    LogLevel.PANIC: LevelStyle("Pnc", "Panic", "red"),
}


def level_style(level) -> LevelStyle:
    """Return the presentation for a level; unknown levels look like DEBUG."""
    return LEVEL_STYLES.get(level, DEFAULT_STYLE)


def clamp_letters(letters: int) -> int:
    """Coerce a level width into [1, 5]; non-positive widths reset to 3."""
    if letters <= 0:
        return 3
    return min(letters, 5)


def level_text(level, letters: int = 3, case: LevelCase = LevelCase.UPPER) -> str:
    """
    Build the level abbreviation shown in the header.

    Args:
        level: Severity to display
        letters: Width of the abbreviation (clamped into [1, 5])
        case: Case folding to apply

    Returns:
        The abbreviation, never empty

    Example:
        level_text(LogLevel.WARN, 3)  # "WRN"
        level_text(LogLevel.WARN, 5, LevelCase.AS_DEFINED)  # "Warn "
    """
    style = level_style(level)
    letters = clamp_letters(letters)

    if letters <= 3:
        text = style.short[:letters]
    else:
        text = style.long[:letters]

    if case is LevelCase.UPPER:
        return text.upper()
    if case is LevelCase.LOWER:
        return text.lower()
    return text
