"""
Formatter configuration management

Layout options for the console formatter.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from prettylog.core.log_level import LevelCase, clamp_letters


@dataclass
class FormatterConfig:
    """
    Console formatter configuration.

    Populate it before the first record is rendered. The formatter reads it
    without locking, so changing it while other threads render is the
    caller's responsibility.
    """

    # Level settings
    level_letters: int = 3
    level_upper: bool = True
    level_lower: bool = False

    # Value layout
    compact_full: bool = False
    compact_simple: bool = True
    compact_limit: int = 100

    # Message placement
    message_after: bool = True
    compact_message: bool = True

    # Blank lines between records
    paragraph_all: bool = False
    paragraph_block: bool = False

    # Field ordering (higher numbers appear earlier)
    priority: Dict[str, int] = field(default_factory=dict)

    # Overrides the destination probe when set
    interactive: Optional[bool] = None

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.compact_limit <= 0:
            raise ValueError("compact_limit must be positive")
        if self.priority is None:
            self.priority = {}
        self.level_letters = clamp_letters(self.level_letters)

    @property
    def level_case(self) -> LevelCase:
        """Case folding for the level text; upper wins over lower."""
        if self.level_upper:
            return LevelCase.UPPER
        if self.level_lower:
            return LevelCase.LOWER
        return LevelCase.AS_DEFINED

    @classmethod
    def default(cls) -> "FormatterConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def plain_config(cls) -> "FormatterConfig":
        """Create configuration for pipes and files: one line per record."""
        return cls(
            interactive=False,
            message_after=False,
        )

    @classmethod
    def verbose_config(cls) -> "FormatterConfig":
        """Create configuration for reading structured data in a terminal."""
        return cls(
            level_letters=5,
            compact_simple=False,
            paragraph_block=True,
        )
