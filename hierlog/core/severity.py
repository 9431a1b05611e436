"""
Severity enumeration

Lower rank means louder. A message passes a threshold when its rank is
lower than or equal to the threshold's rank.
"""

from enum import IntEnum
from typing import Dict


class Severity(IntEnum):
    """
    Log severity enumeration.

    CRITICAL is the loudest level, DUMP the most verbose one.
    """

    CRITICAL = 0    # Unrecoverable failures
    ERROR = 1       # Errors
    WARNING = 2     # Warnings
    NOTICE = 3      # Normal but significant events
    INFO = 4        # Informational messages
    DEBUG = 5       # Debug information
    DUMP = 6        # Most verbose, raw data dumps

    def __str__(self) -> str:
        """String representation of severity."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "Severity":
        """
        Convert string to Severity.

        Args:
            level_str: Severity name (case-insensitive)

        Returns:
            Severity enum value

        Raises:
            ValueError: If level_str is not valid
        """
        name = level_str.strip().upper()
        if name in cls.__members__:
            return cls[name]
        raise ValueError(f"Invalid severity: {level_str}")

    @classmethod
    def coerce(cls, value) -> "Severity":
        """Accept a Severity, a severity name or a rank."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            return cls.from_string(value)
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        raise TypeError(f"Cannot convert {type(value).__name__} to Severity")

    def passes(self, threshold: "Severity") -> bool:
        """True if a message of this severity gets through ``threshold``."""
        return self <= threshold

    @property
    def short_name(self) -> str:
        """Three-letter abbreviation."""
        return SHORT_NAMES[self]

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this severity.

        Returns:
            ANSI escape sequence
        """
        colors = {
            Severity.CRITICAL: "\033[35m",  # Magenta
            Severity.ERROR: "\033[31m",     # Red
            Severity.WARNING: "\033[33m",   # Yellow
            Severity.NOTICE: "\033[34m",    # Blue
            Severity.INFO: "\033[32m",      # Green
            Severity.DEBUG: "\033[36m",     # Cyan
            Severity.DUMP: "\033[37m",      # White
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Threshold of a root logger nobody configured
DEFAULT_LEVEL = Severity.CRITICAL

SHORT_NAMES: Dict[Severity, str] = {
    Severity.CRITICAL: "CRT",
    Severity.ERROR: "ERR",
    Severity.WARNING: "WRN",
    Severity.NOTICE: "NOT",
    Severity.INFO: "INF",
    Severity.DEBUG: "DBG",
    Severity.DUMP: "DMP",
}
