"""
Compact formatter for minimal log output

Produces concise single-line log messages
"""

from datetime import datetime

from hierlog.core.severity import Severity
from hierlog.formatters.base_formatter import BaseFormatter


class CompactFormatter(BaseFormatter):
    """
    Format log messages in a compact single-line format.
    """

    def __init__(self, include_timestamp: bool = True, include_name: bool = False):
        """
        Initialize compact formatter.

        Args:
            include_timestamp: Include timestamp in output
            include_name: Include logger name in output

        Example:
            # Minimal format: "DBG: message"
            formatter = CompactFormatter(include_timestamp=False)

            # With logger: "12:34:56 [net] DBG: message"
            formatter = CompactFormatter(include_name=True)
        """
        self.include_timestamp = include_timestamp
        self.include_name = include_name

    def format(self, name: str, level: Severity, log_id: int, message: str) -> str:
        parts = []

        if self.include_timestamp:
            parts.append(datetime.now().strftime("%H:%M:%S"))

        if self.include_name and name:
            parts.append(f"[{name}]")

        parts.append(f"{level.short_name}:")
        parts.append(message)

        return " ".join(parts)

    def __repr__(self) -> str:
        """String representation."""
        return f"CompactFormatter(timestamp={self.include_timestamp}, name={self.include_name})"
