"""
JSON formatter for structured logging

Formats log messages as JSON objects
"""

import json
from datetime import datetime

from hierlog.core.severity import Severity
from hierlog.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format log messages as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_timestamp: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_timestamp: Add an ISO 8601 "timestamp" field
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per message)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_timestamp = include_timestamp
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, name: str, level: Severity, log_id: int, message: str) -> str:
        """
        Format log message as JSON.

        Returns:
            JSON string
        """
        log_dict = {}
        if self.include_timestamp:
            log_dict["timestamp"] = datetime.now().isoformat()

        log_dict["level"] = level.name
        log_dict["logger"] = name
        log_dict["id"] = log_id
        log_dict["message"] = message

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
