"""
Text formatter with customizable template

Formats log messages using a template string with placeholders
"""

from datetime import datetime

from hierlog.core.severity import Severity
from hierlog.formatters.base_formatter import BaseFormatter


class TextFormatter(BaseFormatter):
    """
    Format log messages using a customizable template.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] [{level:8}] [{name}] [{id}] {message}"

    def __init__(self, template: str = None, timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"):
        """
        Initialize text formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Time of formatting
                     - {level}: Severity name
                     - {level:8}: Severity name with padding
                     - {short_level}: Three-letter severity code
                     - {name}: Logger name
                     - {id}: Message identifier
                     - {message}: Log message
            timestamp_format: strftime format for timestamps

        Example:
            # Default format
            formatter = TextFormatter()

            # Custom format
            formatter = TextFormatter("{level} {name}#{id} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format

    def _timestamp(self) -> str:
        timestamp_str = datetime.now().strftime(self.timestamp_format)
        if self.timestamp_format.endswith("%f"):
            timestamp_str = timestamp_str[:-3]  # Milliseconds only
        return timestamp_str

    def format(self, name: str, level: Severity, log_id: int, message: str) -> str:
        """
        Format log message using the template.

        Returns:
            Formatted string
        """
        format_dict = {
            "timestamp": self._timestamp(),
            "level": level.name,
            "short_level": level.short_name,
            "name": name,
            "id": log_id,
            "message": message,
        }

        try:
            return self.template.format(**format_dict)
        except KeyError as e:
            # Fallback if template has unknown placeholder
            return f"[FORMAT ERROR: {e}] {message}"

    def __repr__(self) -> str:
        """String representation."""
        return f"TextFormatter(template='{self.template}')"
