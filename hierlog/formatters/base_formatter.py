"""
Base formatter interface

A formatter turns (logger name, severity, id, message) into the string
handed to the output.
"""

from abc import ABC, abstractmethod

from hierlog.core.severity import Severity


class BaseFormatter(ABC):
    """
    Abstract base class for log formatters.

    Any object with a matching format() method can be used as a
    formatter; subclassing is optional.
    """

    @abstractmethod
    def format(self, name: str, level: Severity, log_id: int, message: str) -> str:
        """
        Format a log message into a string.

        Args:
            name: Name of the logger that was called
            level: Message severity
            log_id: Numeric message identifier
            message: Message text

        Returns:
            Formatted string
        """
        pass

    def __call__(self, name: str, level: Severity, log_id: int, message: str) -> str:
        """Allow formatters to be callable."""
        return self.format(name, level, log_id, message)


class MessageFormatter(BaseFormatter):
    """Pass the message through unchanged."""

    def format(self, name: str, level: Severity, log_id: int, message: str) -> str:
        return message

    def __repr__(self) -> str:
        return "MessageFormatter()"
