"""
Base output interface

An output receives fully formatted messages and delivers them somewhere.
"""

from abc import ABC, abstractmethod


class BaseOutput(ABC):
    """
    Abstract base class for log outputs.

    Any object with a write(message) method can be used as an output;
    subclassing is optional.
    """

    @abstractmethod
    def write(self, message: str) -> None:
        """
        Write a formatted message.

        Args:
            message: Output of the logger's formatter
        """
        pass

    def flush(self) -> None:
        """Flush pending data."""

    def close(self) -> None:
        """Release resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
        return False
