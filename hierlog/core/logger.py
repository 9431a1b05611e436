"""
Hierarchical logger

Each logger may override its level, formatter and output. Anything left
unset is looked up on the parent chain when it is needed.
"""

from __future__ import annotations
from typing import Any, Iterator, List, Optional

from hierlog.core.severity import DEFAULT_LEVEL, Severity
from hierlog.helpers.hexdump import log_hexdump_func
from hierlog.helpers.log_func import log_func
from hierlog.helpers.parameter import ParameterPair


class Logger:
    """Named node of a logger tree."""

    def __init__(self, name: str = "name", parent: Optional["Logger"] = None):
        """
        Initialize logger.

        Args:
            name: Logger name, reported to the formatter on every call
            parent: Logger to inherit unset configuration from
        """
        if parent is not None and not isinstance(parent, Logger):
            raise TypeError("parent must be a Logger")
        self._name = name
        self._parent = parent
        self._level: Optional[Severity] = None
        self._formatter: Optional[Any] = None
        self._output: Optional[Any] = None

    @property
    def name(self) -> str:
        return self._name

    @property
    def parent(self) -> Optional["Logger"]:
        return self._parent

    def _chain(self) -> Iterator["Logger"]:
        """Yield this logger and then its ancestors up to the root."""
        node: Optional[Logger] = self
        while node is not None:
            yield node
            node = node._parent

    def root(self) -> "Logger":
        """Return the topmost ancestor (self for a root logger)."""
        node = self
        while node._parent is not None:
            node = node._parent
        return node

    def path(self) -> List[str]:
        """Names from the root down to this logger."""
        return [node.name for node in self._chain()][::-1]

    # Level

    def set_level(self, level: Severity) -> None:
        """Override the level for this logger only."""
        self._level = Severity.coerce(level)

    def reset_level(self) -> None:
        """Drop the level override so it is inherited again."""
        self._level = None

    def has_own_level(self) -> bool:
        return self._level is not None

    def get_level(self) -> Severity:
        """
        Get the effective level.

        Returns:
            Own level, else the nearest ancestor's, else DEFAULT_LEVEL
        """
        for node in self._chain():
            if node._level is not None:
                return node._level
        return DEFAULT_LEVEL

    @property
    def level(self) -> Severity:
        return self.get_level()

    def need_log(self, level: Severity) -> bool:
        """Check whether a message of ``level`` passes this logger."""
        return level <= self.get_level()

    # Formatter

    def set_formatter(self, formatter: Any) -> None:
        """
        Override the formatter for this logger only.

        Args:
            formatter: Object with format(name, level, log_id, message)
        """
        if formatter is None:
            raise TypeError("formatter must not be None, use reset_formatter()")
        self._formatter = formatter

    def reset_formatter(self) -> None:
        self._formatter = None

    def has_own_formatter(self) -> bool:
        return self._formatter is not None

    def get_formatter(self) -> Any:
        """
        Get the effective formatter.

        Raises:
            RuntimeError: If no logger in the chain has a formatter
        """
        for node in self._chain():
            if node._formatter is not None:
                return node._formatter
        raise RuntimeError(f"No formatter configured for logger '{self._name}'")

    # Output

    def set_output(self, output: Any) -> None:
        """
        Override the output for this logger only.

        Args:
            output: Object with write(message)
        """
        if output is None:
            raise TypeError("output must not be None, use reset_output()")
        self._output = output

    def reset_output(self) -> None:
        self._output = None

    def has_own_output(self) -> bool:
        return self._output is not None

    def get_output(self) -> Any:
        """
        Get the effective output.

        Raises:
            RuntimeError: If no logger in the chain has an output
        """
        for node in self._chain():
            if node._output is not None:
                return node._output
        raise RuntimeError(f"No output configured for logger '{self._name}'")

    # Logging

    def log(self, level: Severity, log_id: int, message: str) -> None:
        """
        Format and write a message if its level passes the filter.

        The formatter always receives this logger's name, even when the
        formatter and output are inherited from an ancestor.
        """
        if not self.need_log(level):
            return

        formatted = self.get_formatter().format(self._name, level, log_id, message)
        self.get_output().write(formatted)

    def critical(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log critical message."""
        log_func(self, Severity.CRITICAL, log_id, message, *parameters)

    def error(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log error message."""
        log_func(self, Severity.ERROR, log_id, message, *parameters)

    def warning(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log warning message."""
        log_func(self, Severity.WARNING, log_id, message, *parameters)

    def notice(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log notice message."""
        log_func(self, Severity.NOTICE, log_id, message, *parameters)

    def info(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log info message."""
        log_func(self, Severity.INFO, log_id, message, *parameters)

    def debug(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log debug message."""
        log_func(self, Severity.DEBUG, log_id, message, *parameters)

    def dump(self, log_id: int, message: str, *parameters: ParameterPair) -> None:
        """Log dump message."""
        log_func(self, Severity.DUMP, log_id, message, *parameters)

    def hexdump(
        self,
        log_id: int,
        data: bytes,
        length: int,
        indent: int = 0,
        group_size: int = 1
    ) -> None:
        """Log a hex dump of ``data`` at DEBUG level."""
        log_hexdump_func(self, log_id, data, length, indent, group_size)

    def __repr__(self) -> str:
        """String representation."""
        return f"Logger(name='{self._name}', level={self.get_level()})"
