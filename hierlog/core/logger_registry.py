"""
Named logger registry

Creates loggers by dotted name, wiring each one to its nearest parent.
"""

from typing import Dict, List, Optional

from hierlog.core.logger import Logger


class LoggerRegistry:
    """
    Keeps one logger per dotted name below a common root.

    Example:
        registry = LoggerRegistry(root)
        net = registry.get_logger("net")
        tcp = registry.get_logger("net.tcp")    # parent is net
        assert tcp.parent is net
    """

    SEPARATOR = "."

    def __init__(self, root: Optional[Logger] = None):
        """
        Initialize registry.

        Args:
            root: Top of the tree (default: a root built by LoggerBuilder)
        """
        if root is None:
            from hierlog.core.logger_builder import LoggerBuilder
            root = LoggerBuilder().build()
        self._root = root
        self._loggers: Dict[str, Logger] = {}

    @property
    def root(self) -> Logger:
        return self._root

    def get_logger(self, name: str = "") -> Logger:
        """
        Get or create the logger called ``name``.

        Missing intermediate loggers are created on the way down. An
        empty name returns the root.

        Raises:
            ValueError: If name contains an empty segment
        """
        if not name:
            return self._root

        segments = name.split(self.SEPARATOR)
        if not all(segments):
            raise ValueError(f"Invalid logger name: '{name}'")

        parent = self._root
        for depth in range(1, len(segments) + 1):
            path = self.SEPARATOR.join(segments[:depth])
            logger = self._loggers.get(path)
            if logger is None:
                logger = Logger(path, parent)
                self._loggers[path] = logger
            parent = logger
        return parent

    def loggers(self) -> List[str]:
        """Names of all registered loggers, sorted."""
        return sorted(self._loggers)

    def __contains__(self, name: str) -> bool:
        return name in self._loggers

    def __len__(self) -> int:
        return len(self._loggers)
