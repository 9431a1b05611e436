"""
Core module for hierlog

This module contains the fundamental classes:
- Severity: Log severity enumeration
- Logger: Hierarchical logger node
- LoggerConfig: Root logger configuration
- LoggerBuilder: Builder pattern for logger construction
- LoggerRegistry: Dotted-name logger trees
"""

from hierlog.core.severity import Severity, DEFAULT_LEVEL
from hierlog.core.logger import Logger
from hierlog.core.logger_config import LoggerConfig
from hierlog.core.logger_builder import LoggerBuilder
from hierlog.core.logger_registry import LoggerRegistry

__all__ = [
    "Severity",
    "DEFAULT_LEVEL",
    "Logger",
    "LoggerConfig",
    "LoggerBuilder",
    "LoggerRegistry",
]
