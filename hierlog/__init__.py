"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

hierlog - Hierarchical logging facade
Loggers form a tree; level, formatter and output are inherited from the
nearest configured ancestor.
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from hierlog.core.severity import Severity
from hierlog.core.logger import Logger
from hierlog.core.logger_builder import LoggerBuilder
from hierlog.core.logger_config import LoggerConfig
from hierlog.core.logger_registry import LoggerRegistry
from hierlog.helpers import ParameterPair, log_func, log_hexdump_func, format_hexdump

# Import submodules (not all classes by default)
from hierlog import formatters
from hierlog import outputs

__all__ = [
    "Severity",
    "Logger",
    "LoggerBuilder",
    "LoggerConfig",
    "LoggerRegistry",
    "ParameterPair",
    "log_func",
    "log_hexdump_func",
    "format_hexdump",
    "formatters",
    "outputs",
]
