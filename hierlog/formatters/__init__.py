"""
Log formatters module

Provides formatter implementations for controlling log output format.
"""

from hierlog.formatters.base_formatter import BaseFormatter, MessageFormatter
from hierlog.formatters.text_formatter import TextFormatter
from hierlog.formatters.json_formatter import JSONFormatter
from hierlog.formatters.compact_formatter import CompactFormatter

__all__ = [
    "BaseFormatter",
    "MessageFormatter",
    "TextFormatter",
    "JSONFormatter",
    "CompactFormatter",
]
