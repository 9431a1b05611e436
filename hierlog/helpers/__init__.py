"""
Log helpers module

Message composition with structured parameters and hex dumps.
"""

from hierlog.helpers.parameter import ParameterPair, debug_to_string
from hierlog.helpers.log_func import compose_message, log_func
from hierlog.helpers.hexdump import format_hexdump, log_hexdump_func

__all__ = [
    "ParameterPair",
    "debug_to_string",
    "compose_message",
    "log_func",
    "format_hexdump",
    "log_hexdump_func",
]
