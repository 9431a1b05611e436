"""
Structured key/value log parameters
"""

from dataclasses import dataclass, field
from typing import Any

DEFAULT_DELIMITER = ","


def debug_to_string(value: Any) -> str:
    """
    Convert a value to its debug representation.

    Strings are returned unchanged, everything else goes through repr().

    Args:
        value: Any object

    Returns:
        Debug string
    """
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray)):
        return value.hex()
    return repr(value)


@dataclass
class ParameterPair:
    """
    A named value appended to a log message.

    A pair with an empty key renders as an empty string.
    """

    key: str = ""
    value: Any = ""
    delimiter: str = field(default=DEFAULT_DELIMITER, compare=False)

    def __post_init__(self):
        """Normalize the value to a string."""
        self.key = str(self.key)
        self.value = debug_to_string(self.value)

    def is_empty(self) -> bool:
        return not self.key

    def render(self, delimiter: str = None) -> str:
        """
        Render the pair as a message tail.

        Args:
            delimiter: Overrides the pair's own delimiter

        Returns:
            "<delimiter> key='value'", or "" for an empty pair
        """
        if self.is_empty():
            return ""
        if delimiter is None:
            delimiter = self.delimiter
        return f"{delimiter} {self}"

    def __str__(self) -> str:
        """Bare key='value' form."""
        if self.is_empty():
            return ""
        return f"{self.key}='{self.value}'"
