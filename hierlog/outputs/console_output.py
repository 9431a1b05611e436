"""Console output with optional ANSI colors"""

import sys
from typing import Optional, TextIO

from hierlog.core.severity import Severity
from hierlog.outputs.base_output import BaseOutput


class ConsoleOutput(BaseOutput):
    """Write logs to a console stream."""

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        colored: bool = False,
        color: Severity = None,
        line_terminator: str = "\n"
    ):
        """
        Initialize console output.

        Args:
            stream: Output stream (default: sys.stderr)
            colored: Wrap messages in ANSI color codes
            color: Severity whose color is used (default: INFO). The
                   output never sees the message severity, so one
                   color applies to everything written here.
            line_terminator: Appended after every message
        """
        self.stream = stream or sys.stderr
        self.colored = colored
        self.color = color if color is not None else Severity.INFO
        self.line_terminator = line_terminator

    def write(self, message: str) -> None:
        """Write message to console."""
        if self.colored:
            message = f"{self.color.color_code}{message}{self.color.reset_code}"

        self.stream.write(message + self.line_terminator)
        self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()

    def __repr__(self) -> str:
        stream_name = getattr(self.stream, "name", type(self.stream).__name__)
        return f"ConsoleOutput(stream={stream_name}, colored={self.colored})"
