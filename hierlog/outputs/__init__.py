"""Outputs module - Log message sinks"""

from hierlog.outputs.base_output import BaseOutput
from hierlog.outputs.console_output import ConsoleOutput
from hierlog.outputs.file_output import FileOutput
from hierlog.outputs.tee_output import TeeOutput

__all__ = ["BaseOutput", "ConsoleOutput", "FileOutput", "TeeOutput"]
