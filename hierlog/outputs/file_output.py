"""File output"""

from pathlib import Path

from hierlog.outputs.base_output import BaseOutput


class FileOutput(BaseOutput):
    """Write logs to file."""

    def __init__(
        self,
        filepath: str,
        mode: str = "a",
        encoding: str = "utf-8",
        line_terminator: str = "\n"
    ):
        """
        Initialize file output.

        Args:
            filepath: Path to log file
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            line_terminator: Appended after every message
        """
        if mode not in ("a", "w"):
            raise ValueError("mode must be 'a' or 'w'")
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self.line_terminator = line_terminator
        self._file = None
        self._open()

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    @property
    def closed(self) -> bool:
        return self._file is None

    def write(self, message: str) -> None:
        """Write message to file."""
        if self._file is None:
            raise ValueError(f"Write to closed log file: {self.filepath}")
        self._file.write(message + self.line_terminator)
        self._file.flush()

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None

    def __repr__(self) -> str:
        return f"FileOutput(filepath='{self.filepath}')"
