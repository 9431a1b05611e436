"""
Logger configuration management

Describes how a root logger is wired at initialization.
"""

from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

from hierlog.core.severity import DEFAULT_LEVEL, Severity
from hierlog.formatters import CompactFormatter, JSONFormatter, MessageFormatter, TextFormatter

FORMATTER_KINDS = ("text", "compact", "json", "message")


@dataclass
class LoggerConfig:
    """
    Root logger configuration.
    """

    # Basic settings
    name: str = "root"
    level: Severity = DEFAULT_LEVEL

    # Format settings
    formatter: str = "text"
    template: Optional[str] = None
    timestamp_format: str = "%Y-%m-%d %H:%M:%S.%f"

    # Console settings
    console_output: bool = True
    colored_output: bool = False

    # File settings
    log_file: Optional[Path] = None
    file_mode: str = "a"
    encoding: str = "utf-8"

    def __post_init__(self):
        """Validate configuration after initialization."""
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValueError("name must be a non-empty string")
        self.level = Severity.coerce(self.level)
        if not isinstance(self.formatter, str):
            raise ValueError("formatter must be a string")
        self.formatter = self.formatter.lower()
        if self.formatter not in FORMATTER_KINDS:
            raise ValueError(
                f"Unknown formatter '{self.formatter}', expected one of {FORMATTER_KINDS}"
            )
        if self.template is not None and self.formatter != "text":
            raise ValueError("template is only supported by the text formatter")
        if self.file_mode not in ("a", "w"):
            raise ValueError("file_mode must be 'a' or 'w'")

        # Convert log_file to Path if it's a string
        if isinstance(self.log_file, str):
            self.log_file = Path(self.log_file)

        if not self.console_output and self.log_file is None:
            raise ValueError("At least one of console_output or log_file is required")

    def create_formatter(self):
        """Instantiate the configured formatter."""
        if self.formatter == "text":
            return TextFormatter(self.template, self.timestamp_format)
        if self.formatter == "compact":
            return CompactFormatter()
        if self.formatter == "json":
            return JSONFormatter()
        return MessageFormatter()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert configuration to dictionary.

        Returns:
            Dictionary representation
        """
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        data["level"] = self.level.name
        data["log_file"] = str(self.log_file) if self.log_file is not None else None
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LoggerConfig":
        """
        Create configuration from dictionary.

        Raises:
            ValueError: On unknown keys or invalid values
        """
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown configuration keys: {sorted(unknown)}")
        return cls(**data)

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration."""
        return cls()

    @classmethod
    def debug_config(cls) -> "LoggerConfig":
        """Create configuration for debugging."""
        return cls(
            level=Severity.DUMP,
            console_output=True,
            colored_output=True,
        )

    @classmethod
    def production_config(cls, log_file: str = "logs/app.log") -> "LoggerConfig":
        """Create configuration for production."""
        return cls(
            level=Severity.WARNING,
            formatter="json",
            console_output=False,
            log_file=log_file,
        )
