"""Logger builder pattern"""

from dataclasses import replace
from pathlib import Path
from typing import Any, List, Optional, TextIO

from hierlog.core.logger import Logger
from hierlog.core.logger_config import LoggerConfig
from hierlog.core.severity import Severity
from hierlog.formatters import TextFormatter
from hierlog.outputs import ConsoleOutput, FileOutput, TeeOutput


class LoggerBuilder:
    """
    Builder pattern for logger construction.

    Settings that are not given explicitly are inherited from the parent.
    A logger built without a parent always receives a formatter and an
    output, so a tree rooted in it can never be misconfigured.
    """

    def __init__(self):
        self._config = LoggerConfig()
        self._parent: Optional[Logger] = None
        self._level: Optional[Severity] = None
        self._formatter: Optional[Any] = None
        self._console_enabled = False
        self._console_stream: Optional[TextIO] = None
        self._file_path: Optional[Path] = None
        self._file_mode = "a"
        self._custom_outputs: List[Any] = []

    @classmethod
    def from_config(cls, config: LoggerConfig) -> "LoggerBuilder":
        """
        Create a builder with every setting taken from ``config``.

        Example:
            root = LoggerBuilder.from_config(LoggerConfig.debug_config()).build()
        """
        builder = cls()
        builder._config = replace(config)
        builder.with_level(config.level)
        builder.with_formatter(config.create_formatter())
        if config.console_output:
            builder.with_console(colored=config.colored_output)
        if config.log_file is not None:
            builder.with_file(str(config.log_file), mode=config.file_mode)
        return builder

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._config.name = name
        return self

    def with_parent(self, parent: Logger) -> "LoggerBuilder":
        """Set the logger unset settings are inherited from."""
        self._parent = parent
        return self

    def with_level(self, level: Severity) -> "LoggerBuilder":
        """Set level override."""
        self._level = Severity.coerce(level)
        return self

    def with_formatter(self, formatter: Any) -> "LoggerBuilder":
        """Set formatter override."""
        self._formatter = formatter
        return self

    def with_template(self, template: str) -> "LoggerBuilder":
        """Use a TextFormatter with ``template``."""
        self._formatter = TextFormatter(template, self._config.timestamp_format)
        return self

    def with_console(self, colored: bool = False, stream: Optional[TextIO] = None) -> "LoggerBuilder":
        """Enable console output, colored after the logger's own level if set."""
        self._console_enabled = True
        self._console_stream = stream
        self._config.colored_output = colored
        return self

    def with_file(self, filepath: str, mode: str = "a") -> "LoggerBuilder":
        """Enable file output."""
        self._file_path = Path(filepath)
        self._file_mode = mode
        return self

    def with_output(self, output: Any) -> "LoggerBuilder":
        """
        Add a custom output.

        Args:
            output: Object with a write(message) method

        Returns:
            Self for method chaining
        """
        self._custom_outputs.append(output)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._config.name, self._parent)
        is_root = self._parent is None

        if self._level is not None:
            logger.set_level(self._level)

        if self._formatter is not None:
            logger.set_formatter(self._formatter)
        elif is_root:
            logger.set_formatter(self._config.create_formatter())

        outputs: List[Any] = []
        if self._console_enabled:
            outputs.append(ConsoleOutput(
                stream=self._console_stream,
                colored=self._config.colored_output,
                color=self._level,
            ))
        if self._file_path:
            outputs.append(FileOutput(str(self._file_path), mode=self._file_mode, encoding=self._config.encoding))
        outputs.extend(self._custom_outputs)

        # Root loggers fall back to stderr
        if not outputs and is_root:
            outputs.append(ConsoleOutput(colored=self._config.colored_output, color=self._level))

        if len(outputs) == 1:
            logger.set_output(outputs[0])
        elif outputs:
            logger.set_output(TeeOutput(outputs))

        return logger
