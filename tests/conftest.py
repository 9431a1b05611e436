"""Shared test doubles"""

import pytest

from hierlog import Logger, Severity


class FormatterMock:
    """Record the last call and return the message unchanged."""

    def __init__(self):
        self.calls = 0
        self.last_name = ""
        self.last_level = None
        self.last_log_id = None
        self.last_message = ""

    def format(self, name, level, log_id, message):
        self.calls += 1
        self.last_name = name
        self.last_level = level
        self.last_log_id = log_id
        self.last_message = message
        return message


class OutputMock:
    """Concatenate everything written."""

    def __init__(self):
        self.calls = 0
        self.buffered_message = ""

    def write(self, message):
        self.calls += 1
        self.buffered_message += message


@pytest.fixture
def formatter_factory():
    return FormatterMock


@pytest.fixture
def output_factory():
    return OutputMock


@pytest.fixture
def formatter():
    return FormatterMock()


@pytest.fixture
def output():
    return OutputMock()


@pytest.fixture
def configured_logger(formatter, output):
    logger = Logger("123")
    logger.set_formatter(formatter)
    logger.set_output(output)
    return logger


@pytest.fixture
def dump_logger(formatter, output):
    logger = Logger()
    logger.set_formatter(formatter)
    logger.set_output(output)
    logger.set_level(Severity.DUMP)
    return logger
