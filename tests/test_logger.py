"""Tests for the logger hierarchy"""

import io

import pytest

from hierlog import Logger, LoggerBuilder, LoggerConfig, LoggerRegistry, Severity
from hierlog.core.severity import DEFAULT_LEVEL
from hierlog.formatters import JSONFormatter, MessageFormatter, TextFormatter
from hierlog.outputs import ConsoleOutput, FileOutput, TeeOutput

MESSAGE = "message"


class TestSeverity:
    """Test severity ordering."""

    def test_severity_order(self):
        assert Severity.CRITICAL < Severity.ERROR
        assert Severity.ERROR < Severity.WARNING
        assert Severity.WARNING < Severity.NOTICE
        assert Severity.NOTICE < Severity.INFO
        assert Severity.INFO < Severity.DEBUG
        assert Severity.DEBUG < Severity.DUMP

    def test_passes_is_rank_comparison(self):
        for level in Severity:
            for threshold in Severity:
                assert level.passes(threshold) == (level.value <= threshold.value)

    def test_from_string(self):
        assert Severity.from_string("DEBUG") == Severity.DEBUG
        assert Severity.from_string("notice") == Severity.NOTICE

    def test_from_string_invalid(self):
        with pytest.raises(ValueError):
            Severity.from_string("verbose")

    def test_coerce(self):
        assert Severity.coerce("dump") == Severity.DUMP
        assert Severity.coerce(1) == Severity.ERROR
        assert Severity.coerce(Severity.INFO) == Severity.INFO
        with pytest.raises(TypeError):
            Severity.coerce(1.5)

    def test_default_level(self):
        assert DEFAULT_LEVEL == Severity.CRITICAL


class TestLogger:
    """Test level, formatter and output resolution."""

    def test_need_log(self):
        logger = Logger()

        assert logger.need_log(Severity.CRITICAL)
        assert logger.need_log(Severity.DEBUG) is False

        logger.set_level(Severity.DUMP)

        assert logger.need_log(Severity.DEBUG)

    def test_need_log_all_pairs(self):
        logger = Logger()
        for threshold in Severity:
            logger.set_level(threshold)
            for level in Severity:
                assert logger.need_log(level) == (level <= threshold)

    def test_log_level(self):
        parent_logger = Logger()
        logger = Logger("name", parent_logger)

        parent_logger.set_level(Severity.DEBUG)
        assert parent_logger.get_level() == Severity.DEBUG
        assert logger.get_level() == Severity.DEBUG

        parent_logger.set_level(Severity.CRITICAL)
        assert parent_logger.get_level() == Severity.CRITICAL
        assert logger.get_level() == Severity.CRITICAL

        logger.set_level(Severity.DUMP)
        assert parent_logger.get_level() == Severity.CRITICAL
        assert logger.get_level() == Severity.DUMP

        parent_logger.set_level(Severity.INFO)
        assert logger.get_level() == Severity.DUMP

    def test_reset_level_inherits_again(self):
        parent_logger = Logger()
        parent_logger.set_level(Severity.INFO)
        logger = Logger("name", parent_logger)
        logger.set_level(Severity.DUMP)
        assert logger.has_own_level()

        logger.reset_level()

        assert not logger.has_own_level()
        assert logger.level == Severity.INFO

    def test_level_walks_whole_chain(self):
        root = Logger("root")
        middle = Logger("middle", root)
        leaf = Logger("leaf", middle)

        assert leaf.get_level() == DEFAULT_LEVEL
        root.set_level(Severity.NOTICE)
        assert leaf.get_level() == Severity.NOTICE

    def test_log(self, configured_logger, formatter, output):
        configured_logger.log(Severity.CRITICAL, 100, MESSAGE)

        assert formatter.last_name == "123"
        assert formatter.last_level == Severity.CRITICAL
        assert formatter.last_log_id == 100
        assert formatter.last_message == MESSAGE
        assert output.buffered_message == MESSAGE

    def test_filtered_log_touches_nothing(self, configured_logger, formatter, output):
        configured_logger.log(Severity.DEBUG, 100, MESSAGE)

        assert formatter.calls == 0
        assert output.calls == 0
        assert output.buffered_message == ""

    def test_filtered_log_needs_no_formatter(self):
        Logger().log(Severity.DEBUG, 1, MESSAGE)

    def test_logger_use_parent(self, configured_logger, formatter, output):
        configured_logger.set_level(Severity.DEBUG)
        logger = Logger("logger", configured_logger)

        logger.log(Severity.CRITICAL, 100, MESSAGE)
        assert logger.need_log(Severity.DEBUG)

        assert formatter.last_name == "logger"
        assert formatter.last_level == Severity.CRITICAL
        assert formatter.last_log_id == 100
        assert output.buffered_message == MESSAGE

    def test_logger_different_log_level_than_parent(self, configured_logger):
        logger = Logger("logger", configured_logger)
        logger.set_level(Severity.DUMP)

        assert configured_logger.need_log(Severity.DEBUG) is False
        assert logger.need_log(Severity.DEBUG)

    def test_logger_different_formatter_than_parent(self, configured_logger, formatter, formatter_factory):
        logger = Logger("logger", configured_logger)
        formatter2 = formatter_factory()
        logger.set_formatter(formatter2)

        logger.log(Severity.CRITICAL, 100, MESSAGE)

        assert formatter.last_name == ""
        assert formatter2.last_name == "logger"

    def test_logger_different_output_than_parent(self, configured_logger, output, output_factory):
        logger = Logger("logger", configured_logger)
        output2 = output_factory()
        logger.set_output(output2)

        logger.log(Severity.CRITICAL, 100, MESSAGE)

        assert output.buffered_message == ""
        assert output2.buffered_message == MESSAGE

    def test_parent_change_not_seen_through_override(self, configured_logger, formatter_factory, output_factory):
        logger = Logger("logger", configured_logger)
        own_formatter = formatter_factory()
        own_output = output_factory()
        logger.set_formatter(own_formatter)
        logger.set_output(own_output)

        configured_logger.set_formatter(formatter_factory())
        configured_logger.set_output(output_factory())

        assert logger.get_formatter() is own_formatter
        assert logger.get_output() is own_output

    def test_logger_change_formatter(self, configured_logger, formatter):
        assert configured_logger.get_formatter() is formatter

    def test_logger_change_output(self, configured_logger, output):
        assert configured_logger.get_output() is output

    def test_siblings_share_parent(self, configured_logger, output):
        first = Logger("first", configured_logger)
        second = Logger("second", configured_logger)

        first.log(Severity.CRITICAL, 1, "a")
        second.log(Severity.CRITICAL, 2, "b")

        assert output.buffered_message == "ab"

    def test_missing_formatter_raises(self, output):
        logger = Logger("bare")
        logger.set_output(output)

        with pytest.raises(RuntimeError, match="bare"):
            logger.log(Severity.CRITICAL, 1, MESSAGE)
        assert output.calls == 0

    def test_missing_output_raises(self, formatter):
        logger = Logger("bare")
        logger.set_formatter(formatter)

        with pytest.raises(RuntimeError, match="output"):
            logger.log(Severity.CRITICAL, 1, MESSAGE)

    def test_set_none_rejected(self, configured_logger):
        with pytest.raises(TypeError):
            configured_logger.set_formatter(None)
        with pytest.raises(TypeError):
            configured_logger.set_output(None)

    def test_parent_must_be_logger(self):
        with pytest.raises(TypeError):
            Logger("child", "parent")

    def test_root_and_path(self):
        root = Logger("root")
        child = Logger("child", root)
        leaf = Logger("leaf", child)

        assert leaf.root() is root
        assert root.root() is root
        assert leaf.path() == ["root", "child", "leaf"]
        assert leaf.parent is child

    def test_convenience_methods(self, dump_logger, formatter, output):
        dump_logger.warning(7, "disk almost full")

        assert formatter.last_level == Severity.WARNING
        assert formatter.last_log_id == 7
        assert output.buffered_message == "disk almost full"


class TestLoggerConfig:
    """Test logger configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.name == "root"
        assert config.level == Severity.CRITICAL
        assert config.console_output is True

    def test_debug_config(self):
        config = LoggerConfig.debug_config()
        assert config.level == Severity.DUMP

    def test_production_config(self, tmp_path):
        config = LoggerConfig.production_config(str(tmp_path / "app.log"))
        assert config.level == Severity.WARNING
        assert config.console_output is False
        assert config.log_file == tmp_path / "app.log"
        assert isinstance(config.create_formatter(), JSONFormatter)

    def test_level_name_is_coerced(self):
        assert LoggerConfig(level="debug").level == Severity.DEBUG

    def test_invalid_values(self):
        with pytest.raises(ValueError):
            LoggerConfig(name="")
        with pytest.raises(ValueError):
            LoggerConfig(formatter="xml")
        with pytest.raises(ValueError):
            LoggerConfig(formatter=None)
        with pytest.raises(ValueError):
            LoggerConfig(console_output=False)
        with pytest.raises(ValueError):
            LoggerConfig(formatter="json", template="{message}")

    def test_dict_round_trip(self):
        config = LoggerConfig(name="svc", level=Severity.INFO, formatter="compact")
        data = config.to_dict()
        assert data["level"] == "INFO"
        assert LoggerConfig.from_dict(data) == config

    def test_from_dict_unknown_key(self):
        with pytest.raises(ValueError, match="queue_size"):
            LoggerConfig.from_dict({"queue_size": 10})


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_root_gets_defaults(self):
        logger = LoggerBuilder().with_name("app").build()

        assert logger.name == "app"
        assert isinstance(logger.get_formatter(), TextFormatter)
        assert isinstance(logger.get_output(), ConsoleOutput)
        assert not logger.has_own_level()

    def test_child_inherits_unset(self, configured_logger, formatter, output):
        child = (LoggerBuilder()
            .with_name("child")
            .with_parent(configured_logger)
            .with_level(Severity.INFO)
            .build())

        assert child.has_own_level()
        assert not child.has_own_formatter()
        assert not child.has_own_output()
        assert child.get_formatter() is formatter
        assert child.get_output() is output

    def test_console_stream(self):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_level(Severity.INFO)
            .with_formatter(MessageFormatter())
            .with_console(stream=stream)
            .build())

        logger.info(1, "hello")

        assert stream.getvalue() == "hello\n"

    def test_console_color_follows_level(self):
        stream = io.StringIO()
        logger = (LoggerBuilder()
            .with_level(Severity.ERROR)
            .with_formatter(MessageFormatter())
            .with_console(colored=True, stream=stream)
            .build())

        assert logger.get_output().color == Severity.ERROR

        logger.error(1, "boom")

        assert stream.getvalue() == "\033[31mboom\033[0m\n"

    def test_template(self, output):
        logger = (LoggerBuilder()
            .with_name("net")
            .with_template("{level} {name}#{id}: {message}")
            .with_output(output)
            .build())

        logger.critical(5, "down")

        assert output.buffered_message == "CRITICAL net#5: down"

    def test_multiple_outputs(self, tmp_path, output):
        logger = (LoggerBuilder()
            .with_formatter(MessageFormatter())
            .with_file(str(tmp_path / "app.log"))
            .with_output(output)
            .build())

        tee = logger.get_output()
        assert isinstance(tee, TeeOutput)

        logger.critical(1, "both")
        tee.close()

        assert output.buffered_message == "both"
        assert (tmp_path / "app.log").read_text(encoding="utf-8") == "both\n"

    def test_file_logger_is_synchronous(self, tmp_path):
        path = tmp_path / "app.log"
        logger = (LoggerBuilder()
            .with_formatter(MessageFormatter())
            .with_file(str(path))
            .build())

        logger.critical(1, "crash imminent")

        assert path.read_text(encoding="utf-8") == "crash imminent\n"
        logger.get_output().close()

    def test_from_config(self, tmp_path):
        config = LoggerConfig(
            name="svc",
            level="debug",
            formatter="message",
            console_output=False,
            log_file=str(tmp_path / "logs" / "svc.log"),
        )
        logger = LoggerBuilder.from_config(config).build()

        assert logger.name == "svc"
        assert logger.get_level() == Severity.DEBUG
        assert isinstance(logger.get_output(), FileOutput)

        logger.debug(1, "written")
        logger.get_output().close()

        assert (tmp_path / "logs" / "svc.log").read_text(encoding="utf-8") == "written\n"


class TestLoggerRegistry:
    """Test dotted-name registry."""

    def test_creates_chain(self, configured_logger):
        registry = LoggerRegistry(configured_logger)
        tcp = registry.get_logger("net.tcp")

        assert tcp.name == "net.tcp"
        assert tcp.parent is registry.get_logger("net")
        assert tcp.parent.parent is configured_logger
        assert "net" in registry
        assert registry.loggers() == ["net", "net.tcp"]
        assert len(registry) == 2

    def test_same_name_same_instance(self, configured_logger):
        registry = LoggerRegistry(configured_logger)
        assert registry.get_logger("db") is registry.get_logger("db")

    def test_empty_name_is_root(self, configured_logger):
        registry = LoggerRegistry(configured_logger)
        assert registry.get_logger() is configured_logger
        assert registry.root is configured_logger

    def test_invalid_name(self, configured_logger):
        registry = LoggerRegistry(configured_logger)
        with pytest.raises(ValueError):
            registry.get_logger("net..tcp")

    def test_default_root_is_configured(self):
        registry = LoggerRegistry()
        assert isinstance(registry.root.get_output(), ConsoleOutput)

    def test_children_inherit_dynamically(self, configured_logger, output):
        registry = LoggerRegistry(configured_logger)
        tcp = registry.get_logger("net.tcp")

        tcp.debug(1, "hidden")
        registry.get_logger("net").set_level(Severity.DEBUG)
        tcp.debug(2, "shown")

        assert output.buffered_message == "shown"
