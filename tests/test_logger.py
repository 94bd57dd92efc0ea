"""Basic tests for logger system"""

import threading

import pytest
from datetime import datetime, timedelta, timezone
from unittest.mock import Mock, patch

from logstack import (
    InvalidArgumentError,
    LogicError,
    Logger,
    LoggerBuilder,
    LoggerConfig,
    LogLevel,
    Record,
    get_level_name,
    to_level,
)
from logstack.handlers import HandlerInterface, MemoryHandler
from logstack.processors import TagProcessor


def make_handler(handling=True, stop=False):
    """Handler double with fixed answers."""
    handler = Mock(spec=HandlerInterface)
    handler.is_handling.return_value = handling
    handler.handle.return_value = stop
    return handler


class TestLogLevel:
    """Test log level functionality."""

    def test_log_levels(self):
        assert LogLevel.DEBUG < LogLevel.INFO
        assert LogLevel.INFO < LogLevel.NOTICE
        assert LogLevel.NOTICE < LogLevel.WARNING
        assert LogLevel.WARNING < LogLevel.ERROR
        assert LogLevel.ERROR < LogLevel.CRITICAL
        assert LogLevel.CRITICAL < LogLevel.ALERT
        assert LogLevel.ALERT < LogLevel.EMERGENCY

    def test_ranks(self):
        assert [int(level) for level in LogLevel] == [
            100, 200, 250, 300, 400, 500, 550, 600
        ]

    def test_from_string(self):
        assert LogLevel.from_string("DEBUG") == LogLevel.DEBUG
        assert LogLevel.from_string("info") == LogLevel.INFO

    def test_from_string_invalid(self):
        with pytest.raises(InvalidArgumentError):
            LogLevel.from_string("verbose")

    def test_psr_aliases(self):
        assert to_level("debug") == 100
        assert to_level("info") == 200
        assert to_level("notice") == 250
        assert to_level("warning") == 300
        assert to_level("error") == 400
        assert to_level("critical") == 500
        assert to_level("alert") == 550
        assert to_level("emergency") == 600

    def test_to_level_accepts_names_and_ranks(self):
        assert to_level("WARNING") is LogLevel.WARNING
        assert to_level(400) is LogLevel.ERROR
        assert to_level(LogLevel.ALERT) is LogLevel.ALERT

    def test_to_level_rejects_unknown(self):
        for value in ("verbose", 5, 301, None, True):
            with pytest.raises(InvalidArgumentError):
                to_level(value)

    def test_get_level_name(self):
        assert get_level_name(LogLevel.ERROR) == "ERROR"
        assert Logger.get_level_name(400) == "ERROR"

    def test_get_level_name_throws(self):
        with pytest.raises(InvalidArgumentError):
            get_level_name(5)

    def test_name_rank_bijection(self):
        for level in LogLevel:
            assert get_level_name(to_level(level.name)) == level.name

    def test_invalid_argument_is_value_error(self):
        with pytest.raises(ValueError):
            get_level_name(5)


class TestRecord:
    """Test record structure."""

    def test_create_record(self):
        record = Record(channel="app", level=LogLevel.INFO, message="Test message")
        assert record.channel == "app"
        assert record.level == LogLevel.INFO
        assert record.level_name == "INFO"
        assert record.context == {}
        assert record.extra == {}
        assert record.timestamp.tzinfo is not None

    def test_level_is_normalized(self):
        record = Record(channel="app", level="warning", message="Test")
        assert record.level is LogLevel.WARNING

    def test_copy_has_own_mappings(self):
        record = Record(
            channel="app", level=LogLevel.INFO, message="Test",
            context={"a": 1}, extra={"b": 2}
        )
        clone = record.copy()
        clone.extra["b"] = 3
        clone.context["a"] = 4

        assert record.extra == {"b": 2}
        assert record.context == {"a": 1}
        assert clone.channel == "app"
        assert clone.timestamp == record.timestamp

    def test_to_dict(self):
        record = Record(channel="app", level=LogLevel.DEBUG, message="Test")
        data = record.to_dict()
        assert data["level"] == 100
        assert data["level_name"] == "DEBUG"
        assert data["message"] == "Test"
        assert data["channel"] == "app"


class TestLoggerConfig:
    """Test timestamp configuration."""

    def test_default_config(self):
        config = LoggerConfig.default()
        assert config.timezone is None
        assert config.microseconds is True

    def test_seconds_config(self):
        config = LoggerConfig.seconds_config()
        assert config.microseconds is False
        assert config.now().microsecond == 0

    def test_utc_config(self):
        config = LoggerConfig.utc_config()
        assert config.now().utcoffset() == timedelta(0)

    def test_invalid_timezone(self):
        with pytest.raises(InvalidArgumentError):
            LoggerConfig(timezone="UTC")

    def test_unknown_zone_name(self):
        with pytest.raises(InvalidArgumentError):
            LoggerConfig.default().with_timezone("Not/AZone")


class TestLoggerStacks:
    """Test handler and processor stack management."""

    def test_get_name(self):
        logger = Logger("foo")
        assert logger.name == "foo"
        assert logger.get_name() == "foo"

    def test_with_name(self):
        handler = MemoryHandler()
        first = Logger("first", [handler])
        second = first.with_name("second")

        assert first.name == "first"
        assert second.name == "second"
        assert second.pop_handler() is handler

    def test_with_name_shares_stacks(self):
        first = Logger("first")
        second = first.with_name("second")
        handler = MemoryHandler()
        second.push_handler(handler)

        assert first.get_handlers() == [handler]
        second.info("hello")
        assert handler.last_record().channel == "second"

    def test_handlers_in_ctor(self):
        handler1 = MemoryHandler()
        handler2 = MemoryHandler()
        logger = Logger("test", [handler1, handler2])

        assert logger.pop_handler() is handler1
        assert logger.pop_handler() is handler2

    def test_processors_in_ctor(self):
        processor1 = TagProcessor(["a"])
        processor2 = TagProcessor(["b"])
        logger = Logger("test", [], [processor1, processor2])

        assert logger.pop_processor() is processor1
        assert logger.pop_processor() is processor2

    def test_push_pop_handler(self):
        logger = Logger("test")
        handler1 = MemoryHandler()
        handler2 = MemoryHandler()

        logger.push_handler(handler1)
        logger.push_handler(handler2)

        assert logger.pop_handler() is handler2
        assert logger.pop_handler() is handler1
        with pytest.raises(LogicError):
            logger.pop_handler()

    def test_push_non_handler(self):
        logger = Logger("test")
        with pytest.raises(InvalidArgumentError):
            logger.push_handler(object())

    def test_set_handlers(self):
        logger = Logger("test")
        handler1 = MemoryHandler()
        handler2 = MemoryHandler()

        logger.push_handler(handler1)
        logger.set_handlers([handler2])
        assert logger.get_handlers() == [handler2]

        logger.set_handlers({"AMapKey": handler1, "Woop": handler2})
        assert logger.get_handlers() == [handler1, handler2]

    def test_push_pop_processor(self):
        logger = Logger("test")
        processor1 = TagProcessor()
        processor2 = TagProcessor()

        logger.push_processor(processor1)
        logger.push_processor(processor2)

        assert logger.pop_processor() is processor2
        assert logger.pop_processor() is processor1
        with pytest.raises(LogicError):
            logger.pop_processor()

    def test_push_processor_with_non_callable(self):
        logger = Logger("test")
        with pytest.raises(InvalidArgumentError):
            logger.push_processor(object())

    def test_pop_errors_are_runtime_errors(self):
        with pytest.raises(RuntimeError):
            Logger("test").pop_handler()


class TestDispatch:
    """Test record dispatch on a single logger."""

    def test_channel(self):
        logger = Logger("foo")
        handler = MemoryHandler()
        logger.push_handler(handler)
        logger.warning("test")

        record, = handler.get_records()
        assert record.channel == "foo"

    def test_log(self):
        logger = Logger("test")
        handler = make_handler()
        logger.push_handler(handler)

        assert logger.warning("test") is True
        handler.handle.assert_called_once()

    def test_log_not_handled(self):
        logger = Logger("test")
        handler = MemoryHandler(LogLevel.ERROR)
        logger.push_handler(handler)

        assert logger.warning("test") is False
        assert handler.get_records() == []

    def test_below_threshold_handler_never_called(self):
        for low in LogLevel:
            for high in LogLevel:
                if low >= high:
                    continue
                handler = Mock(wraps=MemoryHandler(high))
                logger = Logger("test", [handler])

                assert handler.is_handling(low) is False
                assert logger.add_record(low, "test") is False
                handler.handle.assert_not_called()

    def test_context_is_passed(self):
        logger = Logger("test")
        handler = MemoryHandler()
        logger.push_handler(handler)
        logger.info("test", {"user": "alice"})

        assert handler.last_record().context == {"user": "alice"}

    def test_processors_are_executed(self):
        logger = Logger("test")
        handler = MemoryHandler()
        logger.push_handler(handler)

        def processor(record):
            record.extra["win"] = True
            return record

        logger.push_processor(processor)
        logger.error("test")

        assert handler.last_record().extra["win"] is True

    def test_processors_run_last_pushed_first(self):
        logger = Logger("test", [MemoryHandler()])
        calls = []

        def first(record):
            calls.append("first")
            return record

        def second(record):
            calls.append("second")
            return record

        logger.push_processor(first)
        logger.push_processor(second)
        logger.info("test")

        assert calls == ["second", "first"]

    def test_processors_are_called_only_once(self):
        logger = Logger("test")
        logger.push_handler(make_handler(handling=True, stop=True))
        logger.push_handler(make_handler(handling=True, stop=False))

        processor = Mock(side_effect=lambda record: record)
        logger.push_processor(processor)
        logger.error("test")

        processor.assert_called_once()

    def test_processors_not_called_when_not_handled(self):
        logger = Logger("test")
        handler = make_handler(handling=False)
        logger.push_handler(handler)
        processor = Mock(side_effect=lambda record: record)
        logger.push_processor(processor)

        assert logger.alert("test") is False
        processor.assert_not_called()
        handler.handle.assert_not_called()

    def test_record_not_built_without_taker(self):
        logger = Logger("test", [MemoryHandler(LogLevel.ERROR)])

        with patch("logstack.core.logger.Record", wraps=Record) as record_cls:
            assert logger.debug("test") is False

        record_cls.assert_not_called()

    def test_handlers_skipped_when_not_handling(self):
        logger = Logger("test")

        handler1 = make_handler(handling=True)
        logger.push_handler(handler1)
        handler2 = make_handler(handling=True)
        logger.push_handler(handler2)
        handler3 = make_handler(handling=False)
        logger.push_handler(handler3)

        logger.debug("test")

        handler3.handle.assert_not_called()
        handler2.handle.assert_called_once()
        handler1.handle.assert_called_once()

    def test_handlers_order_with_mapping(self):
        calls = []

        def tracking(name, handling=True):
            handler = make_handler(handling=handling)
            handler.handle.side_effect = lambda record: calls.append(name) or False
            return handler

        logger = Logger("test", {
            "last": tracking("last", handling=False),
            "second": tracking("second"),
            "first": tracking("first"),
        })
        logger.debug("test")

        assert calls == ["second", "first"]

    def test_bubbling_when_the_handler_returns_false(self):
        logger = Logger("test")
        handler1 = make_handler(stop=False)
        logger.push_handler(handler1)
        handler2 = make_handler(stop=False)
        logger.push_handler(handler2)

        logger.debug("test")

        handler1.handle.assert_called_once()
        handler2.handle.assert_called_once()

    def test_not_bubbling_when_the_handler_returns_true(self):
        logger = Logger("test")
        handler1 = make_handler(stop=False)
        logger.push_handler(handler1)
        handler2 = make_handler(stop=True)
        logger.push_handler(handler2)

        assert logger.debug("test") is True

        handler1.handle.assert_not_called()
        handler2.handle.assert_called_once()

    def test_is_handling(self):
        logger = Logger("test")

        logger.push_handler(make_handler(handling=False))
        assert logger.is_handling(LogLevel.DEBUG) is False

        logger.push_handler(make_handler(handling=True))
        assert logger.is_handling(LogLevel.DEBUG) is True

    def test_is_handling_ignores_parent(self):
        parent = Logger("parent", [MemoryHandler()])
        child = Logger("child")
        child.set_parent(parent)

        assert child.is_handling(LogLevel.ERROR) is False

    @pytest.mark.parametrize("method, expected_level", [
        ("add_debug", LogLevel.DEBUG),
        ("add_info", LogLevel.INFO),
        ("add_notice", LogLevel.NOTICE),
        ("add_warning", LogLevel.WARNING),
        ("add_error", LogLevel.ERROR),
        ("add_critical", LogLevel.CRITICAL),
        ("add_alert", LogLevel.ALERT),
        ("add_emergency", LogLevel.EMERGENCY),
        ("debug", LogLevel.DEBUG),
        ("info", LogLevel.INFO),
        ("notice", LogLevel.NOTICE),
        ("warning", LogLevel.WARNING),
        ("warn", LogLevel.WARNING),
        ("error", LogLevel.ERROR),
        ("err", LogLevel.ERROR),
        ("critical", LogLevel.CRITICAL),
        ("crit", LogLevel.CRITICAL),
        ("alert", LogLevel.ALERT),
        ("emergency", LogLevel.EMERGENCY),
        ("emerg", LogLevel.EMERGENCY),
    ])
    def test_log_methods(self, method, expected_level):
        logger = Logger("foo")
        handler = MemoryHandler()
        logger.push_handler(handler)
        getattr(logger, method)("test")

        record, = handler.get_records()
        assert record.level == expected_level

    def test_log_with_level_name(self):
        logger = Logger("foo", [MemoryHandler()])
        assert logger.log("notice", "test") is True
        assert logger.get_handlers()[0].has_records(LogLevel.NOTICE)

    def test_log_with_invalid_level(self):
        logger = Logger("foo", [MemoryHandler()])
        with pytest.raises(InvalidArgumentError):
            logger.log("loud", "test")

    def test_handler_errors_propagate(self):
        handler = make_handler()
        handler.handle.side_effect = OSError("disk full")
        logger = Logger("foo", [handler])

        with pytest.raises(OSError):
            logger.error("test")

    def test_close_closes_handlers(self):
        handler = make_handler()
        Logger("foo", [handler]).close()
        handler.close.assert_called_once()


class TestTimestamps:
    """Test process-wide and per-logger timestamp settings."""

    def test_default_timestamp_is_aware(self):
        logger = Logger("foo", [MemoryHandler()])
        logger.info("test")
        assert logger.get_handlers()[0].last_record().timestamp.tzinfo is not None

    @pytest.mark.parametrize("tz", [
        timezone.utc,
        timezone(timedelta(hours=5, minutes=30)),
        timezone(timedelta(hours=-8)),
    ])
    def test_set_timezone(self, tz):
        Logger.set_timezone(tz)
        logger = Logger("foo")
        handler = MemoryHandler()
        logger.push_handler(handler)
        logger.info("test")

        record, = handler.get_records()
        assert record.timestamp.tzinfo is tz
        assert record.timestamp.utcoffset() == tz.utcoffset(None)

    def test_set_timezone_by_name(self):
        Logger.set_timezone("UTC")
        logger = Logger("foo", [MemoryHandler()])
        logger.info("test")
        assert logger.get_handlers()[0].last_record().timestamp.utcoffset() == timedelta(0)

    def test_without_microseconds(self):
        logger = Logger("foo")
        logger.use_microsecond_timestamps(False)
        handler = MemoryHandler()
        logger.push_handler(handler)

        for _ in range(5):
            logger.info("test")

        assert all(r.timestamp.microsecond == 0 for r in handler.get_records())

    def test_with_microseconds(self):
        fixed = datetime(2024, 5, 1, 12, 0, 0, 123456, tzinfo=timezone.utc)
        Logger.use_microsecond_timestamps(True)
        logger = Logger("foo", [MemoryHandler()])

        with patch.object(LoggerConfig, "now", return_value=fixed):
            logger.info("test")

        assert logger.get_handlers()[0].last_record().timestamp.microsecond == 123456

    def test_change_only_affects_new_records(self):
        handler = MemoryHandler()
        logger = Logger("foo", [handler])
        Logger.set_timezone(timezone.utc)
        logger.info("before")
        Logger.set_timezone(timezone(timedelta(hours=2)))
        logger.info("after")

        before, after = handler.get_records()
        assert before.timestamp.utcoffset() == timedelta(0)
        assert after.timestamp.utcoffset() == timedelta(hours=2)

    def test_logger_config_overrides_global(self):
        Logger.set_timezone(timezone(timedelta(hours=5)))
        config = LoggerConfig(timezone=timezone.utc, microseconds=False)
        handler = MemoryHandler()
        logger = Logger("foo", [handler], config=config)
        logger.info("test")

        assert handler.last_record().timestamp.tzinfo is timezone.utc
        assert handler.last_record().timestamp.microsecond == 0


class TestLoggerBuilder:
    """Test builder pattern."""

    def test_builder_pattern(self):
        handler1 = MemoryHandler()
        handler2 = MemoryHandler()
        tags = TagProcessor(["built"])
        parent = Logger("parent")

        logger = (LoggerBuilder()
            .with_name("builder_test")
            .with_handler(handler1)
            .with_handler(handler2)
            .with_processor(tags)
            .with_parent(parent)
            .build())

        assert logger.name == "builder_test"
        assert logger.get_handlers() == [handler2, handler1]
        assert logger.get_processors() == [tags]
        assert logger.get_parent() is parent

    def test_builder_timestamp_config(self):
        logger = (LoggerBuilder()
            .with_name("utc")
            .with_timezone(timezone.utc)
            .with_microseconds(False)
            .build())

        assert logger.config.timezone is timezone.utc
        assert logger.config.microseconds is False

    def test_builder_console(self):
        logger = LoggerBuilder().with_console(colored=False).build()
        handler, = logger.get_handlers()
        assert handler.colored is False

    def test_builder_file(self, tmp_path):
        path = tmp_path / "logs" / "app.log"
        logger = LoggerBuilder().with_name("file").with_file(str(path)).build()
        logger.info("written")
        logger.close()

        assert "written" in path.read_text(encoding="utf-8")


class TestConcurrency:
    """Test dispatch while stacks change on other threads."""

    def test_concurrent_logging(self):
        handler = MemoryHandler()
        logger = Logger("threads", [handler])

        def worker():
            for i in range(200):
                logger.info(f"message {i}")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(handler.get_records()) == 8 * 200

    def test_push_pop_during_dispatch(self):
        stable = MemoryHandler()
        logger = Logger("threads", [stable])
        stop = threading.Event()

        def churn():
            while not stop.is_set():
                logger.push_handler(MemoryHandler(LogLevel.EMERGENCY))
                logger.pop_handler()

        churner = threading.Thread(target=churn)
        churner.start()
        try:
            for _ in range(500):
                logger.info("tick")
        finally:
            stop.set()
            churner.join()

        assert len(stable.get_records()) == 500
        assert logger.get_handlers() == [stable]
