"""Logger builder pattern"""

from datetime import tzinfo
from typing import List, Optional, Union

from logstack.core.log_level import LevelLike, LogLevel
from logstack.core.logger import Logger, Processor
from logstack.core.logger_config import LoggerConfig
from logstack.handlers.base_handler import HandlerInterface
from logstack.handlers.stream_handler import StreamHandler
from logstack.handlers.file_handler import FileHandler


class LoggerBuilder:
    """Builder pattern for logger construction."""

    def __init__(self):
        self._name = "app"
        self._handlers: List[HandlerInterface] = []
        self._processors: List[Processor] = []
        self._parent: Optional[Logger] = None
        self._config: Optional[LoggerConfig] = None

    def with_name(self, name: str) -> "LoggerBuilder":
        """Set logger name."""
        self._name = name
        return self

    def with_handler(self, handler: HandlerInterface) -> "LoggerBuilder":
        """
        Add a handler.

        Handlers are pushed in call order, so the last one added is
        tried first.

        Args:
            handler: Handler instance

        Returns:
            Self for method chaining
        """
        self._handlers.append(handler)
        return self

    def with_console(
        self,
        level: LevelLike = LogLevel.DEBUG,
        colored: bool = True,
        bubble: bool = True
    ) -> "LoggerBuilder":
        """Add a stderr stream handler."""
        return self.with_handler(
            StreamHandler(level=level, colored=colored, bubble=bubble)
        )

    def with_file(
        self,
        filepath: str,
        level: LevelLike = LogLevel.DEBUG,
        bubble: bool = True
    ) -> "LoggerBuilder":
        """Add a file handler."""
        return self.with_handler(FileHandler(filepath, level=level, bubble=bubble))

    def with_processor(self, processor: Processor) -> "LoggerBuilder":
        """
        Add a processor.

        Processors are pushed in call order, so the last one added runs
        first.

        Args:
            processor: Callable taking and returning a Record

        Returns:
            Self for method chaining
        """
        self._processors.append(processor)
        return self

    def with_parent(self, parent: Logger) -> "LoggerBuilder":
        """Set the logger records are forwarded to."""
        self._parent = parent
        return self

    def with_config(self, config: LoggerConfig) -> "LoggerBuilder":
        """Use a dedicated timestamp configuration."""
        self._config = config
        return self

    def with_timezone(self, tz: Union[tzinfo, str, None]) -> "LoggerBuilder":
        """Use a dedicated time zone for record timestamps."""
        self._config = (self._config or LoggerConfig.default()).with_timezone(tz)
        return self

    def with_microseconds(self, enabled: bool = True) -> "LoggerBuilder":
        """Use dedicated sub-second precision for record timestamps."""
        self._config = (self._config or LoggerConfig.default()).with_microseconds(enabled)
        return self

    def build(self) -> Logger:
        """Build and return configured logger."""
        logger = Logger(self._name, config=self._config)

        for handler in self._handlers:
            logger.push_handler(handler)

        for processor in self._processors:
            logger.push_processor(processor)

        if self._parent is not None:
            logger.set_parent(self._parent)

        return logger
