"""
Main Logger class - Synchronous record dispatcher

A Logger owns a stack of handlers, a stack of processors and an optional
parent. Records are built once at the logger that received the call and
travel unchanged in identity (``channel``) up the parent chain.
"""

from __future__ import annotations
from collections import abc
from datetime import tzinfo
from typing import Any, Callable, Iterable, List, Mapping, Optional, Union
import copy
import logging
import threading
import weakref

from logstack.core.exceptions import InvalidArgumentError, LogicError
from logstack.core.log_level import LevelLike, LogLevel, get_level_name, to_level
from logstack.core.logger_config import (
    LoggerConfig,
    get_global_config,
    set_global_config,
)
from logstack.core.record import Record
from logstack.handlers.base_handler import HandlerInterface, is_handler

Processor = Callable[[Record], Record]
HandlerCollection = Union[Iterable[HandlerInterface], Mapping[Any, HandlerInterface]]

_log = logging.getLogger(__name__)


class Logger:
    """
    Named logging channel with a handler stack.

    Handlers and processors are kept most-recently-pushed first. When a
    record is dispatched, handlers are tried from the top of the stack; a
    handler returning True from ``handle`` stops the walk of this stack
    but never prevents forwarding to the parent logger.

    The parent is held through a weak reference: the caller keeps parent
    loggers alive.

    Thread Safety:
        Stack mutations are guarded by a lock. Dispatch walks a snapshot of
        the stacks, so concurrent push/pop never affects a record in flight.

    Example:
        app = Logger("app", [StreamHandler()])
        db = Logger("app.db", [MemoryHandler(LogLevel.ERROR)])
        db.set_parent(app)

        db.warning("slow query", {"ms": 812})  # seen by app's handler,
                                               # channel == "app.db"
    """

    def __init__(
        self,
        name: str,
        handlers: Optional[HandlerCollection] = None,
        processors: Optional[Iterable[Processor]] = None,
        config: Optional[LoggerConfig] = None
    ):
        """
        Initialize logger.

        Args:
            name: Channel name stamped on records created by this logger
            handlers: Initial handlers, top of the stack first. A mapping
                      is accepted; its keys are ignored.
            processors: Initial processors, first one runs first
            config: Timestamp configuration. When None, the process-wide
                    configuration in effect at record time is used.
        """
        self._name = name
        self._handlers: List[HandlerInterface] = []
        self._processors: List[Processor] = []
        self._parent: Optional[weakref.ReferenceType] = None
        self._config = config
        self._lock = threading.RLock()

        if handlers is not None:
            self.set_handlers(handlers)
        for processor in reversed(list(processors or [])):
            self.push_processor(processor)

    @property
    def name(self) -> str:
        """Channel name of this logger."""
        return self._name

    def get_name(self) -> str:
        return self._name

    def with_name(self, name: str) -> "Logger":
        """
        Create a logger with a new name sharing this logger's stacks.

        The handler and processor stacks are shared by reference: pushing
        to one logger is visible from the other. The parent and config are
        carried over. This logger is left unchanged.

        Args:
            name: Name of the new logger

        Returns:
            New Logger instance
        """
        clone = copy.copy(self)
        clone._name = name
        return clone

    # Handler stack

    def push_handler(self, handler: HandlerInterface) -> "Logger":
        """
        Push a handler on top of the stack.

        Args:
            handler: Object implementing is_handling/handle

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If handler lacks the handler methods
        """
        if not is_handler(handler):
            raise InvalidArgumentError(f"Not a handler: {handler!r}")
        with self._lock:
            self._handlers.insert(0, handler)
        return self

    def pop_handler(self) -> HandlerInterface:
        """
        Remove and return the handler on top of the stack.

        Raises:
            LogicError: If the stack is empty
        """
        with self._lock:
            if not self._handlers:
                raise LogicError("You tried to pop from an empty handler stack.")
            return self._handlers.pop(0)

    def set_handlers(self, handlers: HandlerCollection) -> "Logger":
        """
        Replace the whole handler stack.

        Args:
            handlers: Handlers, top of the stack first. For a mapping only
                      the values are used, in iteration order.

        Returns:
            Self for method chaining
        """
        if isinstance(handlers, abc.Mapping):
            handlers = handlers.values()
        new_stack = list(handlers)
        for handler in new_stack:
            if not is_handler(handler):
                raise InvalidArgumentError(f"Not a handler: {handler!r}")
        with self._lock:
            # in place, so loggers created by with_name keep sharing the stack
            self._handlers[:] = new_stack
        return self

    def get_handlers(self) -> List[HandlerInterface]:
        """Return the handler stack, top first."""
        with self._lock:
            return list(self._handlers)

    # Processor stack

    def push_processor(self, processor: Processor) -> "Logger":
        """
        Push a processor; it will run before previously pushed ones.

        Args:
            processor: Callable taking and returning a Record

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If processor is not callable
        """
        if not callable(processor):
            raise InvalidArgumentError(
                f"Processors must be valid callables, got {processor!r}"
            )
        with self._lock:
            self._processors.insert(0, processor)
        return self

    def pop_processor(self) -> Processor:
        """
        Remove and return the most recently pushed processor.

        Raises:
            LogicError: If the stack is empty
        """
        with self._lock:
            if not self._processors:
                raise LogicError("You tried to pop from an empty processor stack.")
            return self._processors.pop(0)

    def get_processors(self) -> List[Processor]:
        """Return the processor stack, first-to-run first."""
        with self._lock:
            return list(self._processors)

    # Parent link

    def set_parent(self, parent: Optional["Logger"]) -> "Logger":
        """
        Set the logger records are forwarded to after local handling.

        Only a weak reference is kept.

        Args:
            parent: Parent logger, or None to detach

        Returns:
            Self for method chaining

        Raises:
            InvalidArgumentError: If the link would create a cycle
        """
        if parent is None:
            with self._lock:
                self._parent = None
            return self

        if not isinstance(parent, Logger):
            raise InvalidArgumentError(f"Parent must be a Logger, got {parent!r}")

        ancestor = parent
        while ancestor is not None:
            if ancestor is self:
                raise InvalidArgumentError(
                    f"Setting {parent.name!r} as parent of {self._name!r} "
                    "would create a cycle"
                )
            ancestor = ancestor.get_parent()

        with self._lock:
            self._parent = weakref.ref(parent)
        _log.debug("Logger %r now forwards to %r", self._name, parent.name)
        return self

    def get_parent(self) -> Optional["Logger"]:
        """Return the parent logger, or None."""
        with self._lock:
            ref = self._parent
        return ref() if ref is not None else None

    # Timestamp configuration

    @property
    def config(self) -> LoggerConfig:
        """Configuration used for new records."""
        return self._config if self._config is not None else get_global_config()

    @classmethod
    def set_timezone(cls, tz: Union[tzinfo, str, None]) -> None:
        """
        Set the process-wide time zone of record timestamps.

        Args:
            tz: tzinfo, IANA zone name, or None for the system zone
        """
        set_global_config(get_global_config().with_timezone(tz))

    @classmethod
    def use_microsecond_timestamps(cls, enabled: bool) -> None:
        """
        Toggle sub-second precision of record timestamps process-wide.

        Args:
            enabled: When False timestamps are truncated to whole seconds
        """
        set_global_config(get_global_config().with_microseconds(enabled))

    # Dispatch

    def _snapshot(self):
        with self._lock:
            return list(self._handlers), list(self._processors), self.get_parent()

    def is_handling(self, level: LevelLike) -> bool:
        """
        Check whether any handler of this logger accepts the level.

        The parent is not consulted.
        """
        level = to_level(level)
        handlers, _, _ = self._snapshot()
        return any(handler.is_handling(level) for handler in handlers)

    def add_record(
        self,
        level: LevelLike,
        message: str,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """
        Build a record and dispatch it.

        The record is only built when one of this logger's handlers
        accepts the level or a parent exists.

        Args:
            level: Record level (LogLevel, rank or name)
            message: Log message
            context: Auxiliary key/value data

        Returns:
            True if a handler of this logger or of an ancestor handled it
        """
        level = to_level(level)
        handlers, processors, parent = self._snapshot()
        accepting = [h for h in handlers if h.is_handling(level)]

        if not accepting and parent is None:
            return False

        record = Record(
            channel=self._name,
            level=level,
            message=message,
            context=dict(context or {}),
            timestamp=self.config.now(),
        )
        return self._dispatch(record, accepting, processors, parent)

    def handle_record(self, record: Record) -> bool:
        """
        Dispatch an already built record through this logger.

        The record keeps its channel. This is the path used for records
        forwarded from child loggers.

        Returns:
            True if this logger or one of its ancestors handled it
        """
        handlers, processors, parent = self._snapshot()
        accepting = [h for h in handlers if h.is_handling(record.level)]
        return self._dispatch(record, accepting, processors, parent)

    def _dispatch(
        self,
        record: Record,
        accepting: List[HandlerInterface],
        processors: List[Processor],
        parent: Optional["Logger"]
    ) -> bool:
        handled = False

        if accepting:
            for processor in processors:
                record = processor(record)

            for handler in accepting:
                handled = True
                if handler.handle(record):
                    break

        parent_handled = False
        if parent is not None:
            parent_handled = parent.handle_record(record.copy())

        return handled or parent_handled

    # Leveled methods

    def log(
        self,
        level: LevelLike,
        message: str,
        context: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """Log a message at an arbitrary level."""
        return self.add_record(level, message, context)

    def debug(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log debug message."""
        return self.add_record(LogLevel.DEBUG, message, context)

    def info(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log info message."""
        return self.add_record(LogLevel.INFO, message, context)

    def notice(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log notice message."""
        return self.add_record(LogLevel.NOTICE, message, context)

    def warning(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log warning message."""
        return self.add_record(LogLevel.WARNING, message, context)

    def error(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log error message."""
        return self.add_record(LogLevel.ERROR, message, context)

    def critical(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log critical message."""
        return self.add_record(LogLevel.CRITICAL, message, context)

    def alert(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log alert message."""
        return self.add_record(LogLevel.ALERT, message, context)

    def emergency(self, message: str, context: Optional[Mapping[str, Any]] = None) -> bool:
        """Log emergency message."""
        return self.add_record(LogLevel.EMERGENCY, message, context)

    # Aliases
    add_debug = debug
    add_info = info
    add_notice = notice
    add_warning = warning
    add_error = error
    add_critical = critical
    add_alert = alert
    add_emergency = emergency
    warn = warning
    err = error
    crit = critical
    emerg = emergency

    def close(self) -> None:
        """Close every handler of this logger. Parents are left alone."""
        for handler in self.get_handlers():
            if hasattr(handler, "close"):
                handler.close()

    @staticmethod
    def get_level_name(level: int) -> str:
        """Canonical name of a level rank."""
        return get_level_name(level)

    @staticmethod
    def to_level(level: LevelLike) -> LogLevel:
        """Convert a level name, alias or rank to a LogLevel."""
        return to_level(level)

    def __repr__(self) -> str:
        """String representation."""
        parent = self.get_parent()
        return (
            f"Logger(name={self._name!r}, "
            f"handlers={len(self._handlers)}, "
            f"processors={len(self._processors)}, "
            f"parent={parent.name if parent else None!r})"
        )
