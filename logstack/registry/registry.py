"""
Process-wide logger registry

Maps names to Logger instances so that distant parts of an application
can share loggers without passing them around.
"""

from __future__ import annotations
import logging
import threading
from typing import Any, Dict, List, Union

from logstack.core.exceptions import InvalidArgumentError
from logstack.core.logger import Logger

_log = logging.getLogger(__name__)


class Registry:
    """
    Name to Logger lookup table shared by the whole process.

    All methods are class methods operating on class-level state. A logger
    may be bound under several names; each name holds one logger.

    Thread Safety:
        All methods are thread-safe for concurrent access.

    Example:
        Registry.add_logger(Logger("app"))
        Registry.add_logger(Logger("audit"), "security")

        Registry.get_instance("app").info("started")
    """

    _loggers: Dict[str, Logger] = {}
    _options: Dict[str, Any] = {}
    _lock = threading.RLock()

    @classmethod
    def add_logger(
        cls,
        logger: Logger,
        name: str = None,
        replace: bool = False
    ) -> None:
        """
        Bind a logger to a name.

        Args:
            logger: Logger instance
            name: Name to bind (default: the logger's own name)
            replace: Overwrite an existing binding

        Raises:
            InvalidArgumentError: If the name is already bound and
                                  replace is False
        """
        if not isinstance(logger, Logger):
            raise InvalidArgumentError(f"Not a Logger: {logger!r}")
        name = name if name is not None else logger.name

        with cls._lock:
            if name in cls._loggers and not replace:
                raise InvalidArgumentError(
                    f"Logger with the given name already exists: {name!r}"
                )
            if name in cls._loggers:
                _log.debug("Replacing logger bound to %r", name)
            cls._loggers[name] = logger

    @classmethod
    def has_logger(cls, logger: Union[Logger, str]) -> bool:
        """
        Check whether a logger is bound.

        Args:
            logger: Name, or Logger instance (checked by identity)

        Returns:
            True if bound
        """
        with cls._lock:
            if isinstance(logger, Logger):
                return any(bound is logger for bound in cls._loggers.values())
            return logger in cls._loggers

    @classmethod
    def remove_logger(cls, logger: Union[Logger, str]) -> None:
        """
        Unbind a logger.

        Given an instance, every name bound to it is removed.

        Args:
            logger: Name, or Logger instance

        Raises:
            InvalidArgumentError: If nothing is bound for it
        """
        with cls._lock:
            if isinstance(logger, Logger):
                names = [n for n, bound in cls._loggers.items() if bound is logger]
                if not names:
                    raise InvalidArgumentError(
                        f"Logger {logger.name!r} is not in the registry"
                    )
                for name in names:
                    del cls._loggers[name]
                return

            if logger not in cls._loggers:
                raise InvalidArgumentError(
                    f"Requested {logger!r} logger instance is not in the registry"
                )
            del cls._loggers[logger]

    @classmethod
    def get_instance(cls, name: str) -> Logger:
        """
        Get a bound logger.

        Raises:
            InvalidArgumentError: If the name is not bound
        """
        with cls._lock:
            try:
                return cls._loggers[name]
            except KeyError:
                raise InvalidArgumentError(
                    f"Requested {name!r} logger instance is not in the registry"
                ) from None

    @classmethod
    def get_names(cls) -> List[str]:
        """Get all bound names."""
        with cls._lock:
            return list(cls._loggers.keys())

    @classmethod
    def add_option(cls, name: str, value: Any = True) -> None:
        """Store an application-wide option next to the loggers."""
        with cls._lock:
            cls._options[name] = value

    @classmethod
    def has_option(cls, name: str) -> bool:
        with cls._lock:
            return name in cls._options

    @classmethod
    def get_option(cls, name: str) -> Any:
        """
        Get a stored option.

        Raises:
            InvalidArgumentError: If the option is not set
        """
        with cls._lock:
            try:
                return cls._options[name]
            except KeyError:
                raise InvalidArgumentError(
                    f"Requested option {name!r} is not in the registry"
                ) from None

    @classmethod
    def clear(cls) -> None:
        """Remove every logger and option."""
        with cls._lock:
            cls._loggers.clear()
            cls._options.clear()
