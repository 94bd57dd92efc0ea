"""
Base handler interface

Handlers decide whether they accept a record (``is_handling``) and deliver
it (``handle``). ``handle`` returns True to stop the remaining handlers of
the same logger stack from seeing the record.
"""

from abc import ABC, abstractmethod
from typing import Optional

from logstack.core.log_level import LevelLike, LogLevel, to_level
from logstack.core.record import Record


class HandlerInterface(ABC):
    """
    Abstract capability every handler implements.

    Leaf sinks and composite handlers are used the same way by a Logger.
    """

    @abstractmethod
    def is_handling(self, level: LogLevel) -> bool:
        """
        Check whether a record at this level would be accepted.

        Args:
            level: Level of the candidate record

        Returns:
            True if the handler accepts the level
        """
        pass

    @abstractmethod
    def handle(self, record: Record) -> bool:
        """
        Deliver a record.

        Args:
            record: Record to deliver (must not be modified)

        Returns:
            True to stop further handlers in the same stack, False to bubble
        """
        pass

    def close(self) -> None:
        """Release any resource held by the handler."""


def is_handler(obj) -> bool:
    """Check that obj offers the handler capability."""
    if isinstance(obj, HandlerInterface):
        return True
    return callable(getattr(obj, "is_handling", None)) and callable(
        getattr(obj, "handle", None)
    )


class AbstractHandler(HandlerInterface):
    """
    Handler with a minimum level and a bubble flag.

    Subclasses implement ``write``.
    """

    def __init__(
        self,
        level: LevelLike = LogLevel.DEBUG,
        bubble: bool = True,
        formatter=None
    ):
        """
        Initialize handler.

        Args:
            level: Minimum level (inclusive) this handler accepts
            bubble: If False, handling a record stops the remaining
                    handlers of the logger stack
            formatter: Optional formatter used by ``format``
        """
        self.level = to_level(level)
        self.bubble = bubble
        self.formatter = formatter

    def is_handling(self, level: LogLevel) -> bool:
        """Accept every level at or above the handler level."""
        return level >= self.level

    def handle(self, record: Record) -> bool:
        """Write the record if accepted and report the bubble decision."""
        if not self.is_handling(record.level):
            return False
        self.write(record)
        return not self.bubble

    @abstractmethod
    def write(self, record: Record) -> None:
        """Write a record to the underlying sink."""
        pass

    def format(self, record: Record) -> str:
        """Render a record with the configured formatter."""
        if self.formatter is not None:
            return self.formatter.format(record)
        return str(record)

    def set_formatter(self, formatter) -> "AbstractHandler":
        """Set the formatter and return self."""
        self.formatter = formatter
        return self

    def __repr__(self) -> str:
        """String representation."""
        return (
            f"{self.__class__.__name__}(level={self.level}, "
            f"bubble={self.bubble})"
        )
