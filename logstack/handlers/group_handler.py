"""
Composite handler

Forwards each record to several handlers at once
"""

from typing import Iterable, List

from logstack.core.exceptions import InvalidArgumentError
from logstack.core.log_level import LogLevel
from logstack.core.record import Record
from logstack.handlers.base_handler import HandlerInterface, is_handler


class GroupHandler(HandlerInterface):
    """
    Send records to every member handler.

    Members each apply their own level check. Their bubble flags are
    ignored: every member that accepts the level sees the record.
    """

    def __init__(self, handlers: Iterable[HandlerInterface], bubble: bool = True):
        """
        Initialize group handler.

        Args:
            handlers: Member handlers, in delivery order
            bubble: If False, the group stops the logger stack after handling

        Raises:
            InvalidArgumentError: If a member is not a handler
        """
        self.handlers: List[HandlerInterface] = list(handlers)
        for handler in self.handlers:
            if not is_handler(handler):
                raise InvalidArgumentError(
                    f"GroupHandler members must be handlers, got {handler!r}"
                )
        self.bubble = bubble

    def is_handling(self, level: LogLevel) -> bool:
        return any(h.is_handling(level) for h in self.handlers)

    def handle(self, record: Record) -> bool:
        for handler in self.handlers:
            if handler.is_handling(record.level):
                handler.handle(record)
        return not self.bubble

    def close(self) -> None:
        for handler in self.handlers:
            handler.close()

    def __repr__(self) -> str:
        """String representation."""
        return f"GroupHandler(handlers={len(self.handlers)}, bubble={self.bubble})"
