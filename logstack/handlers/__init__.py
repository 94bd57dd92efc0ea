"""Handlers module - Record sinks consumed by the Logger"""

from logstack.handlers.base_handler import (
    AbstractHandler,
    HandlerInterface,
    is_handler,
)
from logstack.handlers.file_handler import FileHandler
from logstack.handlers.group_handler import GroupHandler
from logstack.handlers.memory_handler import MemoryHandler
from logstack.handlers.null_handler import NullHandler
from logstack.handlers.stream_handler import StreamHandler

__all__ = [
    "HandlerInterface",
    "AbstractHandler",
    "is_handler",
    "FileHandler",
    "GroupHandler",
    "MemoryHandler",
    "NullHandler",
    "StreamHandler",
]
