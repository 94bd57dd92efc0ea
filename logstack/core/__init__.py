"""
Core module for logger system

This module contains the fundamental classes:
- Logger: Named logger with handler/processor stacks and parent forwarding
- LoggerBuilder: Builder pattern for logger construction
- Record: Log record data structure
- LogLevel: Log level enumeration
- LoggerConfig: Timestamp configuration
"""

from logstack.core.exceptions import InvalidArgumentError, LoggerError, LogicError
from logstack.core.log_level import LogLevel, get_level_name, to_level
from logstack.core.logger import Logger
from logstack.core.logger_builder import LoggerBuilder
from logstack.core.logger_config import LoggerConfig
from logstack.core.record import Record

__all__ = [
    "Logger",
    "LoggerBuilder",
    "Record",
    "LogLevel",
    "LoggerConfig",
    "LoggerError",
    "InvalidArgumentError",
    "LogicError",
    "get_level_name",
    "to_level",
]
