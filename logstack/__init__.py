"""
BSD 3-Clause License

Copyright (c) 2021, 🍀☀🌕🌥 🌊
All rights reserved.

logstack - A structured event-logging core with handler stacks,
record processors and hierarchical parent forwarding
"""

__version__ = "1.0.0"
__author__ = "kcenon"
__email__ = "kcenon@naver.com"

from logstack.core.exceptions import InvalidArgumentError, LoggerError, LogicError
from logstack.core.log_level import LogLevel, get_level_name, to_level
from logstack.core.logger import Logger
from logstack.core.logger_builder import LoggerBuilder
from logstack.core.logger_config import LoggerConfig
from logstack.core.record import Record
from logstack.registry.registry import Registry

# Import submodules (not all classes by default)
from logstack import formatters
from logstack import handlers
from logstack import processors

__all__ = [
    "Logger",
    "LoggerBuilder",
    "Record",
    "LogLevel",
    "LoggerConfig",
    "Registry",
    "LoggerError",
    "InvalidArgumentError",
    "LogicError",
    "get_level_name",
    "to_level",
    "formatters",
    "handlers",
    "processors",
]
