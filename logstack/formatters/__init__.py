"""
Log formatters module

Provides formatter implementations for text sinks.
"""

from logstack.formatters.base_formatter import BaseFormatter
from logstack.formatters.json_formatter import JSONFormatter
from logstack.formatters.line_formatter import LineFormatter

__all__ = [
    "BaseFormatter",
    "JSONFormatter",
    "LineFormatter",
]
