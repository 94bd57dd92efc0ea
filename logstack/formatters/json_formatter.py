"""
JSON formatter for structured logging

Formats records as JSON objects
"""

import json
from logstack.core.record import Record
from logstack.formatters.base_formatter import BaseFormatter


class JSONFormatter(BaseFormatter):
    """
    Format records as JSON objects.

    Produces structured log output suitable for log aggregation systems.
    """

    def __init__(
        self,
        include_context: bool = True,
        include_extra: bool = True,
        indent: int = None,
        ensure_ascii: bool = False
    ):
        """
        Initialize JSON formatter.

        Args:
            include_context: Include the caller context in output
            include_extra: Include processor extras in output
            indent: JSON indentation (None for compact, 2 for readable)
            ensure_ascii: Escape non-ASCII characters

        Example:
            # Compact JSON (one line per record)
            formatter = JSONFormatter()

            # Pretty-printed JSON
            formatter = JSONFormatter(indent=2)
        """
        self.include_context = include_context
        self.include_extra = include_extra
        self.indent = indent
        self.ensure_ascii = ensure_ascii

    def format(self, record: Record) -> str:
        """
        Format record as JSON.

        Args:
            record: Record to format

        Returns:
            JSON string
        """
        log_dict = {
            "timestamp": record.timestamp.isoformat(),
            "channel": record.channel,
            "level": int(record.level),
            "level_name": record.level_name,
            "message": record.message,
        }

        if self.include_context and record.context:
            log_dict["context"] = record.context

        if self.include_extra and record.extra:
            log_dict["extra"] = record.extra

        return json.dumps(
            log_dict,
            indent=self.indent,
            ensure_ascii=self.ensure_ascii,
            default=str
        )

    def __repr__(self) -> str:
        """String representation."""
        return f"JSONFormatter(indent={self.indent})"
