"""
Line formatter with customizable template

Formats records using a template string with placeholders
"""

import json
from typing import Any, Mapping

from logstack.core.record import Record
from logstack.formatters.base_formatter import BaseFormatter


class LineFormatter(BaseFormatter):
    """
    Format records on a single line using a template.

    Supports placeholders for all Record fields.
    """

    DEFAULT_TEMPLATE = "[{timestamp}] {channel}.{level}: {message} {context} {extra}"

    def __init__(
        self,
        template: str = None,
        timestamp_format: str = "%Y-%m-%d %H:%M:%S",
        ignore_empty_context_and_extra: bool = False
    ):
        """
        Initialize line formatter.

        Args:
            template: Format template with placeholders.
                     Available placeholders:
                     - {timestamp}: Timestamp
                     - {channel}: Originating logger name
                     - {level}: Level name
                     - {level_value}: Numeric level rank
                     - {message}: Log message
                     - {context}: Context as JSON
                     - {extra}: Extra as JSON
            timestamp_format: strftime format for timestamps
            ignore_empty_context_and_extra: Render empty mappings as ""
                                            instead of "[]"

        Example:
            # Default format
            formatter = LineFormatter()

            # Custom format
            formatter = LineFormatter("{level} - {message}")
        """
        self.template = template or self.DEFAULT_TEMPLATE
        self.timestamp_format = timestamp_format
        self.ignore_empty_context_and_extra = ignore_empty_context_and_extra

    def _stringify(self, data: Mapping[str, Any]) -> str:
        if not data:
            return "" if self.ignore_empty_context_and_extra else "[]"
        return json.dumps(data, default=str, ensure_ascii=False)

    def format(self, record: Record) -> str:
        """
        Format record using the template.

        Args:
            record: Record to format

        Returns:
            Formatted string
        """
        format_dict = {
            "timestamp": record.timestamp.strftime(self.timestamp_format),
            "channel": record.channel,
            "level": record.level_name,
            "level_value": int(record.level),
            "message": record.message,
            "context": self._stringify(record.context),
            "extra": self._stringify(record.extra),
        }

        line = self.template.format(**format_dict)
        if self.ignore_empty_context_and_extra:
            line = line.rstrip()
        return line

    def __repr__(self) -> str:
        """String representation."""
        return f"LineFormatter(template='{self.template}')"
