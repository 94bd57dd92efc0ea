"""
Placeholder interpolation

Replaces ``{key}`` placeholders in the message with context values
"""

import re
from datetime import datetime
from typing import Any

from logstack.core.record import Record
from logstack.processors.base_processor import BaseProcessor

_PLACEHOLDER = re.compile(r"\{([A-Za-z0-9_.]+)\}")


class PlaceholderProcessor(BaseProcessor):
    """
    Interpolate context values into the message.

    Unknown placeholders are left untouched. Values that have no readable
    string form are rendered as ``[object TypeName]``.
    """

    def __init__(self, date_format: str = "%Y-%m-%dT%H:%M:%S.%f%z"):
        """
        Initialize placeholder processor.

        Args:
            date_format: strftime format for datetime context values

        Example:
            logger.push_processor(PlaceholderProcessor())
            logger.info("User {user} logged in", {"user": "alice"})
        """
        self.date_format = date_format

    def _render(self, value: Any) -> str:
        if value is None or isinstance(value, (str, int, float, bool)):
            return str(value)
        if isinstance(value, datetime):
            return value.strftime(self.date_format)
        if type(value).__str__ is not object.__str__:
            return str(value)
        return f"[object {type(value).__name__}]"

    def process(self, record: Record) -> Record:
        if "{" not in record.message:
            return record

        def substitute(match: "re.Match") -> str:
            key = match.group(1)
            if key not in record.context:
                return match.group(0)
            return self._render(record.context[key])

        record.message = _PLACEHOLDER.sub(substitute, record.message)
        return record

    def __repr__(self) -> str:
        """String representation."""
        return "PlaceholderProcessor()"
