"""Stream handler with ANSI colors"""

import sys

from logstack.core.log_level import LevelLike, LogLevel
from logstack.core.record import Record
from logstack.handlers.base_handler import AbstractHandler


class StreamHandler(AbstractHandler):
    """Write records to a text stream with optional colors."""

    def __init__(
        self,
        stream=None,
        level: LevelLike = LogLevel.DEBUG,
        bubble: bool = True,
        colored: bool = False,
        formatter=None
    ):
        """
        Initialize stream handler.

        Args:
            stream: Output stream (default: sys.stderr)
            level: Minimum level accepted
            bubble: Let lower handlers see handled records
            colored: Use ANSI color codes
            formatter: Record formatter (default: uses record's __str__)
        """
        super().__init__(level=level, bubble=bubble, formatter=formatter)
        self.stream = stream or sys.stderr
        self.colored = colored

    def write(self, record: Record) -> None:
        """Write record to the stream."""
        msg = self.format(record)

        if self.colored:
            msg = f"{record.level.color_code}{msg}{record.level.reset_code}"

        self.stream.write(msg + "\n")
        self.stream.flush()

    def flush(self) -> None:
        """Flush stream."""
        self.stream.flush()
