"""
Log record data structure

One Record is built per log call by the originating logger.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict

from logstack.core.log_level import LogLevel, to_level


@dataclass
class Record:
    """
    Snapshot of a single log event.

    ``channel`` is the name of the logger the event originated from and is
    kept as-is when the record is forwarded to parent loggers. Processors
    may add to ``extra`` and ``context``; handlers must treat the record
    as read-only.
    """

    channel: str
    level: LogLevel
    message: str
    context: Dict[str, Any] = field(default_factory=dict)
    timestamp: datetime = field(default_factory=lambda: datetime.now().astimezone())
    extra: Dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        """Validate record after initialization."""
        self.level = to_level(self.level)
        if not isinstance(self.message, str):
            self.message = str(self.message)
        self.context = dict(self.context)
        self.extra = dict(self.extra)

    @property
    def level_name(self) -> str:
        """Canonical name of the record level."""
        return self.level.name

    def copy(self) -> "Record":
        """
        Copy the record with its own context and extra dicts.

        Returns:
            New Record with the same field values
        """
        return Record(
            channel=self.channel,
            level=self.level,
            message=self.message,
            context=dict(self.context),
            timestamp=self.timestamp,
            extra=dict(self.extra),
        )

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert record to dictionary.

        Returns:
            Dictionary representation
        """
        return {
            "channel": self.channel,
            "level": int(self.level),
            "level_name": self.level_name,
            "message": self.message,
            "context": self.context,
            "timestamp": self.timestamp.isoformat(),
            "extra": self.extra,
        }

    def __str__(self) -> str:
        """String representation."""
        return (
            f"[{self.timestamp.isoformat()}] "
            f"{self.channel}.{self.level_name}: "
            f"{self.message}"
        )
