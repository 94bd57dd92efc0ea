"""In-memory handler used to inspect dispatched records"""

import re
from typing import Dict, List, Optional, Pattern, Union

from logstack.core.log_level import LevelLike, LogLevel, to_level
from logstack.core.record import Record
from logstack.handlers.base_handler import AbstractHandler


class MemoryHandler(AbstractHandler):
    """
    Keep every handled record in memory.

    Useful in unit tests to assert what a logger dispatched.
    """

    def __init__(self, level: LevelLike = LogLevel.DEBUG, bubble: bool = True):
        super().__init__(level=level, bubble=bubble)
        self.records: List[Record] = []
        self.records_by_level: Dict[LogLevel, List[Record]] = {}

    def write(self, record: Record) -> None:
        self.records.append(record)
        self.records_by_level.setdefault(record.level, []).append(record)

    def get_records(self) -> List[Record]:
        """Return a copy of the handled records."""
        return list(self.records)

    def clear(self) -> None:
        self.records.clear()
        self.records_by_level.clear()

    def has_records(self, level: LevelLike) -> bool:
        return bool(self.records_by_level.get(to_level(level)))

    def has_record(self, message: str, level: LevelLike) -> bool:
        """Check for a record with exactly this message at the level."""
        return any(
            r.message == message
            for r in self.records_by_level.get(to_level(level), [])
        )

    def has_record_that_matches(
        self,
        pattern: Union[str, Pattern],
        level: LevelLike
    ) -> bool:
        """Check for a record whose message matches the regex at the level."""
        compiled = re.compile(pattern) if isinstance(pattern, str) else pattern
        return any(
            compiled.search(r.message) is not None
            for r in self.records_by_level.get(to_level(level), [])
        )

    def has_record_with_source(self, channel: str, level: LevelLike) -> bool:
        """Check for a record that originated from the given channel."""
        return any(
            r.channel == channel
            for r in self.records_by_level.get(to_level(level), [])
        )

    def last_record(self) -> Optional[Record]:
        return self.records[-1] if self.records else None
