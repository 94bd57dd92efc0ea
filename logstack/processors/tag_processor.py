"""Processor adding static tags"""

from typing import Iterable, List

from logstack.core.record import Record
from logstack.processors.base_processor import BaseProcessor


class TagProcessor(BaseProcessor):
    """
    Append a fixed set of tags to ``extra["tags"]``.

    Tags already present on the record are kept; duplicates are skipped.
    """

    def __init__(self, tags: Iterable[str] = ()):
        """
        Initialize tag processor.

        Args:
            tags: Tags to add to every processed record

        Example:
            logger.push_processor(TagProcessor(["billing", "v2"]))
        """
        self.tags: List[str] = list(tags)

    def add_tags(self, tags: Iterable[str]) -> None:
        for tag in tags:
            if tag not in self.tags:
                self.tags.append(tag)

    def process(self, record: Record) -> Record:
        current = list(record.extra.get("tags", []))
        for tag in self.tags:
            if tag not in current:
                current.append(tag)
        record.extra["tags"] = current
        return record

    def __repr__(self) -> str:
        """String representation."""
        return f"TagProcessor(tags={self.tags})"
