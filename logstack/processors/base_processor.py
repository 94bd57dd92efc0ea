"""
Base processor interface

A processor is any callable taking a Record and returning it. This base
class is a convenience for processors that carry configuration.
"""

from abc import ABC, abstractmethod
from logstack.core.record import Record


class BaseProcessor(ABC):
    """
    Abstract base class for record processors.

    Processors enrich a record before handlers see it. They may change
    ``extra``, ``context`` or ``message``, never ``channel``, ``level``
    or ``timestamp``.
    """

    @abstractmethod
    def process(self, record: Record) -> Record:
        """
        Enrich a record.

        Args:
            record: The record to process

        Returns:
            The same record, possibly modified
        """
        pass

    def __call__(self, record: Record) -> Record:
        """Allow processors to be used as plain callables."""
        return self.process(record)
