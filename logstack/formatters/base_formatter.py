"""
Base formatter interface
"""

from abc import ABC, abstractmethod
from logstack.core.record import Record


class BaseFormatter(ABC):
    """
    Abstract base class for record formatters.

    Formatters convert Record objects into strings for text sinks.
    """

    @abstractmethod
    def format(self, record: Record) -> str:
        """
        Format a record into a string.

        Args:
            record: The record to format

        Returns:
            Formatted string representation of the record
        """
        pass

    def __call__(self, record: Record) -> str:
        """Allow formatters to be callable."""
        return self.format(record)
