"""Processor adding thread and process identifiers"""

import os
import threading

from logstack.core.record import Record
from logstack.processors.base_processor import BaseProcessor


class ThreadInfoProcessor(BaseProcessor):
    """Add thread_id, thread_name and process_id to ``extra``."""

    def process(self, record: Record) -> Record:
        record.extra["thread_id"] = threading.get_ident()
        record.extra["thread_name"] = threading.current_thread().name
        record.extra["process_id"] = os.getpid()
        return record

    def __repr__(self) -> str:
        """String representation."""
        return "ThreadInfoProcessor()"
