"""
Record processors module

Callables that enrich records before handlers see them.
"""

from logstack.processors.base_processor import BaseProcessor
from logstack.processors.placeholder_processor import PlaceholderProcessor
from logstack.processors.tag_processor import TagProcessor
from logstack.processors.thread_info_processor import ThreadInfoProcessor

__all__ = [
    "BaseProcessor",
    "PlaceholderProcessor",
    "TagProcessor",
    "ThreadInfoProcessor",
]
