"""Handler that discards records"""

from logstack.core.log_level import LevelLike, LogLevel
from logstack.core.record import Record
from logstack.handlers.base_handler import AbstractHandler


class NullHandler(AbstractHandler):
    """
    Swallow every record at or above its level.

    It never bubbles, so handlers below it in the stack do not see
    accepted records.
    """

    def __init__(self, level: LevelLike = LogLevel.DEBUG):
        super().__init__(level=level, bubble=False)

    def write(self, record: Record) -> None:
        pass
