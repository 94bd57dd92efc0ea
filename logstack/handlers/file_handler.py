"""File handler"""

from pathlib import Path

from logstack.core.log_level import LevelLike, LogLevel
from logstack.core.record import Record
from logstack.handlers.base_handler import AbstractHandler


class FileHandler(AbstractHandler):
    """Append records to a file, one per line."""

    def __init__(
        self,
        filepath: str,
        level: LevelLike = LogLevel.DEBUG,
        bubble: bool = True,
        mode: str = "a",
        encoding: str = "utf-8",
        formatter=None
    ):
        """
        Initialize file handler.

        The file is opened lazily on the first written record.

        Args:
            filepath: Path to log file
            level: Minimum level accepted
            bubble: Let lower handlers see handled records
            mode: File open mode (default: 'a' for append)
            encoding: File encoding (default: 'utf-8')
            formatter: Record formatter (default: uses record's __str__)
        """
        super().__init__(level=level, bubble=bubble, formatter=formatter)
        self.filepath = Path(filepath)
        self.mode = mode
        self.encoding = encoding
        self._file = None

    def _open(self):
        """Open log file."""
        self.filepath.parent.mkdir(parents=True, exist_ok=True)
        self._file = open(self.filepath, self.mode, encoding=self.encoding)

    def write(self, record: Record) -> None:
        """Write record to file."""
        if self._file is None:
            self._open()
        self._file.write(self.format(record) + "\n")

    def flush(self) -> None:
        """Flush file buffer."""
        if self._file:
            self._file.flush()

    def close(self) -> None:
        """Close file."""
        if self._file:
            self._file.close()
            self._file = None
