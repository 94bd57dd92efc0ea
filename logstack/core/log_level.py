"""
Log level enumeration

Severity ranks follow the RFC 5424 ordering used by PSR-3 loggers.
"""

from enum import IntEnum
from typing import Dict, Union

from logstack.core.exceptions import InvalidArgumentError


class LogLevel(IntEnum):
    """
    Log level enumeration.

    Higher values are more severe. Ranks are stable for the lifetime of
    the process.
    """

    DEBUG = 100       # Detailed debug information
    INFO = 200        # Interesting events
    NOTICE = 250      # Normal but significant events
    WARNING = 300     # Exceptional occurrences that are not errors
    ERROR = 400       # Runtime errors
    CRITICAL = 500    # Critical conditions
    ALERT = 550       # Action must be taken immediately
    EMERGENCY = 600   # System is unusable

    def __str__(self) -> str:
        """String representation of log level."""
        return self.name

    @classmethod
    def from_string(cls, level_str: str) -> "LogLevel":
        """
        Convert string to LogLevel.

        Args:
            level_str: Level name (case-insensitive)

        Returns:
            LogLevel enum value

        Raises:
            InvalidArgumentError: If level_str is not valid
        """
        level = LEVEL_FROM_NAME.get(level_str.upper())
        if level is None:
            raise InvalidArgumentError(f"Invalid log level: {level_str}")
        return level

    @property
    def color_code(self) -> str:
        """
        Get ANSI color code for this level.

        Returns:
            ANSI escape sequence
        """
        colors = {
            LogLevel.DEBUG: "\033[36m",      # Cyan
            LogLevel.INFO: "\033[32m",       # Green
            LogLevel.NOTICE: "\033[34m",     # Blue
            LogLevel.WARNING: "\033[33m",    # Yellow
            LogLevel.ERROR: "\033[31m",      # Red
            LogLevel.CRITICAL: "\033[35m",   # Magenta
            LogLevel.ALERT: "\033[1;35m",    # Bold magenta
            LogLevel.EMERGENCY: "\033[1;31m",  # Bold red
        }
        return colors.get(self, "\033[0m")

    @property
    def reset_code(self) -> str:
        """ANSI reset code."""
        return "\033[0m"


# Mapping from log level to names
LEVEL_NAMES: Dict[LogLevel, str] = {level: level.name for level in LogLevel}

# Reverse mapping
LEVEL_FROM_NAME: Dict[str, LogLevel] = {v: k for k, v in LEVEL_NAMES.items()}

# PSR-3 lower-case names
PSR_LEVELS: Dict[str, LogLevel] = {
    "debug": LogLevel.DEBUG,
    "info": LogLevel.INFO,
    "notice": LogLevel.NOTICE,
    "warning": LogLevel.WARNING,
    "error": LogLevel.ERROR,
    "critical": LogLevel.CRITICAL,
    "alert": LogLevel.ALERT,
    "emergency": LogLevel.EMERGENCY,
}

LevelLike = Union[LogLevel, int, str]


def get_level_name(level: int) -> str:
    """
    Get the canonical name of a level rank.

    Args:
        level: Numeric rank

    Returns:
        Canonical upper-case name

    Raises:
        InvalidArgumentError: If the rank is not a known level
    """
    try:
        return LEVEL_NAMES[LogLevel(level)]
    except ValueError:
        raise InvalidArgumentError(
            f"Level {level!r} is not defined, use one of: "
            + ", ".join(str(int(lvl)) for lvl in LogLevel)
        ) from None


def to_level(level: LevelLike) -> LogLevel:
    """
    Convert a level name, PSR-3 alias or rank to a LogLevel.

    Args:
        level: LogLevel, integer rank, canonical name ("WARNING")
               or PSR-3 alias ("warning")

    Returns:
        LogLevel enum value

    Raises:
        InvalidArgumentError: If the value does not name a known level
    """
    if isinstance(level, LogLevel):
        return level
    if isinstance(level, str):
        if level in PSR_LEVELS:
            return PSR_LEVELS[level]
        if level in LEVEL_FROM_NAME:
            return LEVEL_FROM_NAME[level]
        raise InvalidArgumentError(f"Invalid log level: {level!r}")
    if isinstance(level, int) and not isinstance(level, bool):
        try:
            return LogLevel(level)
        except ValueError:
            raise InvalidArgumentError(f"Invalid log level: {level!r}") from None
    raise InvalidArgumentError(f"Invalid log level: {level!r}")
