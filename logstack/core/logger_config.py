"""
Timestamp configuration for log records

Holds the process-wide time zone and microsecond settings. A Logger may
also be given its own LoggerConfig, which then takes precedence.
"""

from dataclasses import dataclass, replace
from datetime import datetime, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError
import logging
import threading

from logstack.core.exceptions import InvalidArgumentError

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoggerConfig:
    """
    Record timestamp configuration.

    Attributes:
        timezone: Zone for record timestamps. None means the system local zone.
        microseconds: Keep sub-second precision. When False, timestamps
                      are truncated to whole seconds.
    """

    timezone: Optional[tzinfo] = None
    microseconds: bool = True

    def __post_init__(self):
        """Validate configuration after initialization."""
        if self.timezone is not None and not isinstance(self.timezone, tzinfo):
            raise InvalidArgumentError("timezone must be a tzinfo instance or None")
        if not isinstance(self.microseconds, bool):
            raise InvalidArgumentError("microseconds must be a bool")

    def now(self) -> datetime:
        """
        Current time according to this configuration.

        Returns:
            Timezone-aware datetime
        """
        if self.timezone is None:
            current = datetime.now().astimezone()
        else:
            current = datetime.now(self.timezone)
        if not self.microseconds:
            current = current.replace(microsecond=0)
        return current

    def with_timezone(self, tz: Union[tzinfo, str, None]) -> "LoggerConfig":
        """Return a copy using the given time zone."""
        return replace(self, timezone=resolve_timezone(tz))

    def with_microseconds(self, enabled: bool) -> "LoggerConfig":
        """Return a copy with microsecond precision toggled."""
        return replace(self, microseconds=bool(enabled))

    @classmethod
    def default(cls) -> "LoggerConfig":
        """Create default configuration (local zone, microseconds)."""
        return cls()

    @classmethod
    def utc_config(cls) -> "LoggerConfig":
        """Create configuration stamping records in UTC."""
        return cls(timezone=resolve_timezone("UTC"))

    @classmethod
    def seconds_config(cls) -> "LoggerConfig":
        """Create configuration with whole-second timestamps."""
        return cls(microseconds=False)


def resolve_timezone(tz: Union[tzinfo, str, None]) -> Optional[tzinfo]:
    """
    Turn a tzinfo or an IANA zone name into a tzinfo.

    Args:
        tz: tzinfo instance, zone name such as "Europe/Paris", or None

    Returns:
        tzinfo, or None for the system local zone

    Raises:
        InvalidArgumentError: If the zone name is unknown
    """
    if tz is None or isinstance(tz, tzinfo):
        return tz
    if isinstance(tz, str):
        if tz.upper() == "UTC":
            return timezone.utc
        try:
            return ZoneInfo(tz)
        except (ZoneInfoNotFoundError, ValueError):
            raise InvalidArgumentError(f"Unknown time zone: {tz!r}") from None
    raise InvalidArgumentError(f"Invalid time zone: {tz!r}")


_global_config = LoggerConfig.default()
_global_lock = threading.Lock()


def get_global_config() -> LoggerConfig:
    """Get the process-wide configuration."""
    with _global_lock:
        return _global_config


def set_global_config(config: LoggerConfig) -> None:
    """
    Replace the process-wide configuration.

    Only records built after the call are affected.
    """
    global _global_config
    if not isinstance(config, LoggerConfig):
        raise InvalidArgumentError("config must be a LoggerConfig")
    with _global_lock:
        _global_config = config
    _log.debug("Global logger config set to %r", config)


def reset_global_config() -> None:
    """Restore the system defaults."""
    set_global_config(LoggerConfig.default())
