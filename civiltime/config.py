"""Environment driven defaults for civiltime.

Environment Variables:
- CIVILTIME_TZ: IANA timezone used when a conversion is not given one
  (default: UTC)
- CIVILTIME_CLOCK: "24" or "12", the clock used by Time.format when no
  clock is passed (default: 24)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

import structlog

log = structlog.get_logger(__name__)

TZ_ENV = "CIVILTIME_TZ"
CLOCK_ENV = "CIVILTIME_CLOCK"

DEFAULT_TZ = "UTC"
DEFAULT_CLOCK_HOURS = 24

_VALID_CLOCK_HOURS = (12, 24)


def _get_clock_env(key: str, default: int) -> int:
    """Read the clock type from the environment, falling back on bad values."""
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        hours = int(value)
    except ValueError:
        log.warning("invalid_clock_env", key=key, value=value, default=default)
        return default
    if hours not in _VALID_CLOCK_HOURS:
        log.warning("invalid_clock_env", key=key, value=value, default=default)
        return default
    return hours


@dataclass(frozen=True)
class CivilTimeConfig:
    """Process-wide defaults.

    Attributes:
        timezone: IANA zone name used for timestamp conversions when the
            caller does not supply one.
        clock_hours: 24 or 12, selects the default clock for Time.format.
    """

    timezone: str = DEFAULT_TZ
    clock_hours: int = DEFAULT_CLOCK_HOURS

    @classmethod
    def from_environment(cls) -> "CivilTimeConfig":
        return cls(
            timezone=os.environ.get(TZ_ENV, DEFAULT_TZ) or DEFAULT_TZ,
            clock_hours=_get_clock_env(CLOCK_ENV, DEFAULT_CLOCK_HOURS),
        )


@lru_cache(maxsize=1)
def get_config() -> CivilTimeConfig:
    """Return the configuration loaded from the environment (cached)."""
    return CivilTimeConfig.from_environment()


def reset_config() -> None:
    """Forget the cached configuration so the environment is read again."""
    get_config.cache_clear()
