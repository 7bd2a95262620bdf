"""Wall-clock time of day, the single-day projection of a Duration."""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import datetime
from enum import Enum
from typing import TYPE_CHECKING, Any

import structlog

from civiltime.config import get_config
from civiltime.duration import Duration
from civiltime.util import DAY, HOUR, MINUTE, check_record, clamp, divide_and_floor

if TYPE_CHECKING:
    from civiltime.date_time import DateTime

log = structlog.get_logger(__name__)

_TIME_FIELDS = ("hours", "minutes", "seconds")


class ClockType(Enum):
    HOURS_24 = 24
    HOURS_12 = 12

    @classmethod
    def default(cls) -> "ClockType":
        """Clock configured through CIVILTIME_CLOCK."""
        return cls(get_config().clock_hours)


@dataclass(frozen=True, order=True)
class Time:
    """Time of day with hours 0-23, minutes 0-59 and seconds 0-59.

    Out-of-range fields are clamped independently. Use from_total_seconds
    to wrap an arbitrary second count around midnight instead.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "hours", clamp(self.hours, 0, 23))
        object.__setattr__(self, "minutes", clamp(self.minutes, 0, 59))
        object.__setattr__(self, "seconds", clamp(self.seconds, 0, 59))

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> "Time":
        """Wrap a second count into a single day (negative counts wrap back)."""
        remaining = total_seconds % DAY
        hours = divide_and_floor(remaining, HOUR)
        minutes = divide_and_floor(remaining - hours * HOUR, MINUTE)
        seconds = remaining - hours * HOUR - minutes * MINUTE
        return cls(hours=hours, minutes=minutes, seconds=seconds)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "Time":
        """Wall-clock fields of dt, in dt's own zone when it has one."""
        return cls(hours=dt.hour, minutes=dt.minute, seconds=dt.second)

    @classmethod
    def from_date_time(cls, value: "DateTime") -> "Time":
        return cls(hours=value.hours, minutes=value.minutes, seconds=value.seconds)

    @classmethod
    def from_now(
        cls, now: datetime, hours: int = 0, minutes: int = 0, seconds: int = 0
    ) -> "Time":
        """Time of day the given offset after now (wrapping around midnight)."""
        offset = hours * HOUR + minutes * MINUTE + seconds
        return cls.from_total_seconds(cls.from_datetime(now).total_seconds + offset)

    @classmethod
    def parse(cls, text: str, fmt: str) -> "Time | None":
        """Parse text with a strptime format; None when it does not match."""
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            log.debug("time_parse_failed", text=text, fmt=fmt)
            return None
        return cls.from_datetime(parsed)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Time":
        check_record("Time", record, _TIME_FIELDS)
        return cls(**{f: int(record[f]) for f in _TIME_FIELDS})

    @property
    def total_seconds(self) -> int:
        """Seconds since midnight, 0 <= total_seconds < 86400."""
        return self.hours * HOUR + self.minutes * MINUTE + self.seconds

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def format(self, clock: ClockType | None = None, include_seconds: bool = True) -> str:
        """Render as HH:MM[:SS], with an am/pm suffix on the 12-hour clock.

        The 12-hour clock subtracts 12 from afternoon hours, so noon renders
        as '00:00 pm'.
        """
        clock = clock if clock is not None else ClockType.default()
        hours, suffix = self.hours, ""
        if clock is ClockType.HOURS_12:
            if hours >= 12:
                hours, suffix = hours - 12, " pm"
            else:
                suffix = " am"
        text = f"{hours:02d}:{self.minutes:02d}"
        if include_seconds:
            text += f":{self.seconds:02d}"
        return text + suffix

    def __str__(self) -> str:
        return self.format(ClockType.HOURS_24)

    def __add__(self, other: object) -> "Time":
        if not isinstance(other, Duration):
            return NotImplemented
        return Time.from_total_seconds(self.total_seconds + other.total_seconds)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Time":
        if not isinstance(other, Duration):
            return NotImplemented
        return Time.from_total_seconds(self.total_seconds - other.total_seconds)
