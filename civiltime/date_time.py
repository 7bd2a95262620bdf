"""Date and time of day combined into one value."""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

import structlog

from civiltime import calendar
from civiltime.calendar import Zone
from civiltime.clock import Time
from civiltime.date import Date, StringLabel, Weekday, relative_label
from civiltime.duration import Duration
from civiltime.util import check_record

log = structlog.get_logger(__name__)

_DATE_TIME_FIELDS = ("year", "month", "day", "hours", "minutes", "seconds")


@dataclass(frozen=True, order=True)
class DateTime:
    """A civil Date paired with a wall-clock Time.

    Ordered by date first, then time. Arithmetic converts to a Unix
    timestamp in the configured zone (CIVILTIME_TZ) and back.
    """

    date: Date
    time: Time

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_fields(
        cls,
        year: int,
        month: int,
        day: int,
        hours: int = 0,
        minutes: int = 0,
        seconds: int = 0,
    ) -> "DateTime":
        """Build from raw fields, each clamped like Date and Time do."""
        return cls(
            date=Date(year=year, month=month, day=day),
            time=Time(hours=hours, minutes=minutes, seconds=seconds),
        )

    @classmethod
    def combine(cls, date: Date, time: Time, tz: Zone = None) -> "DateTime":
        """Pair date and time, resolving an impossible date to a real one."""
        return cls(date=Date.from_timestamp(date.timestamp(tz), tz), time=time)

    @classmethod
    def from_datetime(cls, dt: datetime) -> "DateTime":
        """Wall-clock fields of dt, in dt's own zone when it has one."""
        return cls(date=Date.from_date(dt), time=Time.from_datetime(dt))

    @classmethod
    def from_timestamp(cls, timestamp: int, tz: Zone = None) -> "DateTime":
        return cls.from_fields(*calendar.from_seconds(timestamp, tz))

    @classmethod
    def parse(cls, text: str, fmt: str) -> "DateTime | None":
        """Parse text with a strptime format; None when it does not match."""
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            log.debug("date_time_parse_failed", text=text, fmt=fmt)
            return None
        return cls.from_datetime(parsed)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "DateTime":
        check_record("DateTime", record, _DATE_TIME_FIELDS)
        return cls.from_fields(*(int(record[f]) for f in _DATE_TIME_FIELDS))

    # ------------------------------------------------------------------
    # Field access
    # ------------------------------------------------------------------

    @property
    def year(self) -> int:
        return self.date.year

    @property
    def month(self) -> int:
        return self.date.month

    @property
    def day(self) -> int:
        return self.date.day

    @property
    def hours(self) -> int:
        return self.time.hours

    @property
    def minutes(self) -> int:
        return self.time.minutes

    @property
    def seconds(self) -> int:
        return self.time.seconds

    @property
    def weekday(self) -> Weekday:
        return self.date.weekday

    def timestamp(self, tz: Zone = None) -> int:
        return calendar.to_seconds(
            self.year, self.month, self.day, self.hours, self.minutes, self.seconds, tz
        )

    def to_datetime(self, tz: Zone = None) -> datetime:
        """Timezone-aware standard library datetime for this wall-clock value."""
        return datetime.fromtimestamp(self.timestamp(tz), tz=calendar.resolve_zone(tz))

    def to_dict(self) -> dict[str, int]:
        return {f: getattr(self, f) for f in _DATE_TIME_FIELDS}

    def is_today(self, now: datetime) -> bool:
        return self.date.is_today(now)

    def is_yesterday(self, now: datetime) -> bool:
        return self.date.is_yesterday(now)

    def is_tomorrow(self, now: datetime) -> bool:
        return self.date.is_tomorrow(now)

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(
        self,
        fmt: str,
        labels: StringLabel = StringLabel.NONE,
        now: datetime | None = None,
    ) -> str:
        """Render with a strftime format, or a relative name if labels match."""
        label = relative_label(self.date, labels, now)
        if label is not None:
            return label
        wall = datetime.combine(
            self.date.to_date(), datetime.min.time()
        ).replace(hour=self.hours, minute=self.minutes, second=self.seconds)
        return wall.strftime(fmt)

    def __str__(self) -> str:
        return f"{self.date} {self.time}"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "DateTime":
        if isinstance(other, Duration):
            offset = other.total_seconds
        elif isinstance(other, (int, float)):
            offset = int(other)
        else:
            return NotImplemented
        return DateTime.from_timestamp(self.timestamp() + offset)

    __radd__ = __add__

    def __sub__(self, other: object) -> "DateTime | Duration":
        """DateTime - DateTime gives the Duration between them (magnitude).

        DateTime - Duration (or a number of seconds) gives an earlier DateTime.
        """
        if isinstance(other, DateTime):
            return Duration.from_total_seconds(self.timestamp() - other.timestamp())
        if isinstance(other, Duration):
            offset = other.total_seconds
        elif isinstance(other, (int, float)):
            offset = int(other)
        else:
            return NotImplemented
        return DateTime.from_timestamp(self.timestamp() - offset)
