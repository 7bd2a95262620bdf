"""Civil calendar dates.

Months are zero-based: 0 is January and 11 is December. The day field is
clamped to 1..31 without checking the month's real length; an impossible
date such as day 31 of April (month 3) rolls over to the 1st of May as
soon as it is converted to an absolute instant or stepped.

Conversions go through the standard library date, so only years 1..9999
are supported; year 0 raises ValueError.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import date, datetime
from enum import Flag, IntEnum
from typing import Any

import structlog

from civiltime import calendar
from civiltime.calendar import Zone
from civiltime.duration import Duration
from civiltime.util import check_record, clamp

log = structlog.get_logger(__name__)

_DATE_FIELDS = ("year", "month", "day")


class Weekday(IntEnum):
    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7


class StringLabel(Flag):
    """Relative names that may replace a formatted date."""

    NONE = 0
    YESTERDAY = 1 << 0
    TODAY = 1 << 1
    TOMORROW = 1 << 2
    ALL = YESTERDAY | TODAY | TOMORROW


def relative_label(value: "Date", labels: StringLabel, now: datetime | None) -> str | None:
    """Relative name for value when one of labels applies, otherwise None.

    Raises:
        ValueError: If labels are requested without a current time
    """
    if not labels:
        return None
    if now is None:
        raise ValueError(
            f"Relative labels {labels!r} need the current time.\n"
            f"Hint: pass now=datetime.now(tz) explicitly"
        )
    if StringLabel.YESTERDAY in labels and value.is_yesterday(now):
        return "Yesterday"
    if StringLabel.TODAY in labels and value.is_today(now):
        return "Today"
    if StringLabel.TOMORROW in labels and value.is_tomorrow(now):
        return "Tomorrow"
    return None


@dataclass(frozen=True, order=True)
class Date:
    """Civil date (year, zero-based month, day), ordered chronologically."""

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "month", clamp(self.month, 0, 11))
        object.__setattr__(self, "day", clamp(self.day, 1, 31))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def from_date(cls, d: date) -> "Date":
        """Convert a standard library date (or datetime, using its own fields)."""
        return cls(year=d.year, month=d.month - 1, day=d.day)

    @classmethod
    def from_timestamp(cls, timestamp: int, tz: Zone = None) -> "Date":
        year, month, day, *_ = calendar.from_seconds(timestamp, tz)
        return cls(year=year, month=month, day=day)

    @classmethod
    def today(cls, now: datetime) -> "Date":
        return cls.from_date(now)

    @classmethod
    def yesterday(cls, now: datetime) -> "Date":
        return cls.today(now).prev_day()

    @classmethod
    def tomorrow(cls, now: datetime) -> "Date":
        return cls.today(now).next_day()

    @classmethod
    def parse(cls, text: str, fmt: str) -> "Date | None":
        """Parse text with a strptime format; None when it does not match."""
        try:
            parsed = datetime.strptime(text, fmt)
        except ValueError:
            log.debug("date_parse_failed", text=text, fmt=fmt)
            return None
        return cls.from_date(parsed)

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Date":
        check_record("Date", record, _DATE_FIELDS)
        return cls(**{f: int(record[f]) for f in _DATE_FIELDS})

    # ------------------------------------------------------------------
    # Calendar queries
    # ------------------------------------------------------------------

    @property
    def weekday(self) -> Weekday:
        return Weekday(calendar.weekday_of(self.year, self.month, self.day))

    @property
    def id(self) -> int:
        """Sortable integer key, e.g. 20250006 for 6 January 2025."""
        return (self.year * 100 + self.month) * 100 + self.day

    def to_date(self) -> date:
        """Standard library date, rolling an impossible day over."""
        return calendar.civil_date(self.year, self.month, self.day)

    def timestamp(self, tz: Zone = None) -> int:
        """Unix timestamp of midnight at the start of this date in zone tz."""
        return calendar.to_seconds(self.year, self.month, self.day, tz=tz)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    def is_today(self, now: datetime) -> bool:
        return self == Date.today(now)

    def is_yesterday(self, now: datetime) -> bool:
        return self == Date.yesterday(now)

    def is_tomorrow(self, now: datetime) -> bool:
        return self == Date.tomorrow(now)

    def is_this_month(self, now: datetime) -> bool:
        today = Date.today(now)
        return self.year == today.year and self.month == today.month

    def is_this_year(self, now: datetime) -> bool:
        return self.year == Date.today(now).year

    # ------------------------------------------------------------------
    # Stepping
    # ------------------------------------------------------------------

    def next_day(self, count: int = 1) -> "Date":
        return Date.from_date(calendar.add_days(self.to_date(), count))

    def prev_day(self, count: int = 1) -> "Date":
        return Date.from_date(calendar.add_days(self.to_date(), -count))

    def next_month(self, count: int = 1) -> "Date":
        """Same day count months later, clipped to the end of a shorter month."""
        return Date.from_date(calendar.add_months(self.to_date(), count))

    def prev_month(self, count: int = 1) -> "Date":
        return Date.from_date(calendar.add_months(self.to_date(), -count))

    def next_weekday(self, weekday: Weekday) -> "Date":
        """First date strictly after this one falling on weekday."""
        return Date.from_date(
            calendar.next_matching_weekday(self.to_date(), weekday, "forward")
        )

    def prev_weekday(self, weekday: Weekday) -> "Date":
        """Last date strictly before this one falling on weekday."""
        return Date.from_date(
            calendar.next_matching_weekday(self.to_date(), weekday, "backward")
        )

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
        label = relative_label(self, labels, now)
        if label is not None:
            return label
        return self.to_date().strftime(fmt)

    def __str__(self) -> str:
        return f"{self.year:04d}-{self.month + 1:02d}-{self.day:02d}"

    # ------------------------------------------------------------------
    # Arithmetic (through the absolute timestamp in the configured zone)
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "Date":
        """Date holding the instant midnight + other in the configured zone.

        Across a daylight saving change a whole day may not reach the next
        date (falling back leaves 23:00 on the same day). Use next_day to
        step by calendar day.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return Date.from_timestamp(self.timestamp() + other.total_seconds)

    __radd__ = __add__

    def __sub__(self, other: object) -> "Date":
        if not isinstance(other, Duration):
            return NotImplemented
        return Date.from_timestamp(self.timestamp() - other.total_seconds)
