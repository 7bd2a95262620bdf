"""Elapsed-time values normalized into days, hours, minutes and seconds.

A Duration is an unsigned magnitude. Two constructors exist on purpose:

- ``Duration(days, hours, minutes, seconds)`` clamps every field into its
  range independently and never carries (``Duration(hours=30).hours == 23``)
- ``Duration.from_total_seconds(n)`` drops the sign of ``n`` and carries the
  count into days, hours, minutes and seconds

Arithmetic and rounding always go through ``from_total_seconds`` so every
result is normalized.
"""

from collections.abc import Mapping
from dataclasses import asdict, dataclass
from datetime import timedelta
from enum import Enum, IntEnum
from math import floor
from typing import TYPE_CHECKING, Any, TypeAlias

from civiltime.util import (
    DAY,
    HOUR,
    MINUTE,
    SECOND,
    check_record,
    clamp,
    divide_and_floor,
    divide_and_round,
)

if TYPE_CHECKING:
    from civiltime.clock import Time


class TimeUnit(IntEnum):
    """Units ordered by magnitude, SECOND < MINUTE < HOUR < DAY."""

    SECOND = 1
    MINUTE = 2
    HOUR = 3
    DAY = 4

    @property
    def seconds(self) -> int:
        """Length of one unit in seconds."""
        return _UNIT_SECONDS[self]


_UNIT_SECONDS = {
    TimeUnit.SECOND: SECOND,
    TimeUnit.MINUTE: MINUTE,
    TimeUnit.HOUR: HOUR,
    TimeUnit.DAY: DAY,
}

# Field order used by every layout: largest unit first
_UNITS_DESCENDING = (TimeUnit.DAY, TimeUnit.HOUR, TimeUnit.MINUTE, TimeUnit.SECOND)


class LabelType(Enum):
    """How unit names are spelled in the textual layout."""

    SINGLE = "single"  # d, h, m, s
    SHORT = "short"  # day(s), hour(s), min, sec
    FULL = "full"  # day(s), hour(s), minute(s), second(s)

    def label(self, unit: TimeUnit, value: int = 0) -> str:
        """Label for unit, pluralized when value != 1 where the style does."""
        if self is LabelType.SINGLE:
            return _SINGLE_LABELS[unit]
        if self is LabelType.SHORT and unit is TimeUnit.MINUTE:
            return "min"
        if self is LabelType.SHORT and unit is TimeUnit.SECOND:
            return "sec"
        name = _FULL_LABELS[unit]
        return name if value == 1 else name + "s"


_SINGLE_LABELS = {
    TimeUnit.DAY: "d",
    TimeUnit.HOUR: "h",
    TimeUnit.MINUTE: "m",
    TimeUnit.SECOND: "s",
}

_FULL_LABELS = {
    TimeUnit.DAY: "day",
    TimeUnit.HOUR: "hour",
    TimeUnit.MINUTE: "minute",
    TimeUnit.SECOND: "second",
}


@dataclass(frozen=True)
class TotalValue:
    """The whole duration as one decimal number of unit."""

    unit: TimeUnit


@dataclass(frozen=True)
class ColonSeparated:
    """Two-digit fields from maximal_unit down to minimal_unit, joined by ':'."""

    minimal_unit: TimeUnit
    maximal_unit: TimeUnit


@dataclass(frozen=True)
class Textual:
    """Space separated "<value><label>" parts, zero fields skipped by default."""

    label: LabelType
    include_zeros: bool = False


StringFormat: TypeAlias = TotalValue | ColonSeparated | Textual

_DURATION_FIELDS = ("days", "hours", "minutes", "seconds")
_UNIT_FIELDS = dict(zip(_UNITS_DESCENDING, _DURATION_FIELDS))


@dataclass(frozen=True, order=True)
class Duration:
    """Non-negative time span held as normalized fields.

    Ordering compares (days, hours, minutes, seconds) lexicographically.
    Since the fields are always within range this matches ordering by
    total_seconds.
    """

    days: int = 0
    hours: int = 0
    minutes: int = 0
    seconds: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "days", clamp(self.days, 0))
        object.__setattr__(self, "hours", clamp(self.hours, 0, 23))
        object.__setattr__(self, "minutes", clamp(self.minutes, 0, 59))
        object.__setattr__(self, "seconds", clamp(self.seconds, 0, 59))

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Duration":
        return cls()

    @classmethod
    def from_total_seconds(cls, total_seconds: int) -> "Duration":
        """Normalize a second count, discarding its sign."""
        remaining = abs(total_seconds)

        days = divide_and_floor(remaining, DAY)
        remaining -= days * DAY

        hours = divide_and_floor(remaining, HOUR)
        remaining -= hours * HOUR

        minutes = divide_and_floor(remaining, MINUTE)
        seconds = remaining - minutes * MINUTE
        return cls(days=days, hours=hours, minutes=minutes, seconds=seconds)

    @classmethod
    def from_total_minutes(cls, total_minutes: float) -> "Duration":
        """Build from fractional minutes; sub-second remainders are floored."""
        return cls.from_total_seconds(floor(total_minutes * 60))

    @classmethod
    def from_total_hours(cls, total_hours: float) -> "Duration":
        return cls.from_total_minutes(total_hours * 60)

    @classmethod
    def from_total_days(cls, total_days: float) -> "Duration":
        return cls.from_total_minutes(total_days * 1440)

    @classmethod
    def from_interval(cls, start: "Time", finish: "Time") -> "Duration":
        """Span between two wall-clock times (magnitude only)."""
        return cls.from_total_seconds(finish.total_seconds - start.total_seconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> "Duration":
        """Convert a timedelta, truncating microseconds and dropping the sign."""
        return cls.from_total_seconds(abs(delta) // timedelta(seconds=1))

    @classmethod
    def from_dict(cls, record: Mapping[str, Any]) -> "Duration":
        check_record("Duration", record, _DURATION_FIELDS)
        return cls(**{f: int(record[f]) for f in _DURATION_FIELDS})

    # ------------------------------------------------------------------
    # Derived values
    # ------------------------------------------------------------------

    @property
    def total_seconds(self) -> int:
        return self.days * DAY + self.hours * HOUR + self.minutes * MINUTE + self.seconds

    @property
    def total_minutes(self) -> float:
        return self.total_seconds / MINUTE

    @property
    def total_hours(self) -> float:
        return self.total_seconds / HOUR

    @property
    def total_days(self) -> float:
        return self.total_seconds / DAY

    def get(self, unit: TimeUnit) -> int:
        """Field value for unit (days, hours, minutes or seconds)."""
        return getattr(self, _UNIT_FIELDS[unit])

    def get_total(self, unit: TimeUnit) -> float:
        """Whole duration expressed in unit."""
        if unit is TimeUnit.SECOND:
            return float(self.total_seconds)
        return self.total_seconds / unit.seconds

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.total_seconds)

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    # ------------------------------------------------------------------
    # Rounding
    # ------------------------------------------------------------------

    def rounded(self, unit: TimeUnit) -> "Duration":
        """Round half-up to a whole number of unit.

        Carries cascade upward: 30 seconds add a minute, then 30 minutes
        add an hour, then 12 hours add a day. Fields finer than unit are
        zeroed and the result is renormalized.
        """
        if unit <= TimeUnit.SECOND:
            return self

        days, hours, minutes, seconds = (
            self.days,
            self.hours,
            self.minutes,
            self.seconds,
        )

        # Intermediate fields may exceed their range until renormalized
        minutes += 1 if seconds >= 30 else 0
        seconds = 0
        if unit >= TimeUnit.HOUR:
            hours += 1 if minutes >= 30 else 0
            minutes = 0
        if unit >= TimeUnit.DAY:
            days += 1 if hours >= 12 else 0
            hours = 0

        return Duration.from_total_seconds(
            days * DAY + hours * HOUR + minutes * MINUTE + seconds
        )

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, fmt: StringFormat) -> str:
        """Render the duration in one of the three layouts.

        Examples:
            >>> d = Duration(days=1, minutes=12, seconds=24)
            >>> d.format(ColonSeparated(TimeUnit.SECOND, TimeUnit.DAY))
            '01:00:12:24'
            >>> d.format(Textual(LabelType.SINGLE, include_zeros=True))
            '1d 0h 12m 24s'
            >>> d.format(TotalValue(TimeUnit.HOUR))
            '24.21'
        """
        if isinstance(fmt, TotalValue):
            return _format_decimal(self.get_total(fmt.unit))

        if isinstance(fmt, ColonSeparated):
            return ":".join(
                f"{self.get(unit):02d}"
                for unit in _UNITS_DESCENDING
                if fmt.minimal_unit <= unit <= fmt.maximal_unit
            )

        if isinstance(fmt, Textual):
            separator = "" if fmt.label is LabelType.SINGLE else " "
            parts = []
            for unit in _UNITS_DESCENDING:
                value = self.get(unit)
                if fmt.include_zeros or value > 0:
                    parts.append(f"{value}{separator}{fmt.label.label(unit, value)}")
            return " ".join(parts)

        raise TypeError(
            f"Unsupported duration format: {type(fmt).__name__!r}\n"
            f"Use TotalValue, ColonSeparated or Textual"
        )

    def __str__(self) -> str:
        """Compact textual form such as '1d 12m 24s'; '0s' when empty."""
        text = self.format(Textual(LabelType.SINGLE))
        return text or f"0{LabelType.SINGLE.label(TimeUnit.SECOND)}"

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: object) -> "Duration":
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_total_seconds(self.total_seconds + other.total_seconds)

    def __sub__(self, other: object) -> "Duration":
        """Magnitude of the difference; never negative."""
        if not isinstance(other, Duration):
            return NotImplemented
        return Duration.from_total_seconds(self.total_seconds - other.total_seconds)

    def __mul__(self, factor: object) -> "Duration":
        if not isinstance(factor, int):
            return NotImplemented
        return Duration.from_total_seconds(self.total_seconds * factor)

    __rmul__ = __mul__

    def __truediv__(self, factor: object) -> "Duration":
        """Divide, rounding the second count to nearest (ties away from zero).

        Raises:
            ZeroDivisionError: If factor is 0
        """
        if not isinstance(factor, int):
            return NotImplemented
        if factor == 0:
            raise ZeroDivisionError(
                f"Cannot divide duration {self} by zero.\n"
                f"Hint: durations can only be split into a non-zero number of parts"
            )
        return Duration.from_total_seconds(divide_and_round(self.total_seconds, factor))

    def __bool__(self) -> bool:
        return self.total_seconds != 0


def _format_decimal(value: float) -> str:
    """At most two fractional digits, trailing zeros dropped, no grouping."""
    text = f"{value:.2f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
