"""Conversions between civil fields and absolute time.

Thin bindings over the standard library calendar, zoneinfo and
python-dateutil's relativedelta. Months are zero-based (0 = January)
throughout this package; the shift to the standard library's one-based
months happens only here.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Literal, TypeAlias
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dateutil.relativedelta import FR, MO, SA, SU, TH, TU, WE, relativedelta, weekday

from civiltime.config import get_config

Direction: TypeAlias = Literal["forward", "backward"]
Zone: TypeAlias = str | ZoneInfo | None

# Weekday numbers 1..7 starting on Sunday, mapped to dateutil weekday constants
_WEEKDAY_MAP: dict[int, weekday] = {
    1: SU,
    2: MO,
    3: TU,
    4: WE,
    5: TH,
    6: FR,
    7: SA,
}


def resolve_zone(tz: Zone = None) -> ZoneInfo:
    """Turn a zone name (or None for the configured default) into a ZoneInfo.

    Raises:
        ValueError: If the zone name is unknown
    """
    if isinstance(tz, ZoneInfo):
        return tz
    name = tz if tz is not None else get_config().timezone
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(
            f"Unknown timezone: {name!r}\n"
            f"Hint: use an IANA name such as 'UTC' or 'Europe/Berlin'"
        ) from e


def civil_date(year: int, month: int, day: int) -> date:
    """Build a date from a zero-based month, rolling impossible days over.

    Day 31 of a 30-day month becomes the 1st of the next month, the same
    way a lenient calendar resolves it.
    """
    return date(year, month + 1, 1) + timedelta(days=day - 1)


def to_seconds(
    year: int,
    month: int,
    day: int,
    hours: int = 0,
    minutes: int = 0,
    seconds: int = 0,
    tz: Zone = None,
) -> int:
    """Seconds since the Unix epoch of a wall-clock instant in zone tz."""
    zone = resolve_zone(tz)
    midnight = datetime.combine(civil_date(year, month, day), datetime.min.time())
    wall = midnight + timedelta(hours=hours, minutes=minutes, seconds=seconds)
    return int(wall.replace(tzinfo=zone).timestamp())


def from_seconds(
    timestamp: int, tz: Zone = None
) -> tuple[int, int, int, int, int, int]:
    """Split a Unix timestamp into (year, month, day, hours, minutes, seconds)."""
    dt = datetime.fromtimestamp(timestamp, tz=timezone.utc).astimezone(
        resolve_zone(tz)
    )
    return dt.year, dt.month - 1, dt.day, dt.hour, dt.minute, dt.second


def weekday_of(year: int, month: int, day: int) -> int:
    """Weekday number, 1 = Sunday through 7 = Saturday."""
    return civil_date(year, month, day).isoweekday() % 7 + 1


def add_days(d: date, count: int) -> date:
    return d + timedelta(days=count)


def add_months(d: date, count: int) -> date:
    """Step whole months, clipping to the last day of a shorter month."""
    return d + relativedelta(months=count)


def next_matching_weekday(d: date, target: int, direction: Direction) -> date:
    """Closest date strictly after (or before) d falling on weekday target.

    Args:
        d: Starting date (never returned itself)
        target: Weekday number, 1 = Sunday through 7 = Saturday
        direction: "forward" or "backward"

    Raises:
        ValueError: If target or direction is invalid
    """
    if target not in _WEEKDAY_MAP:
        raise ValueError(
            f"Invalid weekday number: {target}\n"
            f"Valid weekdays: 1 (Sunday) through 7 (Saturday)"
        )
    wd = _WEEKDAY_MAP[target]
    if direction == "forward":
        return d + timedelta(days=1) + relativedelta(weekday=wd(+1))
    if direction == "backward":
        return d - timedelta(days=1) + relativedelta(weekday=wd(-1))
    raise ValueError(
        f"Invalid direction: {direction!r}\n" f"Valid directions: forward, backward"
    )
