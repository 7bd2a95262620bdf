"""Tests for Time (wall-clock time of day)."""

from datetime import datetime, timezone

import pytest

from civiltime import ClockType, Duration, Time
from civiltime.config import CLOCK_ENV, reset_config


def test_fields_are_clamped_independently():
    t = Time(hours=25, minutes=-1, seconds=75)
    assert (t.hours, t.minutes, t.seconds) == (23, 0, 59)


def test_from_total_seconds_wraps_around_midnight():
    assert Time.from_total_seconds(3661) == Time(hours=1, minutes=1, seconds=1)
    assert Time.from_total_seconds(86400 + 3661) == Time(hours=1, minutes=1, seconds=1)
    assert Time.from_total_seconds(-60) == Time(hours=23, minutes=59)
    assert Time.from_total_seconds(86400) == Time()


def test_total_seconds():
    assert Time(hours=23, minutes=59, seconds=59).total_seconds == 86399
    assert Time().total_seconds == 0


def test_from_datetime():
    dt = datetime(2025, 1, 6, 14, 30, 15, tzinfo=timezone.utc)
    assert Time.from_datetime(dt) == Time(hours=14, minutes=30, seconds=15)


def test_from_now_uses_injected_clock():
    now = datetime(2025, 1, 6, 23, 0)
    assert Time.from_now(now, hours=2) == Time(hours=1)
    assert Time.from_now(now, minutes=-30) == Time(hours=22, minutes=30)
    assert Time.from_now(now) == Time(hours=23)


def test_format_24_hour():
    t = Time(hours=9, minutes=5, seconds=3)
    assert t.format(ClockType.HOURS_24) == "09:05:03"
    assert t.format(ClockType.HOURS_24, include_seconds=False) == "09:05"
    assert str(Time(hours=17, minutes=45)) == "17:45:00"


def test_format_12_hour():
    assert Time(hours=13, minutes=5).format(ClockType.HOURS_12) == "01:05:00 pm"
    assert Time(hours=9, minutes=5).format(ClockType.HOURS_12) == "09:05:00 am"
    assert Time(hours=23, minutes=59).format(
        ClockType.HOURS_12, include_seconds=False
    ) == "11:59 pm"


def test_format_12_hour_noon_and_midnight():
    """Afternoon hours have 12 subtracted, so noon reads as 00 pm."""
    assert Time(hours=12).format(ClockType.HOURS_12) == "00:00:00 pm"
    assert Time().format(ClockType.HOURS_12) == "00:00:00 am"


def test_format_defaults_to_configured_clock(monkeypatch):
    assert Time(hours=13).format() == "13:00:00"

    monkeypatch.setenv(CLOCK_ENV, "12")
    reset_config()
    assert Time(hours=13).format() == "01:00:00 pm"


def test_parse():
    assert Time.parse("14:30", "%H:%M") == Time(hours=14, minutes=30)
    assert Time.parse("02:15:09 PM", "%I:%M:%S %p") == Time(
        hours=14, minutes=15, seconds=9
    )


def test_parse_mismatch_returns_none():
    assert Time.parse("half past two", "%H:%M") is None
    assert Time.parse("25:00", "%H:%M") is None


def test_add_duration_wraps():
    assert Time(hours=23, minutes=30) + Duration(hours=1) == Time(minutes=30)
    assert Duration(days=2, minutes=15) + Time(hours=8) == Time(hours=8, minutes=15)


def test_subtract_duration_wraps():
    assert Time(minutes=15) - Duration(minutes=30) == Time(hours=23, minutes=45)
    assert Time(hours=10) - Duration(hours=3) == Time(hours=7)


def test_arithmetic_rejects_plain_numbers():
    with pytest.raises(TypeError):
        Time(hours=1) + 60  # type: ignore[operator]


def test_ordering():
    assert Time(hours=9) < Time(hours=9, seconds=1)
    assert Time(hours=10) > Time(hours=9, minutes=59, seconds=59)
    assert max(Time(hours=1), Time(hours=12), Time(hours=6)) == Time(hours=12)


def test_dict_round_trip():
    t = Time(hours=7, minutes=8, seconds=9)
    assert t.to_dict() == {"hours": 7, "minutes": 8, "seconds": 9}
    assert Time.from_dict(t.to_dict()) == t


def test_from_dict_missing_field():
    with pytest.raises(ValueError, match="Missing fields: minutes, seconds"):
        Time.from_dict({"hours": 1})


def test_fractional_fields_are_truncated_to_int():
    t = Time(hours=9.7, minutes=30.2)  # type: ignore[arg-type]
    assert t == Time(hours=9, minutes=30)
    assert str(t) == "09:30:00"
