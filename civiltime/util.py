"""Utility constants and helpers for civiltime.

Time unit constants represent durations in seconds.
These are used throughout the API for consistent time representation.
"""

from collections.abc import Mapping
from typing import Any

# Time unit constants (all values in seconds)
SECOND = 1
MINUTE = 60
HOUR = 3600
DAY = 86400


def divide_and_floor(value: int, divider: int) -> int:
    """Integer division rounding toward negative infinity."""
    return value // divider


def divide_and_round(value: int, divider: int) -> int:
    """Integer division rounding to nearest, ties away from zero.

    Works on integers only so large second counts never pass through a
    float. Raises ZeroDivisionError when divider is zero.
    """
    if divider == 0:
        raise ZeroDivisionError(
            f"Cannot divide {value} by zero.\n"
            f"Hint: check the divider before dividing a duration"
        )
    quotient, remainder = divmod(abs(value), abs(divider))
    if 2 * remainder >= abs(divider):
        quotient += 1
    negative = (value < 0) != (divider < 0)
    return -quotient if negative else quotient


def clamp(value: float, lower: int, upper: int | None = None) -> int:
    """Truncate value to an int and clamp it into [lower, upper].

    upper=None leaves it unbounded.
    """
    value = int(value)
    if upper is not None and value > upper:
        return upper
    return max(value, lower)


def check_record(kind: str, record: Mapping[str, Any], fields: tuple[str, ...]) -> None:
    """Validate that a plain-field record carries exactly the given keys.

    Raises:
        ValueError: If keys are missing or unexpected keys are present
    """
    missing = [f for f in fields if f not in record]
    unknown = sorted(k for k in record if k not in fields)
    if missing or unknown:
        raise ValueError(
            f"Invalid {kind} record: {dict(record)!r}\n"
            f"Missing fields: {', '.join(missing) or '-'}\n"
            f"Unknown fields: {', '.join(unknown) or '-'}\n"
            f"Expected fields: {', '.join(fields)}"
        )
