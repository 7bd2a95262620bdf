"""Hypothesis property-based tests for Duration.

Properties that must hold for all valid inputs, verified by random generation.
"""

from hypothesis import given, settings
from hypothesis import strategies as st

from civiltime import Duration, TimeUnit

# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

_seconds = st.integers(min_value=0, max_value=10**9)
_signed_seconds = st.integers(min_value=-(10**9), max_value=10**9)
_units = st.sampled_from(list(TimeUnit))

_durations = st.builds(Duration.from_total_seconds, _seconds)


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------
class TestNormalization:

    @given(s=_seconds)
    def test_total_seconds_round_trip(self, s):
        """from_total_seconds(s).total_seconds == s for s >= 0."""
        assert Duration.from_total_seconds(s).total_seconds == s

    @given(s=_signed_seconds)
    def test_sign_is_erased(self, s):
        assert Duration.from_total_seconds(s) == Duration.from_total_seconds(-s)

    @given(s=_signed_seconds)
    def test_fields_are_in_range(self, s):
        d = Duration.from_total_seconds(s)
        assert d.days >= 0
        assert 0 <= d.hours <= 23
        assert 0 <= d.minutes <= 59
        assert 0 <= d.seconds <= 59

    @given(
        days=st.integers(min_value=0, max_value=10**5),
        hours=st.integers(min_value=0, max_value=23),
        minutes=st.integers(min_value=0, max_value=59),
        seconds=st.integers(min_value=0, max_value=59),
    )
    def test_field_round_trip(self, days, hours, minutes, seconds):
        d = Duration(days=days, hours=hours, minutes=minutes, seconds=seconds)
        assert d.total_seconds == days * 86400 + hours * 3600 + minutes * 60 + seconds
        assert Duration.from_total_seconds(d.total_seconds) == d


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------
class TestRounding:

    @given(d=_durations)
    def test_second_rounding_is_identity(self, d):
        assert d.rounded(TimeUnit.SECOND) == d

    @given(d=_durations, unit=_units)
    @settings(max_examples=200)
    def test_rounding_is_idempotent(self, d, unit):
        once = d.rounded(unit)
        assert once.rounded(unit) == once

    @given(d=_durations, unit=_units)
    def test_rounding_lands_on_whole_units(self, d, unit):
        assert d.rounded(unit).total_seconds % unit.seconds == 0


# ---------------------------------------------------------------------------
# Arithmetic and ordering
# ---------------------------------------------------------------------------
class TestArithmetic:

    @given(a=_durations, b=_durations)
    def test_ordering_matches_total_seconds(self, a, b):
        assert (a < b) == (a.total_seconds < b.total_seconds)
        assert (a == b) == (a.total_seconds == b.total_seconds)

    @given(a=_durations, b=_durations)
    def test_add_and_subtract(self, a, b):
        assert (a + b).total_seconds == a.total_seconds + b.total_seconds
        assert (a - b).total_seconds == abs(a.total_seconds - b.total_seconds)
        assert a + b == b + a

    @given(d=_durations, n=st.integers(min_value=1, max_value=1000))
    def test_multiply_then_divide(self, d, n):
        assert (d * n) / n == d
