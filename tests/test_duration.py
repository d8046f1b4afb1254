"""Tests for the canonical Duration class.

These tests verify construction, the unit readers, arithmetic,
comparison and timedelta interop.
"""

from __future__ import annotations

from datetime import timedelta

import pytest

from timespan import ONE_NANOSECOND, Duration, TimeUnit


class TestDurationConstruction:
    """Tests for Duration construction."""

    def test_default_construction_is_zero(self) -> None:
        """Default Duration() creates a zero duration."""
        d = Duration()
        assert d.nanoseconds() == 0
        assert d == Duration.zero()

    def test_construction_from_nanoseconds(self) -> None:
        d = Duration(1_500)
        assert d.nanoseconds() == 1_500

    def test_factories(self) -> None:
        """Each from_* factory scales by its unit."""
        assert Duration.from_hours(1).nanoseconds() == 3_600_000_000_000
        assert Duration.from_minutes(1).nanoseconds() == 60_000_000_000
        assert Duration.from_seconds(1).nanoseconds() == 1_000_000_000
        assert Duration.from_milliseconds(1).nanoseconds() == 1_000_000
        assert Duration.from_microseconds(1).nanoseconds() == 1_000
        assert Duration.from_nanoseconds(1).nanoseconds() == 1

    def test_fractional_factories_truncate(self) -> None:
        """Fractional nanoseconds are dropped toward zero."""
        assert Duration.from_microseconds(1.9999).nanoseconds() == 1_999
        assert Duration.from_microseconds(-1.9999).nanoseconds() == -1_999
        assert Duration.from_seconds(1e-10).nanoseconds() == 0

    def test_from_unit(self) -> None:
        d = Duration.from_unit(1.5, TimeUnit.MINUTE)
        assert d.nanoseconds() == 90_000_000_000

    def test_one_nanosecond_constant(self) -> None:
        assert ONE_NANOSECOND == Duration(1)
        assert str(ONE_NANOSECOND) == "1ns"

    def test_rejects_float_nanoseconds(self) -> None:
        with pytest.raises(TypeError):
            Duration(1.0)  # type: ignore[arg-type]

    def test_rejects_bool(self) -> None:
        with pytest.raises(TypeError):
            Duration(True)


class TestDurationReaders:
    """Tests for the hours/minutes/seconds/nanoseconds readers."""

    def test_one_day(self, one_day_nanos: int) -> None:
        d = Duration.from_hours(24)
        assert d.hours() == 24.0
        assert d.minutes() == 1440.0
        assert d.seconds() == 86400.0
        assert d.nanoseconds() == one_day_nanos

    def test_fractional_readers(self) -> None:
        d = Duration.from_minutes(90)
        assert d.hours() == 1.5
        assert d.minutes() == 90.0
        assert d.seconds() == 5400.0

    def test_negative_readers(self) -> None:
        """Negative spans read back with the same magnitude."""
        d = Duration.from_minutes(-90)
        assert d.hours() == -1.5
        assert d.minutes() == -90.0
        assert d.seconds() == -5400.0

    def test_subsecond_seconds(self) -> None:
        assert Duration(200_000_000).seconds() == 0.2
        assert Duration(1_500).seconds() == 1.5e-06

    def test_integer_readers_truncate(self) -> None:
        assert Duration(1_999_999).milliseconds() == 1
        assert Duration(-1_999_999).milliseconds() == -1
        assert Duration(1_999).microseconds() == 1
        assert Duration(-1_999).microseconds() == -1

    def test_large_value_keeps_precision(self) -> None:
        """Whole units are split off before the float division."""
        d = Duration.from_hours(1_000_000) + ONE_NANOSECOND
        assert d.hours() == pytest.approx(1_000_000.0)
        assert d.nanoseconds() == 3_600_000_000_000_000_001


class TestDurationArithmetic:
    """Tests for Duration arithmetic operators."""

    def test_add(self) -> None:
        total = Duration.from_seconds(30) + Duration.from_seconds(45)
        assert total == Duration.from_seconds(75)

    def test_sum(self) -> None:
        assert sum([Duration(1), Duration(2), Duration(3)]) == Duration(6)

    def test_sub(self) -> None:
        assert Duration.from_seconds(60) - Duration.from_seconds(90) == Duration.from_seconds(-30)

    def test_mul(self) -> None:
        assert Duration.from_seconds(30) * 3 == Duration.from_seconds(90)
        assert 3 * Duration.from_seconds(30) == Duration.from_seconds(90)

    def test_mul_rejects_float(self) -> None:
        with pytest.raises(TypeError):
            Duration(1) * 1.5  # type: ignore[operator]

    def test_floordiv(self) -> None:
        assert Duration(7) // 2 == Duration(3)
        assert Duration(-7) // 2 == Duration(-4)

    def test_floordiv_by_zero(self) -> None:
        with pytest.raises(ZeroDivisionError):
            Duration(1) // 0

    def test_unary(self) -> None:
        d = Duration(-5)
        assert -d == Duration(5)
        assert +d == d
        assert abs(d) == Duration(5)

    def test_add_foreign_type(self) -> None:
        with pytest.raises(TypeError):
            Duration(1) + 1  # type: ignore[operator]


class TestDurationComparison:
    """Tests for Duration ordering, equality and hashing."""

    def test_ordering(self) -> None:
        short = Duration.from_seconds(30)
        long = Duration.from_minutes(1)
        assert short < long
        assert short <= long
        assert long > short
        assert long >= short
        assert short != long

    def test_equal_across_factories(self) -> None:
        assert Duration.from_seconds(60) == Duration.from_minutes(1)

    def test_hash(self) -> None:
        assert len({Duration.from_seconds(60), Duration.from_minutes(1)}) == 1

    def test_not_equal_to_int(self) -> None:
        assert Duration(0) != 0

    def test_bool(self) -> None:
        assert not Duration()
        assert Duration(1)

    def test_repr(self) -> None:
        assert repr(Duration(42)) == "Duration(nanoseconds=42)"


class TestDurationTimedelta:
    """Tests for datetime.timedelta interop."""

    def test_from_timedelta(self) -> None:
        d = Duration.from_timedelta(timedelta(seconds=1, microseconds=5))
        assert d.nanoseconds() == 1_000_005_000

    def test_from_negative_timedelta(self) -> None:
        d = Duration.from_timedelta(timedelta(microseconds=-1))
        assert d.nanoseconds() == -1_000

    def test_to_timedelta_truncates(self) -> None:
        assert Duration(1_500).to_timedelta() == timedelta(microseconds=1)
        assert Duration(-1_500).to_timedelta() == timedelta(microseconds=-1)

    def test_round_trip(self) -> None:
        delta = timedelta(days=2, hours=3, microseconds=7)
        assert Duration.from_timedelta(delta).to_timedelta() == delta

    def test_from_timedelta_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            Duration.from_timedelta(60)  # type: ignore[arg-type]
