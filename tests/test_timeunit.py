"""Tests for the TimeUnit enumeration."""

from __future__ import annotations

import pytest

from timespan import TimeUnit


class TestTimeUnit:
    """Tests for TimeUnit factors."""

    @pytest.mark.parametrize(
        ("unit", "nanos"),
        [
            (TimeUnit.NANOSECOND, 1),
            (TimeUnit.MICROSECOND, 1_000),
            (TimeUnit.MILLISECOND, 1_000_000),
            (TimeUnit.SECOND, 1_000_000_000),
            (TimeUnit.MINUTE, 60_000_000_000),
            (TimeUnit.HOUR, 3_600_000_000_000),
        ],
    )
    def test_to_nanoseconds(self, unit: TimeUnit, nanos: int) -> None:
        assert unit.to_nanoseconds() == nanos

    def test_lookup_by_value(self) -> None:
        assert TimeUnit("minute") is TimeUnit.MINUTE
