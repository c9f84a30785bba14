"""Unit tests for kernel clocks."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta
from unittest.mock import patch

from bootstrap_core.kernel.time import FrozenClock, SystemClock, set_default_clock, utc_now


class TestSystemClock:
    def test_returns_aware_utc(self) -> None:
        assert SystemClock().now().tzinfo is UTC

    def test_never_goes_backwards(self) -> None:
        clock = SystemClock()
        later = datetime(2030, 1, 1, tzinfo=UTC)
        earlier = later - timedelta(hours=1)

        with patch("bootstrap_core.kernel.time.clock.datetime") as fake:
            fake.now.return_value = later
            assert clock.now() == later
            fake.now.return_value = earlier
            assert clock.now() == later


class TestFrozenClock:
    def test_now_is_fixed(self) -> None:
        fixed = datetime(2024, 5, 1, tzinfo=UTC)
        clock = FrozenClock(fixed)
        assert clock.now() == clock.now() == fixed

    def test_advance(self) -> None:
        clock = FrozenClock(datetime(2024, 5, 1, tzinfo=UTC))
        clock.advance(minutes=5)
        assert clock.now() == datetime(2024, 5, 1, 0, 5, tzinfo=UTC)


def test_utc_now_is_aware() -> None:
    assert utc_now().tzinfo is not None


def test_set_default_clock_drives_utc_now() -> None:
    fixed = datetime(2024, 5, 1, tzinfo=UTC)
    previous = set_default_clock(FrozenClock(fixed))
    try:
        assert utc_now() == fixed
    finally:
        restored = set_default_clock(previous)
    assert isinstance(restored, FrozenClock)
    assert utc_now() != fixed
