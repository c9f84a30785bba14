"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import threading
from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock backed by ``datetime.now(UTC)``.

    Readings never go backwards: if the wall clock is stepped back, the
    previous reading is returned until real time catches up.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._last: datetime | None = None

    def now(self) -> datetime:
        current = datetime.now(UTC)
        with self._lock:
            if self._last is not None and current < self._last:
                current = self._last
            self._last = current
        return current


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


_default_clock: Clock = SystemClock()


def set_default_clock(clock: Clock) -> Clock:
    """Install *clock* as the process-wide default and return the previous one.

    Domain event timestamps read the default clock, so tests can pin them::

        previous = set_default_clock(FrozenClock(datetime(2024, 1, 1, tzinfo=UTC)))
        try:
            ...
        finally:
            set_default_clock(previous)
    """
    global _default_clock
    previous, _default_clock = _default_clock, clock
    return previous


def utc_now() -> datetime:
    """Current time from the process-wide default clock."""
    return _default_clock.now()


__all__ = ["Clock", "FrozenClock", "SystemClock", "set_default_clock", "utc_now"]
