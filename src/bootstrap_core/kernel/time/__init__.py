"""Kernel time – clock abstraction."""
from bootstrap_core.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    set_default_clock,
    utc_now,
)

__all__ = ["Clock", "FrozenClock", "SystemClock", "set_default_clock", "utc_now"]
