"""Kernel time – Clock port + implementations."""
from mp_errlog.kernel.time.clock import (
    Clock,
    FrozenClock,
    SystemClock,
    UtcNow,
    format_rfc3339_nano,
    utc_now,
)

__all__ = ["Clock", "FrozenClock", "SystemClock", "UtcNow", "format_rfc3339_nano", "utc_now"]
