"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

import time
from datetime import UTC, date, datetime, timedelta
from typing import Protocol

_EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_NANOS_PER_SECOND = 1_000_000_000


class Clock(Protocol):
    """Port: abstract clock for deterministic testing."""

    def now(self) -> datetime: ...
    def today(self) -> date: ...
    def timestamp(self) -> float: ...
    def time_ns(self) -> int: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)

    def today(self) -> date:
        return datetime.now(UTC).date()

    def timestamp(self) -> float:
        return datetime.now(UTC).timestamp()

    def time_ns(self) -> int:
        return time.time_ns()


class FrozenClock:
    """Test clock pinned to a fixed point in time.

    ``datetime`` stops at microseconds; *nanos* adds the sub-microsecond
    part reported by :meth:`time_ns`.
    """

    def __init__(self, fixed: datetime, nanos: int = 0) -> None:
        if not 0 <= nanos < 1000:
            raise ValueError("nanos must be in [0, 1000)")
        self._fixed = fixed
        self._nanos = nanos

    def now(self) -> datetime:
        return self._fixed

    def today(self) -> date:
        return self._fixed.date()

    def timestamp(self) -> float:
        return self._fixed.timestamp()

    def time_ns(self) -> int:
        micros = (self._fixed - _EPOCH) // timedelta(microseconds=1)
        return micros * 1000 + self._nanos

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def utc_now() -> datetime:
    """Shorthand for ``datetime.now(UTC)``."""
    return datetime.now(UTC)


def format_rfc3339_nano(ns: int) -> str:
    """Render epoch nanoseconds as an RFC 3339 UTC timestamp.

    Trailing zeros of the fractional second are dropped and the fraction is
    omitted entirely when it is zero, e.g. ``2026-01-01T12:00:00.5Z``.
    """
    seconds, frac = divmod(ns, _NANOS_PER_SECOND)
    text = datetime.fromtimestamp(seconds, UTC).strftime("%Y-%m-%dT%H:%M:%S")
    if frac:
        text += "." + f"{frac:09d}".rstrip("0")
    return text + "Z"


UtcNow = utc_now

__all__ = ["Clock", "FrozenClock", "SystemClock", "UtcNow", "format_rfc3339_nano", "utc_now"]
