"""Testing support – fakes for the clock and frame enumeration ports."""

from mp_errlog.testing.fakes import FakeClock, FakeFrameEnumerator, FrozenClock

__all__ = ["FakeClock", "FakeFrameEnumerator", "FrozenClock"]
