"""Testing fakes – in-memory doubles for kernel and logging ports."""
from mp_errlog.testing.fakes.clock import FakeClock
from mp_errlog.testing.fakes.frames import FakeFrameEnumerator
from mp_errlog.kernel.time import FrozenClock

__all__ = [
    "FakeClock",
    "FakeFrameEnumerator",
    "FrozenClock",
]
