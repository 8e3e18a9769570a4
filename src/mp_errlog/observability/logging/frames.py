"""Observability – call-stack frame enumeration.

A :class:`FrameEnumerator` yields raw frames from a starting depth outward.
``skip=0`` is the frame that called :meth:`FrameEnumerator.frames`, ``skip=1``
its caller, and so on.
"""
from __future__ import annotations

import sys
from collections.abc import Iterator
from dataclasses import dataclass
from types import FrameType
from typing import Protocol


@dataclass(frozen=True)
class RawFrame:
    """One call-stack entry as reported by the interpreter."""

    file: str
    line: int
    module: str
    qualname: str

    @property
    def function(self) -> str:
        """Fully qualified function name, ``<module>.<qualname>``."""
        if not self.module:
            return self.qualname
        return f"{self.module}.{self.qualname}"

    @property
    def short_function(self) -> str:
        """Last path component of :attr:`function`: final module segment plus qualname."""
        if not self.module:
            return self.qualname
        return f"{self.module.rpartition('.')[2]}.{self.qualname}"


class FrameEnumerator(Protocol):
    """Port: produce call-stack frames on demand."""

    def frames(self, skip: int = 0) -> Iterator[RawFrame]: ...


class StackFrameEnumerator:
    """Walks the live interpreter stack of the calling thread."""

    def frames(self, skip: int = 0) -> Iterator[RawFrame]:
        if skip < 0:
            raise ValueError("skip must be >= 0")
        frame: FrameType | None = sys._getframe(1)
        for _ in range(skip):
            if frame is None:
                break
            frame = frame.f_back
        return _walk(frame)


def _walk(frame: FrameType | None) -> Iterator[RawFrame]:
    while frame is not None:
        code = frame.f_code
        yield RawFrame(
            file=code.co_filename,
            line=frame.f_lineno or code.co_firstlineno,
            module=frame.f_globals.get("__name__", ""),
            qualname=code.co_qualname,
        )
        frame = frame.f_back


__all__ = ["FrameEnumerator", "RawFrame", "StackFrameEnumerator"]
