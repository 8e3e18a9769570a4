"""Observability – human-readable stack traces.

Each kept frame renders as ``file:line:function()``, innermost first.
Frames from interpreter-synthesised code (file names such as
``<frozen importlib._bootstrap>`` or ``<string>``) and from the runtime's
own machinery are dropped.
"""
from __future__ import annotations

from mp_errlog.observability.logging.frames import FrameEnumerator, StackFrameEnumerator
from mp_errlog.observability.logging.paths import PathNormalizer

SYNTHETIC_FILE_MARKER = "<"
RUNTIME_PREFIXES: tuple[str, ...] = ("runpy.", "importlib.", "threading.")


class TraceBuilder:
    def __init__(
        self,
        enumerator: FrameEnumerator | None = None,
        normalizer: PathNormalizer | None = None,
        runtime_prefixes: tuple[str, ...] = RUNTIME_PREFIXES,
    ) -> None:
        self._enumerator = enumerator or StackFrameEnumerator()
        self._normalizer = normalizer or PathNormalizer()
        self._runtime_prefixes = runtime_prefixes

    def build(self, skip: int) -> list[str]:
        """Collect the trace starting *skip* frames above this call.

        ``build(0)`` starts at :meth:`build` itself, ``build(1)`` at its caller.
        """
        trace: list[str] = []
        for frame in self._enumerator.frames(skip):
            file = self._normalizer.normalize(frame.file)
            if file.startswith(SYNTHETIC_FILE_MARKER):
                continue
            if frame.function.startswith(self._runtime_prefixes):
                continue
            trace.append(f"{file}:{frame.line}:{frame.short_function}()")
        return trace


__all__ = ["RUNTIME_PREFIXES", "SYNTHETIC_FILE_MARKER", "TraceBuilder"]
