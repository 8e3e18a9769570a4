"""Observability – console print primitives.

ANSI styling is applied only when colour is enabled; by default that is the
case when the stream is a TTY.  Text the stream cannot encode (lone
surrogates from undecodable file names, say) is written as backslash
escapes rather than failing the write.
"""
from __future__ import annotations

import sys
from collections.abc import Mapping
from typing import Any, TextIO

_BOLD = "\033[1m"
_RED = "\033[31m"
_RESET = "\033[0m"


def interpolate(fmt: str, args: tuple[Any, ...]) -> str:
    """Apply printf-style *args* to *fmt*.

    A single non-empty mapping argument is used for ``%(name)s`` lookups.  A
    format string that does not match its arguments is returned verbatim
    with the arguments appended instead of raising.  Without *args* the
    format string is returned unchanged (``%%`` is not collapsed), as in
    :mod:`logging`.
    """
    if not args:
        return fmt
    values: Any = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return fmt % values
    except (TypeError, ValueError, KeyError):
        return f"{fmt} {args!r}"


class Console:
    """Writes to *stream* (``sys.stdout`` when omitted, resolved per call)."""

    def __init__(self, stream: TextIO | None = None, color: bool | None = None) -> None:
        self._stream = stream
        self._color = color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    @property
    def color(self) -> bool:
        if self._color is not None:
            return self._color
        stream = self.stream
        return hasattr(stream, "isatty") and stream.isatty()

    def println(self, *args: Any) -> None:
        self.write(" ".join(str(arg) for arg in args) + "\n")

    def printf(self, fmt: str, *args: Any) -> None:
        self.write(interpolate(fmt, args))

    def write(self, text: str) -> None:
        """Write *text*, escaping characters the stream cannot encode."""
        stream = self.stream
        encoding = getattr(stream, "encoding", None)
        if encoding:
            text = text.encode(encoding, "backslashreplace").decode(encoding)
        stream.write(text)

    def flush(self) -> None:
        self.stream.flush()

    def bold(self, text: str) -> str:
        return self._style(_BOLD, text)

    def red(self, text: str) -> str:
        return self._style(_RED, text)

    def _style(self, code: str, text: str) -> str:
        if not self.color:
            return text
        return f"{code}{text}{_RESET}"


__all__ = ["Console", "interpolate"]
