"""Observability – LogRecord and its two renderings.

JSON mode emits one line with exactly five keys::

    {"level":"ERROR","message":"...","time":"...","cause":"...","trace":["..."]}

Text mode emits a numbered trace block followed by a bold red summary::

    <blank line>
    Trace: 1: pkg/mod.py:10:mod.handler()
           2: pkg/app.py:42:app.main()
    [2026-01-01T12:00:00Z] [ERROR] lookup failed (Disk Full)
"""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Any, Protocol

import structlog

from mp_errlog.kernel.errors import InfrastructureError
from mp_errlog.observability.logging.console import Console
from mp_errlog.observability.logging.levels import Level

TRACE_INDEX_WIDTH = 8

_WORD_START = re.compile(r"(?<!\w)\w")


def title_case(text: str) -> str:
    """Upper-case the first letter of every word, leaving the rest untouched."""
    return _WORD_START.sub(lambda m: m.group().upper(), text)


class LogFormatError(InfrastructureError):
    """A well-formed record could not be rendered; the log path itself is broken."""

    default_code = "log_format_error"


class LogSerializationError(LogFormatError):
    default_code = "log_serialization_error"


class EmptyTraceError(LogFormatError):
    default_code = "empty_trace"


@dataclass(frozen=True)
class LogRecord:
    level: Level
    message: str
    time: str
    cause: str
    trace: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "level": str(self.level),
            "message": self.message,
            "time": self.time,
            "cause": self.cause,
            "trace": list(self.trace),
        }


class Formatter(Protocol):
    def format(self, record: LogRecord) -> str: ...


class JsonFormatter:
    """Single-line JSON rendering via structlog's ``JSONRenderer``."""

    def __init__(self) -> None:
        self._render = structlog.processors.JSONRenderer(
            separators=(",", ":"),
            ensure_ascii=False,
        )

    def format(self, record: LogRecord) -> str:
        try:
            return self._render(None, str(record.level).lower(), record.to_dict())
        except (TypeError, ValueError) as exc:
            raise LogSerializationError(
                f"json encoding of log record failed: {exc}", cause=exc
            ) from exc


class TextFormatter:
    """Multi-line console rendering; styling comes from *console*."""

    def __init__(self, console: Console) -> None:
        self._console = console

    def format(self, record: LogRecord) -> str:
        if not record.trace:
            raise EmptyTraceError("log record has an empty trace")
        first, *rest = record.trace
        lines = [f"1: {first}"]
        lines.extend(
            f"{n:>{TRACE_INDEX_WIDTH}}: {entry}" for n, entry in enumerate(rest, start=2)
        )
        summary = f"[{record.time}] [{record.level}] {record.message} ({record.cause})"
        styled = self._console.red(self._console.bold(summary))
        return "\nTrace: " + "\n".join(lines) + "\n" + styled


__all__ = [
    "EmptyTraceError",
    "Formatter",
    "JsonFormatter",
    "LogFormatError",
    "LogRecord",
    "LogSerializationError",
    "TRACE_INDEX_WIDTH",
    "TextFormatter",
    "title_case",
]
