"""Observability – error/fatal logging with stack traces."""
from mp_errlog.observability.logging.classifier import IGNORABLE_ERRORS, is_ignorable
from mp_errlog.observability.logging.console import Console, interpolate
from mp_errlog.observability.logging.formatter import (
    EmptyTraceError,
    Formatter,
    JsonFormatter,
    LogFormatError,
    LogRecord,
    LogSerializationError,
    TextFormatter,
    title_case,
)
from mp_errlog.observability.logging.frames import FrameEnumerator, RawFrame, StackFrameEnumerator
from mp_errlog.observability.logging.levels import Level
from mp_errlog.observability.logging.logger import Logger, LoggerConfig
from mp_errlog.observability.logging.paths import PathNormalizer, default_trim_prefixes
from mp_errlog.observability.logging.settings import LoggerSettings
from mp_errlog.observability.logging.trace import TraceBuilder

__all__ = [
    "Console",
    "EmptyTraceError",
    "Formatter",
    "FrameEnumerator",
    "IGNORABLE_ERRORS",
    "JsonFormatter",
    "Level",
    "LogFormatError",
    "LogRecord",
    "LogSerializationError",
    "Logger",
    "LoggerConfig",
    "LoggerSettings",
    "PathNormalizer",
    "RawFrame",
    "StackFrameEnumerator",
    "TextFormatter",
    "TraceBuilder",
    "default_trim_prefixes",
    "interpolate",
    "is_ignorable",
    "title_case",
]
