"""Observability – the error/fatal logger.

Build one :class:`Logger` at process start, apply the startup switches
(:meth:`Logger.enable_quiet`, :meth:`Logger.enable_json`) before any
concurrent use, then hand the instance to every call site::

    log = Logger.from_settings()
    ...
    log.error(err, "unable to read %s", path)
    log.fatal(err, "unable to initialize storage")

Errors whose root cause is on the ignorable allow-list produce no output at
all.  Quiet mode silences :meth:`Logger.println` / :meth:`Logger.printf`
only; error and fatal records are always written.
"""
from __future__ import annotations

import dataclasses
import os
import sys
import threading
from collections.abc import Callable
from typing import Any

from mp_errlog.config.settings import DotenvSettingsLoader, EnvSettingsLoader
from mp_errlog.kernel.errors import root_cause
from mp_errlog.kernel.time import Clock, SystemClock, format_rfc3339_nano
from mp_errlog.observability.logging.classifier import is_ignorable
from mp_errlog.observability.logging.console import Console, interpolate
from mp_errlog.observability.logging.formatter import (
    JsonFormatter,
    LogFormatError,
    LogRecord,
    TextFormatter,
    title_case,
)
from mp_errlog.observability.logging.levels import Level
from mp_errlog.observability.logging.settings import LoggerSettings
from mp_errlog.observability.logging.trace import TraceBuilder


@dataclasses.dataclass(frozen=True)
class LoggerConfig:
    """Output switches.  JSON output implies quiet."""

    quiet: bool = False
    json: bool = False

    def __post_init__(self) -> None:
        if self.json and not self.quiet:
            raise ValueError("json output requires quiet mode")

    def with_quiet(self) -> LoggerConfig:
        return dataclasses.replace(self, quiet=True)

    def with_json(self) -> LoggerConfig:
        return LoggerConfig(quiet=True, json=True)


def _abort(exc: BaseException) -> None:
    sys.stderr.write(f"mp_errlog: {exc}\n")
    sys.stderr.flush()
    os.abort()


class Logger:
    """Error/fatal logger with quiet-aware console passthrough.

    Parameters
    ----------
    config:
        Initial switches; defaults to ``LoggerConfig()``.
    console:
        Print primitive and output stream (stdout by default).
    clock:
        Source of the record timestamp.
    trace_builder:
        Collects the call-site trace.
    exit_func:
        Called with ``1`` after a fatal record is written (``os._exit``).
    abort_func:
        Called when a record cannot be rendered at all; must not return in
        production (writes to stderr, then ``os.abort``).
    """

    # _log, then log/error/fatal, then the call site
    TRACE_SKIP = 3

    def __init__(
        self,
        config: LoggerConfig | None = None,
        *,
        console: Console | None = None,
        clock: Clock | None = None,
        trace_builder: TraceBuilder | None = None,
        exit_func: Callable[[int], Any] = os._exit,
        abort_func: Callable[[BaseException], Any] = _abort,
    ) -> None:
        self._config = config or LoggerConfig()
        self._console = console or Console()
        self._clock = clock or SystemClock()
        self._trace_builder = trace_builder or TraceBuilder()
        self._exit = exit_func
        self._abort = abort_func
        self._json_formatter = JsonFormatter()
        self._text_formatter = TextFormatter(self._console)
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: LoggerSettings | None = None,
        *,
        env_file: str | None = None,
        **kwargs: Any,
    ) -> Logger:
        """Build a logger from *settings*.

        When *settings* is omitted they are read from the environment, after
        loading *env_file* (a ``.env`` file) if one is given.  Variables already
        set in the environment win over the file.
        """
        if settings is None:
            loader = EnvSettingsLoader() if env_file is None else DotenvSettingsLoader(env_file)
            settings = loader.load(LoggerSettings)
        kwargs.setdefault("console", Console(color=settings.color))
        logger = cls(**kwargs)
        if settings.quiet:
            logger.enable_quiet()
        if settings.json:
            logger.enable_json()
        return logger

    # ------------------------------------------------------------------
    # Startup configuration
    # ------------------------------------------------------------------

    @property
    def config(self) -> LoggerConfig:
        return self._config

    @property
    def quiet(self) -> bool:
        return self._config.quiet

    @property
    def json(self) -> bool:
        return self._config.json

    def enable_quiet(self) -> None:
        """Silence :meth:`println` and :meth:`printf`."""
        self._config = self._config.with_quiet()

    def enable_json(self) -> None:
        """Switch records to single-line JSON; also enables quiet mode."""
        self._config = self._config.with_json()

    # ------------------------------------------------------------------
    # Console passthrough
    # ------------------------------------------------------------------

    def println(self, *args: Any) -> None:
        if not self._config.quiet:
            self._console.println(*args)

    def printf(self, fmt: str, *args: Any) -> None:
        if not self._config.quiet:
            self._console.printf(fmt, *args)

    # ------------------------------------------------------------------
    # Error log
    # ------------------------------------------------------------------

    def log(self, level: Level, err: BaseException | None, msg: str, *args: Any) -> None:
        self._log(level, err, msg, args)

    def error(self, err: BaseException | None, msg: str, *args: Any) -> None:
        self._log(Level.ERROR, err, msg, args)

    def fatal(self, err: BaseException | None, msg: str, *args: Any) -> None:
        self._log(Level.FATAL, err, msg, args)

    def _log(self, level: Level, err: BaseException | None, msg: str, args: tuple[Any, ...]) -> None:
        if err is None or is_ignorable(err):
            return

        record = LogRecord(
            level=level,
            message=interpolate(msg, args),
            time=format_rfc3339_nano(self._clock.time_ns()),
            cause=title_case(str(root_cause(err))),
            trace=tuple(self._trace_builder.build(self.TRACE_SKIP)),
        )
        formatter = self._json_formatter if self._config.json else self._text_formatter

        with self._lock:
            try:
                output = formatter.format(record)
            except LogFormatError as exc:
                self._abort(exc)
                return
            self._console.write(output + "\n")
            self._console.flush()

        if level is Level.FATAL:
            self._exit(1)


__all__ = ["Logger", "LoggerConfig"]
