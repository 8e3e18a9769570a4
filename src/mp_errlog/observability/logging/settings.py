"""Observability – error log settings read at process start."""
from __future__ import annotations

import dataclasses

from mp_errlog.config.settings import Settings


@dataclasses.dataclass(frozen=True)
class LoggerSettings(Settings):
    """Startup switches for :class:`~mp_errlog.observability.logging.logger.Logger`.

    Environment: ``ERRLOG_QUIET``, ``ERRLOG_JSON``, ``ERRLOG_COLOR``
    (``auto``/unset detects a TTY).
    """

    _prefix = "ERRLOG"

    quiet: bool = False
    json: bool = False
    color: bool | None = None


__all__ = ["LoggerSettings"]
