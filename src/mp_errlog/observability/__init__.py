"""Observability – structured error logging."""

from mp_errlog.observability.logging import Level, Logger, LoggerConfig, LoggerSettings

__all__ = ["Level", "Logger", "LoggerConfig", "LoggerSettings"]
