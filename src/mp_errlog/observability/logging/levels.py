"""Observability – log severity levels."""
from __future__ import annotations

from enum import Enum


class Level(Enum):
    """Closed set of severities.  ``FATAL`` terminates the process."""

    ERROR = 1
    FATAL = 2

    def __str__(self) -> str:
        return self.name


__all__ = ["Level"]
