"""Kernel – framework-agnostic building blocks (errors, time)."""

from mp_errlog.kernel.errors import (
    ApplicationError,
    BaseError,
    ConflictError,
    DomainError,
    InfrastructureError,
    NotFoundError,
    root_cause,
    wrap,
)
from mp_errlog.kernel.time import Clock, FrozenClock, SystemClock

__all__ = [
    "ApplicationError",
    "BaseError",
    "Clock",
    "ConflictError",
    "DomainError",
    "FrozenClock",
    "InfrastructureError",
    "NotFoundError",
    "SystemClock",
    "root_cause",
    "wrap",
]
