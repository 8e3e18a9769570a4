"""Observability – errors that never reach the error log.

Some storage errors are ordinary outcomes (a lookup that found nothing, a
create that lost a race) and would only add noise.  The allow-list below is
closed: extend it here, not at call sites.
"""
from __future__ import annotations

from mp_errlog.kernel.errors import (
    BucketExists,
    BucketNotEmpty,
    BucketNotFound,
    BucketPolicyNotFound,
    InvalidUploadID,
    ObjectExistsAsDirectory,
    ObjectNotFound,
    root_cause,
)

IGNORABLE_ERRORS: tuple[type[BaseException], ...] = (
    BucketExists,
    BucketNotEmpty,
    BucketNotFound,
    ObjectExistsAsDirectory,
    ObjectNotFound,
    BucketPolicyNotFound,
    InvalidUploadID,
)


def is_ignorable(err: BaseException) -> bool:
    """Return ``True`` when the root cause of *err* is on the allow-list."""
    match root_cause(err):
        case BucketNotFound() | BucketNotEmpty() | BucketExists():
            return True
        case ObjectNotFound() | ObjectExistsAsDirectory():
            return True
        case BucketPolicyNotFound() | InvalidUploadID():
            return True
        case _:
            return False


__all__ = ["IGNORABLE_ERRORS", "is_ignorable"]
