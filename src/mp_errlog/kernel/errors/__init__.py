"""Kernel error hierarchy — public re-export surface.

Hierarchy::

    BaseError
    ├── DomainError              (domain.py)
    │   ├── NotFoundError
    │   ├── ConflictError
    │   └── StorageError         (storage.py)
    │       ├── BucketExists / BucketNotFound / BucketNotEmpty
    │       ├── BucketNameInvalid / BucketPolicyNotFound
    │       ├── ObjectNotFound / ObjectExistsAsDirectory / ObjectNameInvalid
    │       └── InvalidUploadID
    ├── ApplicationError         (application.py)
    └── InfrastructureError      (infrastructure.py)
        ├── SerializationError
        └── StorageFull          (storage.py)
"""

from mp_errlog.kernel.errors.application import ApplicationError
from mp_errlog.kernel.errors.base import BaseError, root_cause, wrap
from mp_errlog.kernel.errors.domain import ConflictError, DomainError, NotFoundError
from mp_errlog.kernel.errors.infrastructure import InfrastructureError, SerializationError
from mp_errlog.kernel.errors.storage import (
    BucketExists,
    BucketNameInvalid,
    BucketNotEmpty,
    BucketNotFound,
    BucketPolicyNotFound,
    InvalidUploadID,
    ObjectExistsAsDirectory,
    ObjectNameInvalid,
    ObjectNotFound,
    StorageError,
    StorageFull,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "BucketExists",
    "BucketNameInvalid",
    "BucketNotEmpty",
    "BucketNotFound",
    "BucketPolicyNotFound",
    "ConflictError",
    "DomainError",
    "InfrastructureError",
    "InvalidUploadID",
    "NotFoundError",
    "ObjectExistsAsDirectory",
    "ObjectNameInvalid",
    "ObjectNotFound",
    "SerializationError",
    "StorageError",
    "StorageFull",
    "root_cause",
    "wrap",
]
