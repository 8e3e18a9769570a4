"""Storage errors — bucket and object conditions raised by the object layer.

Several of these describe ordinary control flow (a lookup that found
nothing, a create that raced an existing bucket) rather than failures.
See :mod:`mp_errlog.observability.logging.classifier` for which ones the
error log drops.
"""

from __future__ import annotations

from typing import Any

from mp_errlog.kernel.errors.domain import DomainError
from mp_errlog.kernel.errors.infrastructure import InfrastructureError


class StorageError(DomainError):
    """Base for errors that refer to a bucket and, optionally, an object."""

    default_code = "storage_error"

    def __init__(
        self,
        message: str,
        *,
        bucket: str = "",
        object: str = "",  # noqa: A002
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.bucket = bucket
        self.object = object


class BucketNotFound(StorageError):
    default_code = "bucket_not_found"

    def __init__(self, bucket: str, **kwargs: Any) -> None:
        super().__init__(f"Bucket not found: {bucket}", bucket=bucket, **kwargs)


class BucketNotEmpty(StorageError):
    default_code = "bucket_not_empty"

    def __init__(self, bucket: str, **kwargs: Any) -> None:
        super().__init__(f"Bucket not empty: {bucket}", bucket=bucket, **kwargs)


class BucketExists(StorageError):
    default_code = "bucket_exists"

    def __init__(self, bucket: str, **kwargs: Any) -> None:
        super().__init__(f"Bucket exists: {bucket}", bucket=bucket, **kwargs)


class BucketNameInvalid(StorageError):
    default_code = "bucket_name_invalid"

    def __init__(self, bucket: str, **kwargs: Any) -> None:
        super().__init__(f"Bucket name invalid: {bucket}", bucket=bucket, **kwargs)


class BucketPolicyNotFound(StorageError):
    default_code = "bucket_policy_not_found"

    def __init__(self, bucket: str, **kwargs: Any) -> None:
        super().__init__(
            f"No bucket policy found for bucket: {bucket}", bucket=bucket, **kwargs
        )


class ObjectNotFound(StorageError):
    default_code = "object_not_found"

    def __init__(self, bucket: str, object: str, **kwargs: Any) -> None:  # noqa: A002
        super().__init__(
            f"Object not found: {bucket}#{object}", bucket=bucket, object=object, **kwargs
        )


class ObjectExistsAsDirectory(StorageError):
    default_code = "object_exists_as_directory"

    def __init__(self, bucket: str, object: str, **kwargs: Any) -> None:  # noqa: A002
        super().__init__(
            f"Object exists on : {bucket} as directory {object}",
            bucket=bucket,
            object=object,
            **kwargs,
        )


class ObjectNameInvalid(StorageError):
    default_code = "object_name_invalid"

    def __init__(self, bucket: str, object: str, **kwargs: Any) -> None:  # noqa: A002
        super().__init__(
            f"Object name invalid: {bucket}#{object}", bucket=bucket, object=object, **kwargs
        )


class InvalidUploadID(StorageError):
    """Multipart upload id is unknown or already completed/aborted."""

    default_code = "invalid_upload_id"

    def __init__(self, upload_id: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid upload id {upload_id}", **kwargs)
        self.upload_id = upload_id


class StorageFull(InfrastructureError):
    """Free disk space dropped below the minimum threshold."""

    default_code = "storage_full"

    def __init__(
        self,
        message: str = "Storage reached its minimum free disk threshold.",
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)


__all__ = [
    "BucketExists",
    "BucketNameInvalid",
    "BucketNotEmpty",
    "BucketNotFound",
    "BucketPolicyNotFound",
    "InvalidUploadID",
    "ObjectExistsAsDirectory",
    "ObjectNameInvalid",
    "ObjectNotFound",
    "StorageError",
    "StorageFull",
]
