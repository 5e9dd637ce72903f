"""Storage client protocol and data types.

This module defines the interface for versioned object storage operations.
Responses are the provider's raw response mappings; provider errors are
raised unchanged by implementations.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from os import PathLike
from typing import Any, Mapping, Protocol

ProviderResponse = dict[str, Any]


class StorageError(RuntimeError):
    """Raised when a storage request cannot be issued."""


class InvalidLocatorError(StorageError, ValueError):
    """Raised when a bucket, key or version id is empty."""


class VersioningStatus(str, Enum):
    ENABLED = "Enabled"
    SUSPENDED = "Suspended"
    UNKNOWN = "Unknown"

    @classmethod
    def from_response(cls, status: str | None) -> "VersioningStatus":
        if status == cls.ENABLED.value:
            return cls.ENABLED
        if status == cls.SUSPENDED.value:
            return cls.SUSPENDED
        return cls.UNKNOWN


def validate_locator(bucket: str, object_key: str) -> None:
    """Raise InvalidLocatorError unless both bucket and key are non-empty."""
    if not bucket:
        raise InvalidLocatorError("bucket name must be a non-empty string")
    if not object_key:
        raise InvalidLocatorError("object key must be a non-empty string")


@dataclass(frozen=True, slots=True)
class ObjectLocator:
    """Identifies a logical object within a bucket."""

    bucket: str
    object_key: str

    def __post_init__(self) -> None:
        validate_locator(self.bucket, self.object_key)


class VersionedStorageClient(Protocol):
    """Protocol defining the interface for versioned object storage backends.

    Every method maps to exactly one remote call (``upload_file`` adds a
    local file read). Nothing is retried, batched or paginated.
    """

    def get_versioning_status(self, *, bucket: str) -> VersioningStatus:
        """Query the versioning status of a bucket.

        Args:
            bucket: Bucket name.

        Returns:
            ENABLED, SUSPENDED, or UNKNOWN when the provider reports no status.
        """
        ...

    def check_versioning_enabled(self, *, bucket: str) -> bool:
        """Return True only when the bucket's versioning status is Enabled.

        An absent status is logged and treated as not enabled.
        """
        ...

    def upload_object(
        self,
        *,
        bucket: str,
        object_key: str,
        body: bytes,
        metadata: Mapping[str, str] | None = None,
        content_type: str | None = None,
    ) -> ProviderResponse:
        """Write an in-memory payload to ``bucket/object_key``.

        Args:
            bucket: Target bucket name.
            object_key: Object key (path) in the bucket.
            body: Complete payload bytes.
            metadata: User metadata sent verbatim as ``Metadata``.
            content_type: MIME type of the object.

        Returns:
            The provider's PutObject response, including ``VersionId`` when
            the bucket is versioned.
        """
        ...

    def upload_file(
        self,
        *,
        bucket: str,
        object_key: str,
        file_path: str | PathLike[str],
        metadata: Mapping[str, str] | None = None,
        content_type: str | None = None,
    ) -> ProviderResponse:
        """Read ``file_path`` fully into memory and upload it."""
        ...

    def get_object(
        self,
        *,
        bucket: str,
        object_key: str,
        version_id: str | None = None,
    ) -> ProviderResponse:
        """Fetch an object, pinned to ``version_id`` when given.

        Without a version id the provider returns the latest version.
        """
        ...

    def delete_object(self, *, bucket: str, object_key: str) -> ProviderResponse:
        """Delete the key. Versioned buckets receive a delete marker."""
        ...

    def delete_object_version(
        self,
        *,
        bucket: str,
        object_key: str,
        version_id: str,
    ) -> ProviderResponse:
        """Permanently delete one version, which may be a delete marker."""
        ...
