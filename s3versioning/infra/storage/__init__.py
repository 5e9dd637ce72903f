"""Object storage abstraction layer.

This module provides a protocol-based abstraction for versioned object
storage, backed by S3 or any S3-compatible service (MinIO, Ceph RGW).
"""

from .client import (
    InvalidLocatorError,
    ObjectLocator,
    ProviderResponse,
    StorageError,
    VersionedStorageClient,
    VersioningStatus,
    validate_locator,
)

__all__ = [
    "InvalidLocatorError",
    "ObjectLocator",
    "ProviderResponse",
    "StorageError",
    "VersionedStorageClient",
    "VersioningStatus",
    "validate_locator",
]
