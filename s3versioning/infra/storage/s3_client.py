"""S3-compatible storage client implementation.

This module provides a versioning-aware client that works with AWS S3,
MinIO, Ceph RGW and other S3-compatible object storage services.

Provider failures surface as ``botocore.exceptions.ClientError`` (or a
botocore connection error) exactly as boto3 raised them.

Dependencies:
    - boto3
    - botocore
"""

from __future__ import annotations

import logging
from os import PathLike
from pathlib import Path
from typing import TYPE_CHECKING, Any, Mapping

from s3versioning.infra.storage.client import (
    InvalidLocatorError,
    ProviderResponse,
    StorageError,
    VersioningStatus,
    validate_locator,
)

if TYPE_CHECKING:
    from s3versioning.common.config import Settings

logger = logging.getLogger("s3versioning.storage")


class S3StorageClient:
    """S3-compatible versioned object storage client.

    The underlying boto3 client is built once and only read afterwards, so a
    single instance may be shared between callers.
    """

    def __init__(self, *, settings: "Settings") -> None:
        """Initialize the S3 client with configuration from settings.

        Args:
            settings: Application settings containing credentials and region.

        Raises:
            StorageError: If boto3 is not installed.
        """
        self._settings = settings
        self._client = self._build_client(settings)

    @staticmethod
    def _build_client(settings: "Settings") -> Any:
        """Create a boto3 S3 client from settings."""
        try:
            import boto3
            from botocore.config import Config
        except ImportError as exc:
            raise StorageError(
                "boto3 and botocore are required for the S3 storage backend. "
                "Install with: pip install boto3"
            ) from exc

        config = Config(s3={"addressing_style": settings.S3_ADDRESSING_STYLE})

        return boto3.client(
            "s3",
            endpoint_url=settings.S3_ENDPOINT_URL,
            region_name=settings.AWS_REGION,
            aws_access_key_id=settings.AWS_ACCESS_KEY_ID,
            aws_secret_access_key=settings.AWS_SECRET_ACCESS_KEY,
            use_ssl=bool(settings.S3_USE_SSL),
            config=config,
        )

    def _read_versioning_status(self, bucket: str) -> str | None:
        """Return the raw ``Status`` field of GetBucketVersioning."""
        if not bucket:
            raise InvalidLocatorError("bucket name must be a non-empty string")
        logger.debug("get_bucket_versioning bucket=%s", bucket)
        response = self._client.get_bucket_versioning(Bucket=bucket)
        return response.get("Status")

    def get_versioning_status(self, *, bucket: str) -> VersioningStatus:
        """Query the versioning status of a bucket."""
        return VersioningStatus.from_response(self._read_versioning_status(bucket))

    def check_versioning_enabled(self, *, bucket: str) -> bool:
        """Return True only when the bucket's versioning status is Enabled."""
        raw_status = self._read_versioning_status(bucket)
        status = VersioningStatus.from_response(raw_status)
        if status is VersioningStatus.UNKNOWN:
            if raw_status is None:
                logger.warning(
                    "GetBucketVersioning returned no Status for bucket %s; "
                    "treating versioning as not enabled",
                    bucket,
                )
            else:
                logger.warning(
                    "GetBucketVersioning returned unrecognised Status %r for "
                    "bucket %s; treating versioning as not enabled",
                    raw_status,
                    bucket,
                )
            return False
        return status is VersioningStatus.ENABLED

    def upload_object(
        self,
        *,
        bucket: str,
        object_key: str,
        body: bytes,
        metadata: Mapping[str, str] | None = None,
        content_type: str | None = None,
    ) -> ProviderResponse:
        """Write an in-memory payload to ``bucket/object_key``."""
        validate_locator(bucket, object_key)
        return self._put_object(bucket, object_key, body, metadata, content_type)

    def upload_file(
        self,
        *,
        bucket: str,
        object_key: str,
        file_path: str | PathLike[str],
        metadata: Mapping[str, str] | None = None,
        content_type: str | None = None,
    ) -> ProviderResponse:
        """Read ``file_path`` fully into memory and upload it.

        The locator is checked before the file is read.
        """
        validate_locator(bucket, object_key)
        body = Path(file_path).read_bytes()
        return self._put_object(bucket, object_key, body, metadata, content_type)

    def _put_object(
        self,
        bucket: str,
        object_key: str,
        body: bytes,
        metadata: Mapping[str, str] | None,
        content_type: str | None,
    ) -> ProviderResponse:
        params: dict[str, Any] = {
            "Bucket": bucket,
            "Key": object_key,
            "Body": bytes(body),
            "Metadata": dict(metadata or {}),
        }
        if content_type:
            params["ContentType"] = content_type

        logger.debug(
            "put_object bucket=%s key=%s size=%d", bucket, object_key, len(body)
        )
        return self._client.put_object(**params)

    def get_object(
        self,
        *,
        bucket: str,
        object_key: str,
        version_id: str | None = None,
    ) -> ProviderResponse:
        """Fetch an object, pinned to ``version_id`` when given."""
        validate_locator(bucket, object_key)
        params: dict[str, Any] = {"Bucket": bucket, "Key": object_key}
        if version_id is not None:
            params["VersionId"] = version_id

        logger.debug(
            "get_object bucket=%s key=%s version=%s", bucket, object_key, version_id
        )
        return self._client.get_object(**params)

    def delete_object(self, *, bucket: str, object_key: str) -> ProviderResponse:
        """Delete the key. Versioned buckets receive a delete marker."""
        validate_locator(bucket, object_key)
        logger.debug("delete_object bucket=%s key=%s", bucket, object_key)
        return self._client.delete_object(Bucket=bucket, Key=object_key)

    def delete_object_version(
        self,
        *,
        bucket: str,
        object_key: str,
        version_id: str,
    ) -> ProviderResponse:
        """Permanently delete one version, which may be a delete marker."""
        validate_locator(bucket, object_key)
        if not version_id:
            raise InvalidLocatorError("version id must be a non-empty string")

        logger.debug(
            "delete_object bucket=%s key=%s version=%s",
            bucket,
            object_key,
            version_id,
        )
        return self._client.delete_object(
            Bucket=bucket, Key=object_key, VersionId=version_id
        )
