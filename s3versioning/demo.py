"""Walk through the versioning lifecycle of a single object.

1. check that the bucket has versioning enabled
2. upload the payload file
3. upload it again on the same key
4. fetch the latest version
5. delete the key, which leaves a delete marker
6. delete the delete marker by version id, restoring the object
7. delete the version fetched in step 4
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from os import PathLike

from botocore.exceptions import BotoCoreError, ClientError

from s3versioning.common.config import get_settings
from s3versioning.common.logging import setup_logging
from s3versioning.infra.storage import ProviderResponse, VersionedStorageClient
from s3versioning.infra.storage.s3_client import S3StorageClient

logger = logging.getLogger("s3versioning.demo")


@dataclass
class DemoReport:
    bucket: str
    object_key: str
    versioning_enabled: bool
    uploads: list[ProviderResponse] = field(default_factory=list)
    fetched: ProviderResponse | None = None
    deleted: ProviderResponse | None = None
    marker_removed: ProviderResponse | None = None
    version_removed: ProviderResponse | None = None

    @property
    def version_ids(self) -> list[str]:
        return [u["VersionId"] for u in self.uploads if u.get("VersionId")]

    @property
    def delete_marker_id(self) -> str | None:
        if self.deleted is None or not self.deleted.get("DeleteMarker"):
            return None
        return self.deleted.get("VersionId")


def run_demo(
    client: VersionedStorageClient,
    *,
    bucket: str,
    object_key: str,
    file_path: str | PathLike[str],
    content_type: str | None = None,
    metadata: dict[str, str] | None = None,
) -> DemoReport:
    """Run the lifecycle against ``bucket/object_key`` and collect responses.

    Provider errors propagate from whichever step raised them. Steps 6 and 7
    are skipped when the provider returned no version ids, which is the case
    for buckets without versioning.
    """
    enabled = client.check_versioning_enabled(bucket=bucket)
    if enabled:
        logger.info("Bucket %s has versioning enabled", bucket)
    else:
        logger.info("Bucket %s does not have versioning enabled", bucket)
    report = DemoReport(bucket=bucket, object_key=object_key, versioning_enabled=enabled)

    for attempt in (1, 2):
        result = client.upload_file(
            bucket=bucket,
            object_key=object_key,
            file_path=file_path,
            metadata=metadata,
            content_type=content_type,
        )
        logger.info(
            "Upload %d of %s/%s version=%s",
            attempt,
            bucket,
            object_key,
            result.get("VersionId"),
        )
        report.uploads.append(result)

    report.fetched = client.get_object(bucket=bucket, object_key=object_key)
    fetched_version = report.fetched.get("VersionId")
    logger.info(
        "Fetched %s/%s version=%s length=%s",
        bucket,
        object_key,
        fetched_version,
        report.fetched.get("ContentLength"),
    )

    report.deleted = client.delete_object(bucket=bucket, object_key=object_key)
    marker_id = report.delete_marker_id
    logger.info("Deleted %s/%s delete_marker=%s", bucket, object_key, marker_id)

    if marker_id is None:
        logger.info("No delete marker was created; skipping version cleanup")
        return report

    report.marker_removed = client.delete_object_version(
        bucket=bucket, object_key=object_key, version_id=marker_id
    )
    logger.info("Removed delete marker %s", marker_id)

    if fetched_version:
        report.version_removed = client.delete_object_version(
            bucket=bucket, object_key=object_key, version_id=fetched_version
        )
        logger.info("Removed version %s", fetched_version)

    return report


def main() -> int:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FORMAT)
    client = S3StorageClient(settings=settings)
    try:
        run_demo(
            client,
            bucket=settings.DEMO_BUCKET,
            object_key=settings.DEMO_OBJECT_KEY,
            file_path=settings.DEMO_FILE_PATH,
            content_type=settings.DEMO_CONTENT_TYPE,
            metadata={"Content-Type": settings.DEMO_CONTENT_TYPE},
        )
    except ClientError as exc:
        error = exc.response.get("Error", {})
        logger.error(
            "Storage request failed: %s %s", error.get("Code"), error.get("Message")
        )
        return 1
    except (BotoCoreError, OSError) as exc:
        logger.error("Demo aborted: %s", exc)
        return 1
    return 0
