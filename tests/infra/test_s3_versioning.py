"""Versioning behaviour against moto's in-process S3."""

from __future__ import annotations

import pytest
from botocore.exceptions import ClientError

from s3versioning.infra.storage import VersioningStatus


def _read(response) -> bytes:
    return response["Body"].read()


class TestVersioningStatus:
    def test_enabled(self, moto_s3, versioned_bucket):
        assert moto_s3.check_versioning_enabled(bucket=versioned_bucket) is True

    def test_suspended(self, moto_s3, versioned_bucket):
        moto_s3._client.put_bucket_versioning(
            Bucket=versioned_bucket,
            VersioningConfiguration={"Status": "Suspended"},
        )

        assert (
            moto_s3.get_versioning_status(bucket=versioned_bucket)
            is VersioningStatus.SUSPENDED
        )
        assert moto_s3.check_versioning_enabled(bucket=versioned_bucket) is False

    def test_never_configured(self, moto_s3, plain_bucket):
        """A bucket that never had versioning reports no status."""
        assert (
            moto_s3.get_versioning_status(bucket=plain_bucket)
            is VersioningStatus.UNKNOWN
        )
        assert moto_s3.check_versioning_enabled(bucket=plain_bucket) is False

    def test_missing_bucket_raises(self, moto_s3):
        with pytest.raises(ClientError) as exc_info:
            moto_s3.check_versioning_enabled(bucket="no-such-bucket")

        assert exc_info.value.response["Error"]["Code"] == "NoSuchBucket"


class TestObjectVersions:
    def test_upload_then_get_latest(self, moto_s3, versioned_bucket):
        moto_s3.upload_object(
            bucket=versioned_bucket,
            object_key="doc.txt",
            body=b"first",
            metadata={"origin": "demo"},
        )
        moto_s3.upload_object(
            bucket=versioned_bucket,
            object_key="doc.txt",
            body=b"second",
            metadata={"origin": "rerun"},
            content_type="text/plain",
        )

        latest = moto_s3.get_object(bucket=versioned_bucket, object_key="doc.txt")

        assert _read(latest) == b"second"
        assert latest["Metadata"] == {"origin": "rerun"}
        assert latest["ContentType"] == "text/plain"

    def test_two_uploads_produce_distinct_versions(self, moto_s3, versioned_bucket):
        first = moto_s3.upload_object(
            bucket=versioned_bucket, object_key="doc.txt", body=b"first"
        )
        second = moto_s3.upload_object(
            bucket=versioned_bucket, object_key="doc.txt", body=b"second"
        )

        assert first["VersionId"] != second["VersionId"]
        old = moto_s3.get_object(
            bucket=versioned_bucket,
            object_key="doc.txt",
            version_id=first["VersionId"],
        )
        new = moto_s3.get_object(
            bucket=versioned_bucket,
            object_key="doc.txt",
            version_id=second["VersionId"],
        )
        assert _read(old) == b"first"
        assert _read(new) == b"second"

    def test_delete_keeps_prior_versions(self, moto_s3, versioned_bucket):
        put = moto_s3.upload_object(
            bucket=versioned_bucket, object_key="doc.txt", body=b"kept"
        )

        deleted = moto_s3.delete_object(bucket=versioned_bucket, object_key="doc.txt")

        assert deleted["DeleteMarker"] is True
        with pytest.raises(ClientError) as exc_info:
            moto_s3.get_object(bucket=versioned_bucket, object_key="doc.txt")
        assert exc_info.value.response["Error"]["Code"] == "NoSuchKey"

        prior = moto_s3.get_object(
            bucket=versioned_bucket,
            object_key="doc.txt",
            version_id=put["VersionId"],
        )
        assert _read(prior) == b"kept"

    def test_removing_delete_marker_restores_object(self, moto_s3, versioned_bucket):
        moto_s3.upload_object(
            bucket=versioned_bucket, object_key="doc.txt", body=b"restored"
        )
        deleted = moto_s3.delete_object(bucket=versioned_bucket, object_key="doc.txt")

        moto_s3.delete_object_version(
            bucket=versioned_bucket,
            object_key="doc.txt",
            version_id=deleted["VersionId"],
        )

        latest = moto_s3.get_object(bucket=versioned_bucket, object_key="doc.txt")
        assert _read(latest) == b"restored"

    def test_delete_on_plain_bucket_removes_object(self, moto_s3, plain_bucket):
        moto_s3.upload_object(bucket=plain_bucket, object_key="doc.txt", body=b"x")

        deleted = moto_s3.delete_object(bucket=plain_bucket, object_key="doc.txt")

        assert not deleted.get("DeleteMarker")
        with pytest.raises(ClientError):
            moto_s3.get_object(bucket=plain_bucket, object_key="doc.txt")

    def test_upload_to_missing_bucket_raises(self, moto_s3):
        with pytest.raises(ClientError) as exc_info:
            moto_s3.upload_object(bucket="no-such-bucket", object_key="k", body=b"x")

        assert exc_info.value.response["Error"]["Code"] == "NoSuchBucket"
