from __future__ import annotations

import pytest

from s3versioning.common.config import Settings, get_settings
from s3versioning.infra.storage.s3_client import S3StorageClient

TEST_REGION = "us-east-1"


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Keep host credentials and .env files out of the tests."""
    for name in (
        "AWS_ACCESS_KEY_ID",
        "AWS_SECRET_ACCESS_KEY",
        "aws_access_key_id",
        "aws_secret_access_key",
        "AWS_SESSION_TOKEN",
        "AWS_PROFILE",
        "AWS_REGION",
        "S3_ENDPOINT_URL",
        "S3_ADDRESSING_STYLE",
        "S3_USE_SSL",
        "DEMO_BUCKET",
        "DEMO_OBJECT_KEY",
        "DEMO_FILE_PATH",
        "DEMO_CONTENT_TYPE",
        "LOG_LEVEL",
        "LOG_FORMAT",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("AWS_DEFAULT_REGION", TEST_REGION)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()  # type: ignore[attr-defined]
    yield
    get_settings.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture
def settings() -> Settings:
    return Settings(
        AWS_ACCESS_KEY_ID="testing",
        AWS_SECRET_ACCESS_KEY="testing",
        AWS_REGION=TEST_REGION,
    )


@pytest.fixture
def moto_s3(settings):
    """S3StorageClient talking to moto's in-process S3."""
    from moto import mock_aws

    with mock_aws():
        yield S3StorageClient(settings=settings)


@pytest.fixture
def versioned_bucket(moto_s3) -> str:
    bucket = "versioned-bucket"
    moto_s3._client.create_bucket(Bucket=bucket)
    moto_s3._client.put_bucket_versioning(
        Bucket=bucket, VersioningConfiguration={"Status": "Enabled"}
    )
    return bucket


@pytest.fixture
def plain_bucket(moto_s3) -> str:
    bucket = "plain-bucket"
    moto_s3._client.create_bucket(Bucket=bucket)
    return bucket
