from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path

ENV_FILE = Path(".env")

ADDRESSING_STYLES: tuple[str, ...] = ("auto", "path", "virtual")
LOG_FORMATS: tuple[str, ...] = ("plain", "json")


def _load_env_file() -> None:
    if not ENV_FILE.exists():
        return
    for raw_line in ENV_FILE.read_text(encoding="utf-8").splitlines():
        line = raw_line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        key = key.strip()
        value = value.strip().strip('"').strip("'")
        if key and key not in os.environ:
            os.environ[key] = value


def _as_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    return value.lower() in {"1", "true", "t", "yes", "y", "on"}


def _first_env(*names: str) -> str | None:
    for name in names:
        value = os.environ.get(name)
        if value:
            return value
    return None


@dataclass
class Settings:
    AWS_ACCESS_KEY_ID: str | None = None
    AWS_SECRET_ACCESS_KEY: str | None = None
    AWS_REGION: str = "ap-south-1"
    S3_ENDPOINT_URL: str | None = None
    S3_ADDRESSING_STYLE: str = "auto"
    S3_USE_SSL: bool = True
    DEMO_BUCKET: str = "testbucket-1002"
    DEMO_OBJECT_KEY: str = "example/myimage"
    DEMO_FILE_PATH: str = "myimage.png"
    DEMO_CONTENT_TYPE: str = "image/png"
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "plain"

    def __post_init__(self) -> None:
        if not self.AWS_REGION or not self.AWS_REGION.strip():
            raise ValueError("AWS_REGION must be a non-empty region name.")
        self.S3_ADDRESSING_STYLE = self.S3_ADDRESSING_STYLE.strip().lower()
        if self.S3_ADDRESSING_STYLE not in ADDRESSING_STYLES:
            raise ValueError(
                f"S3_ADDRESSING_STYLE must be one of {', '.join(ADDRESSING_STYLES)}."
            )
        self.LOG_FORMAT = self.LOG_FORMAT.strip().lower()
        if self.LOG_FORMAT not in LOG_FORMATS:
            raise ValueError(f"LOG_FORMAT must be one of {', '.join(LOG_FORMATS)}.")

    @classmethod
    def from_environment(cls) -> "Settings":
        _load_env_file()
        return cls(
            AWS_ACCESS_KEY_ID=_first_env("AWS_ACCESS_KEY_ID", "aws_access_key_id"),
            AWS_SECRET_ACCESS_KEY=_first_env(
                "AWS_SECRET_ACCESS_KEY", "aws_secret_access_key"
            ),
            AWS_REGION=os.environ.get("AWS_REGION", cls.AWS_REGION),
            S3_ENDPOINT_URL=os.environ.get("S3_ENDPOINT_URL") or None,
            S3_ADDRESSING_STYLE=os.environ.get(
                "S3_ADDRESSING_STYLE", cls.S3_ADDRESSING_STYLE
            ),
            S3_USE_SSL=_as_bool(os.environ.get("S3_USE_SSL"), cls.S3_USE_SSL),
            DEMO_BUCKET=os.environ.get("DEMO_BUCKET", cls.DEMO_BUCKET),
            DEMO_OBJECT_KEY=os.environ.get("DEMO_OBJECT_KEY", cls.DEMO_OBJECT_KEY),
            DEMO_FILE_PATH=os.environ.get("DEMO_FILE_PATH", cls.DEMO_FILE_PATH),
            DEMO_CONTENT_TYPE=os.environ.get(
                "DEMO_CONTENT_TYPE", cls.DEMO_CONTENT_TYPE
            ),
            LOG_LEVEL=os.environ.get("LOG_LEVEL", cls.LOG_LEVEL).upper(),
            LOG_FORMAT=os.environ.get("LOG_FORMAT", cls.LOG_FORMAT),
        )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings.from_environment()
