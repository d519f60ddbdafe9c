"""
Configuration for the gallery, read from environment variables.
"""

import os
from dataclasses import dataclass

ROOT_PREFIX = "photos/"


class GalleryConfigError(RuntimeError):
    """Raised when required gallery settings are missing."""


@dataclass(frozen=True)
class GallerySettings:
    region: str
    access_key: str
    secret_key: str
    bucket: str
    endpoint_url: str | None = None
    root_prefix: str = ROOT_PREFIX


def _require_env(name: str) -> str:
    value = os.getenv(name, "").strip()
    if not value:
        msg = f"{name} not set in environment"
        raise GalleryConfigError(msg)
    return value


def load_settings() -> GallerySettings:
    """
    Build the object store settings from AWS_S3_* environment variables.
    Raises GalleryConfigError naming the first missing variable.
    """
    endpoint_url = os.getenv("AWS_S3_ENDPOINT_URL", "").strip() or None
    return GallerySettings(
        region=_require_env("AWS_S3_REGION"),
        access_key=_require_env("AWS_S3_KEY"),
        secret_key=_require_env("AWS_S3_SECRET"),
        bucket=_require_env("AWS_S3_BUCKET"),
        endpoint_url=endpoint_url,
    )
