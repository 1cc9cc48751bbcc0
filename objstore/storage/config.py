"""Resolved storage configuration."""

from __future__ import annotations

from dataclasses import dataclass

from objstore.core.config import Settings
from objstore.storage.contracts import StorageConfigError

DEFAULT_URL_PREFIX = "https://s3-{region}.amazonaws.com/{bucket}"


@dataclass(frozen=True, slots=True)
class StorageConfig:
    """Everything needed to build a storage accessor for one bucket."""

    bucket_name: str
    url_prefix: str
    endpoint: str = ""
    region: str = ""
    access_key: str = ""
    secret_key: str = ""
    session_token: str = ""

    @classmethod
    def from_settings(cls, settings: Settings) -> StorageConfig:
        """Validate settings and fill in the derived URL prefix.

        Raises:
            StorageConfigError: If no bucket name is configured.
        """
        bucket = settings.S3_BUCKET_NAME.strip()
        if not bucket:
            raise StorageConfigError("S3_BUCKET_NAME is not set")

        region = settings.AWS_DEFAULT_REGION.strip()
        url_prefix = settings.S3_URL_PREFIX.strip().rstrip("/")
        if not url_prefix:
            url_prefix = DEFAULT_URL_PREFIX.format(region=region, bucket=bucket)

        return cls(
            bucket_name=bucket,
            url_prefix=url_prefix,
            endpoint=settings.S3_ENDPOINT.strip(),
            region=region,
            access_key=settings.AWS_ACCESS_KEY_ID,
            secret_key=settings.AWS_SECRET_ACCESS_KEY,
            session_token=settings.AWS_SESSION_TOKEN,
        )


__all__ = ["DEFAULT_URL_PREFIX", "StorageConfig"]
