"""Factory for building storage instances from environment configuration."""

from __future__ import annotations

from urllib.parse import urlparse

from minio import Minio

from objstore.core.config import Settings, get_settings
from objstore.storage.config import StorageConfig
from objstore.storage.minio_impl import S3Storage

AWS_DEFAULT_ENDPOINT = "https://s3.amazonaws.com"


def _normalize_endpoint(endpoint: str) -> tuple[str, bool]:
    """Extract host:port from endpoint URL and determine if secure (https).

    Returns:
        Tuple of (host:port, secure_flag)
    """
    if "://" not in endpoint:
        # Bare host[:port]; treat as https
        return endpoint.rstrip("/"), True
    parsed = urlparse(endpoint)
    secure = parsed.scheme == "https"
    host = parsed.netloc or parsed.path.rstrip("/")
    return host, secure


def build_client(config: StorageConfig) -> Minio:
    """Build a path-style MinIO client for the configured endpoint and region."""
    host, secure = _normalize_endpoint(config.endpoint or AWS_DEFAULT_ENDPOINT)
    client = Minio(
        endpoint=host,
        access_key=config.access_key or None,
        secret_key=config.secret_key or None,
        session_token=config.session_token or None,
        secure=secure,
        region=config.region or None,
    )
    client.disable_virtual_style_endpoint()
    return client


def build_storage(settings: Settings | None = None) -> S3Storage:
    """Build S3Storage from environment variables.

    Environment variables:
        S3_ENDPOINT: Full URL to an S3-compatible endpoint (e.g., http://localhost:9000)
        S3_URL_PREFIX: Public URL prefix for stored objects
        S3_BUCKET_NAME: Target bucket
        AWS_DEFAULT_REGION: Region, also used to derive the default URL prefix
        AWS_ACCESS_KEY_ID / AWS_SECRET_ACCESS_KEY / AWS_SESSION_TOKEN: Credentials

    Raises:
        StorageConfigError: If S3_BUCKET_NAME is missing.
    """
    config = StorageConfig.from_settings(settings or get_settings())
    return S3Storage(build_client(config), config.bucket_name, config.url_prefix)


__all__ = ["build_client", "build_storage"]
