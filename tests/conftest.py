"""Pytest configuration and fixtures."""

from unittest.mock import MagicMock

import pytest

from objstore import deps
from objstore.storage.minio_impl import S3Storage
from tests.fakes import FakeMinio

SETTINGS_ENV = (
    "S3_ENDPOINT",
    "S3_URL_PREFIX",
    "S3_BUCKET_NAME",
    "AWS_DEFAULT_REGION",
    "AWS_ACCESS_KEY_ID",
    "AWS_SECRET_ACCESS_KEY",
    "AWS_SESSION_TOKEN",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_storage_env(monkeypatch):
    """Keep host environment out of settings and reset the shared accessor."""
    for name in SETTINGS_ENV:
        monkeypatch.delenv(name, raising=False)
    deps.reset_storage()
    yield
    deps.reset_storage()


@pytest.fixture
def fake_minio():
    return FakeMinio()


@pytest.fixture
def fake_storage(fake_minio):
    """Accessor over the in-memory bucket ``test-bucket``."""
    return S3Storage(fake_minio, "test-bucket", "https://s3-us-east-1.amazonaws.com/test-bucket")


@pytest.fixture
def mock_storage():
    """Create a mock storage accessor."""
    storage = MagicMock()
    storage.put = MagicMock(return_value="https://example.com/bucket/key")
    storage.find_by_prefix = MagicMock(return_value=[])
    return storage
