"""Storage package: object storage abstraction."""

from objstore.storage.config import StorageConfig
from objstore.storage.contracts import (
    ObjectInfo,
    ObjectNotFoundError,
    ObjectStorage,
    StorageConfigError,
    StorageError,
    StoragePermissionError,
    StoredObject,
)
from objstore.storage.factory import build_storage
from objstore.storage.minio_impl import S3Storage

__all__ = [
    "ObjectInfo",
    "ObjectNotFoundError",
    "ObjectStorage",
    "S3Storage",
    "StorageConfig",
    "StorageConfigError",
    "StorageError",
    "StoragePermissionError",
    "StoredObject",
    "build_storage",
]
