"""Shared storage accessor for application callers."""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from objstore.storage.minio_impl import S3Storage

_storage: "S3Storage | None" = None
_lock = threading.Lock()


def get_storage() -> "S3Storage":
    """Get or lazily initialize the storage singleton.

    Lazy initialization keeps configuration errors out of import time.
    Concurrent first callers share one build.
    """
    global _storage
    if _storage is None:
        with _lock:
            if _storage is None:
                from objstore.storage.factory import build_storage

                _storage = build_storage()
    return _storage


def reset_storage() -> None:
    global _storage
    with _lock:
        _storage = None


__all__ = ["get_storage", "reset_storage"]
