"""Storage interfaces, result types and error types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Iterator, Mapping, Protocol, runtime_checkable

from objstore.schemas.domain import Image


class StorageError(Exception):
    """Wraps underlying storage exceptions with operation context.

    Used directly for remote failures that are not classified further.
    """

    def __init__(self, op: str, bucket: str | None, key: str | None, message: str):
        self.op = op
        self.bucket = bucket
        self.key = key
        self.message = message
        super().__init__(self.__str__())

    def __str__(self) -> str:
        bucket_repr = self.bucket or "<unknown>"
        key_repr = self.key or "<unknown>"
        return f"{self.op} failed for bucket={bucket_repr} key={key_repr}: {self.message}"


class ObjectNotFoundError(StorageError):
    """The bucket or key does not exist."""


class StoragePermissionError(StorageError):
    """Credentials were rejected or lack access to the resource."""


class StorageConfigError(ValueError):
    """Storage configuration is incomplete or malformed."""


@dataclass(frozen=True, slots=True)
class StoredObject:
    """Body stream and declared length of a fetched object.

    The caller owns ``body`` and must close it, either via ``close()`` or by
    using the object as a context manager.
    """

    body: Any
    content_length: int
    content_type: str | None = None

    def read(self, amt: int | None = None) -> bytes:
        return self.body.read(amt) if amt is not None else self.body.read()

    def close(self) -> None:
        self.body.close()
        release = getattr(self.body, "release_conn", None)
        if release is not None:
            release()

    def __enter__(self) -> StoredObject:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


@dataclass(frozen=True, slots=True)
class ObjectInfo:
    """Object metadata returned by a head request."""

    key: str
    size: int
    etag: str | None = None
    last_modified: datetime | None = None
    content_type: str | None = None
    metadata: Mapping[str, str] = field(default_factory=dict)


@runtime_checkable
class ObjectStorage(Protocol):
    """Contract for object storage accessors bound to one bucket."""

    def get_object_url_prefix(self) -> str:
        ...

    def url_for(self, key: str) -> str:
        ...

    def put(self, key: str, data: bytes, *, content_type: str | None = None) -> str:
        ...

    def put_image(self, image: Image) -> str:
        ...

    def put_file(self, file_path: str, key: str, *, content_type: str | None = None) -> str:
        ...

    def find_by_prefix(self, prefix: str, *, limit: int | None = None) -> list[str]:
        ...

    def iter_by_prefix(self, prefix: str) -> Iterator[str]:
        ...

    def get(self, key: str) -> StoredObject:
        ...

    def head(self, key: str) -> ObjectInfo:
        ...

    def exists(self, key: str) -> bool:
        ...


__all__ = [
    "StorageError",
    "ObjectNotFoundError",
    "StoragePermissionError",
    "StorageConfigError",
    "StoredObject",
    "ObjectInfo",
    "ObjectStorage",
]
