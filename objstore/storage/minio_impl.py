"""MinIO-backed implementation of the storage interfaces."""

from __future__ import annotations

import io
import logging
import mimetypes
import os
from itertools import islice
from typing import Iterator

from minio import Minio
from minio.error import S3Error

from objstore.schemas.domain import Image
from objstore.storage.contracts import (
    ObjectInfo,
    ObjectNotFoundError,
    ObjectStorage,
    StorageError,
    StoragePermissionError,
    StoredObject,
)

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

NOT_FOUND_CODES = frozenset({"NoSuchKey", "NoSuchBucket", "NoSuchObject", "ResourceNotFound"})
PERMISSION_CODES = frozenset({"AccessDenied", "InvalidAccessKeyId", "SignatureDoesNotMatch"})


def _wrap_error(op: str, bucket: str | None, key: str | None, exc: Exception) -> StorageError:
    return StorageError(op=op, bucket=bucket, key=key, message=str(exc))


def _wrap_s3_error(op: str, bucket: str | None, key: str | None, exc: S3Error) -> StorageError:
    if exc.code in NOT_FOUND_CODES:
        return ObjectNotFoundError(op=op, bucket=bucket, key=key, message=str(exc))
    if exc.code in PERMISSION_CODES:
        return StoragePermissionError(op=op, bucket=bucket, key=key, message=str(exc))
    return _wrap_error(op, bucket, key, exc)


class S3Storage(ObjectStorage):
    """Object storage accessor for a single bucket, backed by the MinIO SDK."""

    def __init__(self, client: Minio, bucket_name: str, url_prefix: str):
        self._client = client
        self._bucket = bucket_name
        self._url_prefix = url_prefix
        logger.info("bucket_name=%s url_prefix=%s", bucket_name, url_prefix)

    @property
    def bucket_name(self) -> str:
        return self._bucket

    def get_object_url_prefix(self) -> str:
        return self._url_prefix

    def url_for(self, key: str) -> str:
        """Public URL of ``key`` under the configured prefix."""
        return f"{self._url_prefix}/{key.lstrip('/')}"

    # ------
    # Writes
    # ------
    def put(self, key: str, data: bytes, *, content_type: str | None = None) -> str:
        """Upload ``data`` under ``key``, replacing any existing object.

        Returns:
            Public URL of the stored object.
        """
        logger.debug("put bucket=%s key=%s size=%d", self._bucket, key, len(data))
        try:
            # MinIO requires a file-like object with read()
            self._client.put_object(
                bucket_name=self._bucket,
                object_name=key,
                data=io.BytesIO(data),
                length=len(data),
                content_type=content_type or DEFAULT_CONTENT_TYPE,
            )
        except S3Error as exc:
            raise _wrap_s3_error("put", self._bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("put", self._bucket, key, exc) from exc
        return self.url_for(key)

    def put_image(self, image: Image) -> str:
        """Serialize ``image`` and store it under its own full name.

        Raises:
            ImageEncodingError: If the image cannot produce bytes.
            StorageError: If the upload fails.
        """
        data = image.get_bytes()
        return self.put(image.full_name, data, content_type=image.content_type)

    def put_file(self, file_path: str | os.PathLike[str], key: str, *, content_type: str | None = None) -> str:
        """Stream a local file to ``key``.

        Raises:
            OSError: If the file cannot be opened; nothing is uploaded.
            StorageError: If the upload fails.
        """
        if content_type is None:
            content_type = mimetypes.guess_type(os.fspath(file_path))[0]
        with open(file_path, "rb") as fh:
            size = os.fstat(fh.fileno()).st_size
            logger.debug("put_file bucket=%s key=%s path=%s size=%d", self._bucket, key, file_path, size)
            try:
                self._client.put_object(
                    bucket_name=self._bucket,
                    object_name=key,
                    data=fh,
                    length=size,
                    content_type=content_type or DEFAULT_CONTENT_TYPE,
                )
            except S3Error as exc:
                raise _wrap_s3_error("put_file", self._bucket, key, exc) from exc
            except Exception as exc:
                raise _wrap_error("put_file", self._bucket, key, exc) from exc
        return self.url_for(key)

    # -------
    # Listing
    # -------
    def iter_by_prefix(self, prefix: str) -> Iterator[str]:
        """Lazily yield keys starting with ``prefix``, following pagination.

        Every call starts a new listing, so the sequence can be restarted.
        """
        logger.debug("list bucket=%s prefix=%s", self._bucket, prefix)
        try:
            for obj in self._client.list_objects(self._bucket, prefix=prefix, recursive=True):
                yield obj.object_name
        except S3Error as exc:
            raise _wrap_s3_error("list", self._bucket, prefix, exc) from exc
        except Exception as exc:
            raise _wrap_error("list", self._bucket, prefix, exc) from exc

    def find_by_prefix(self, prefix: str, *, limit: int | None = None) -> list[str]:
        """Return keys starting with ``prefix`` in listing order.

        All pages are read unless ``limit`` caps the result.
        """
        keys = self.iter_by_prefix(prefix)
        if limit is not None:
            keys = islice(keys, limit)
        return list(keys)

    # -----
    # Reads
    # -----
    def get(self, key: str) -> StoredObject:
        """Fetch the body stream and content length of ``key``.

        The caller must close the returned object.
        """
        logger.debug("get bucket=%s key=%s", self._bucket, key)
        try:
            response = self._client.get_object(self._bucket, key)
        except S3Error as exc:
            raise _wrap_s3_error("get", self._bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("get", self._bucket, key, exc) from exc

        headers = response.headers or {}
        try:
            length = int(headers["content-length"])
        except (KeyError, TypeError, ValueError) as exc:
            response.close()
            response.release_conn()
            raise StorageError(
                op="get", bucket=self._bucket, key=key, message="missing or invalid content-length header"
            ) from exc
        return StoredObject(body=response, content_length=length, content_type=headers.get("content-type"))

    def head(self, key: str) -> ObjectInfo:
        """Fetch metadata of ``key`` without transferring the body."""
        logger.debug("head bucket=%s key=%s", self._bucket, key)
        try:
            stat = self._client.stat_object(self._bucket, key)
        except S3Error as exc:
            raise _wrap_s3_error("head", self._bucket, key, exc) from exc
        except Exception as exc:
            raise _wrap_error("head", self._bucket, key, exc) from exc
        return ObjectInfo(
            key=stat.object_name or key,
            size=stat.size or 0,
            etag=stat.etag,
            last_modified=stat.last_modified,
            content_type=stat.content_type,
            metadata=dict(stat.metadata or {}),
        )

    def exists(self, key: str) -> bool:
        try:
            self.head(key)
        except ObjectNotFoundError:
            return False
        return True


__all__ = ["S3Storage", "DEFAULT_CONTENT_TYPE"]
