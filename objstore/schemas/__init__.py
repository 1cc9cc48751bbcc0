"""Domain schemas for stored objects."""

from objstore.schemas.domain import Image, ImageEncodingError

__all__ = [
    "Image",
    "ImageEncodingError",
]
