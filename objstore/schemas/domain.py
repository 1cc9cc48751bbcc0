"""Domain models for stored images."""

from pydantic import BaseModel, Field

_CONTENT_TYPES = {
    "png": "image/png",
    "gif": "image/gif",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "webp": "image/webp",
    "svg": "image/svg+xml",
}


class ImageEncodingError(ValueError):
    """The image cannot be serialized to bytes."""

    pass


class Image(BaseModel):
    """An image that knows its own storage key and byte encoding."""

    name: str = Field(min_length=1)
    directory: str = ""
    format: str = "png"
    data: bytes = b""

    @property
    def full_name(self) -> str:
        """Storage key, e.g. ``emoji/party.png``."""
        filename = f"{self.name}.{self.format.lower()}"
        directory = self.directory.strip("/")
        return f"{directory}/{filename}" if directory else filename

    @property
    def content_type(self) -> str:
        return _CONTENT_TYPES.get(self.format.lower(), "application/octet-stream")

    def get_bytes(self) -> bytes:
        if not self.data:
            raise ImageEncodingError(f"image {self.full_name} has no data to encode")
        return bytes(self.data)
