"""
Thumbnail payloads attached to the workout editor.

A pending thumbnail is either a LocalImage (picked by the admin, not yet
uploaded) or a PersistedImage (already in the blob store, referenced by URL).
Local images travel as base64 data URLs, the format the blob store upload
accepts.
"""

import base64
import binascii
import io
from dataclasses import dataclass
from typing import Union

from PIL import Image

from application.errors import InvalidInput

_DATA_URL_PREFIX = "data:"
_BASE64_MARKER = ";base64"


@dataclass(frozen=True)
class LocalImage:
    """A validated image that has not been uploaded yet."""

    media_type: str
    data: bytes
    format: str

    @property
    def data_url(self) -> str:
        encoded = base64.b64encode(self.data).decode("ascii")
        return f"{_DATA_URL_PREFIX}{self.media_type}{_BASE64_MARKER},{encoded}"


@dataclass(frozen=True)
class PersistedImage:
    """An image already stored in the blob store."""

    url: str


PendingImage = Union[LocalImage, PersistedImage, None]


def _check_signature(data: bytes) -> str:
    """Return the image format if ``data`` starts with a known image header."""
    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
    except Exception as e:
        raise InvalidInput(f"Invalid image format. Please upload a valid image. ({e})") from e
    return (image_format or "").lower()


def image_from_bytes(media_type: str, data: bytes) -> LocalImage:
    """
    Validate raw image bytes with their declared media type.

    Raises:
        InvalidInput: If the media type is not image/* or the bytes are not an image
    """
    media_type = (media_type or "").strip().lower()
    if not media_type.startswith("image/"):
        raise InvalidInput("Invalid file type. Please upload an image.")
    if not data:
        raise InvalidInput("Invalid image format. Please upload a valid image.")
    image_format = _check_signature(data)
    return LocalImage(media_type=media_type, data=data, format=image_format)


def image_from_data_url(data_url: str) -> LocalImage:
    """
    Decode and validate a ``data:image/...;base64,...`` URL.

    Examples:
        >>> image_from_data_url("data:text/plain;base64,aGVsbG8=")
        Traceback (most recent call last):
        ...
        application.errors.InvalidInput: Invalid file type. Please upload an image.

    Raises:
        InvalidInput: If the URL is malformed, not an image type, or not image data
    """
    if not isinstance(data_url, str) or not data_url.startswith(_DATA_URL_PREFIX):
        raise InvalidInput("Invalid image format. Please upload a valid image.")

    header, sep, body = data_url.partition(",")
    if not sep:
        raise InvalidInput("Invalid image format. Please upload a valid image.")

    params = header[len(_DATA_URL_PREFIX):].split(";")
    media_type = params[0]
    if not media_type.strip().lower().startswith("image/"):
        raise InvalidInput("Invalid file type. Please upload an image.")
    if "base64" not in params[1:]:
        raise InvalidInput("Image payload must be base64 encoded.")

    try:
        data = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise InvalidInput("Image payload is not valid base64.") from e

    return image_from_bytes(media_type, data)
