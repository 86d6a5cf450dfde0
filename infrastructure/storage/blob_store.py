"""
Supabase Storage implementation of BlobStore.

Thumbnails live in one public bucket. Uploads take base64 data URLs and
overwrite any object at the same path; deletes accept either an object path
or the public URL handed out by resolve_url().
"""
import base64
import binascii
import logging
from typing import Tuple
from urllib.parse import unquote, urlparse

from supabase import AsyncClient

from application.ports import BlobNotFoundError, BlobStoreError

logger = logging.getLogger(__name__)

_URL_MARKERS = ("/object/public/", "/object/sign/", "/object/")


def decode_data_url(data_url: str) -> Tuple[str, bytes]:
    """
    Split a ``data:<media type>;base64,<body>`` URL into (media type, bytes).

    Raises:
        BlobStoreError: If the payload is not a base64 data URL
    """
    header, sep, body = data_url.partition(",")
    if not header.startswith("data:") or not sep or ";base64" not in header:
        raise BlobStoreError("Payload is not a base64 data URL")
    media_type = header[len("data:"):].split(";")[0] or "application/octet-stream"
    try:
        return media_type, base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise BlobStoreError("Payload is not valid base64") from e


class SupabaseBlobStore:
    """
    Supabase Storage implementation of BlobStore protocol.

    The client is injected via constructor for testability.
    """

    def __init__(self, client: AsyncClient, bucket: str):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
            bucket: Public bucket holding the thumbnails
        """
        self._client = client
        self._bucket = bucket

    def _files(self):
        return self._client.storage.from_(self._bucket)

    def path_from_reference(self, url_or_ref: str) -> str:
        """
        Object path for a public URL of this bucket, or the input if it is already a path.

        Raises:
            BlobStoreError: If a URL does not point into this bucket
        """
        if not url_or_ref.startswith(("http://", "https://")):
            return url_or_ref.lstrip("/")

        path = unquote(urlparse(url_or_ref).path)
        for marker in _URL_MARKERS:
            prefix = f"{marker}{self._bucket}/"
            idx = path.find(prefix)
            if idx != -1:
                return path[idx + len(prefix):]
        raise BlobStoreError(
            f"URL does not reference bucket '{self._bucket}'",
            reference=url_or_ref,
        )

    async def upload(self, path_ref: str, base64_payload: str) -> None:
        media_type, data = decode_data_url(base64_payload)
        try:
            await self._files().upload(
                path_ref,
                data,
                file_options={"content-type": media_type, "upsert": "true"},
            )
        except Exception as e:
            logger.error(f"Failed to upload {self._bucket}/{path_ref}: {e}")
            raise BlobStoreError(f"Upload failed for {path_ref}", reference=path_ref) from e
        logger.info(f"Uploaded {len(data)} bytes to {self._bucket}/{path_ref}")

    async def resolve_url(self, path_ref: str) -> str:
        try:
            url = await self._files().get_public_url(path_ref)
        except Exception as e:
            logger.error(f"Failed to resolve URL for {self._bucket}/{path_ref}: {e}")
            raise BlobStoreError(f"Could not resolve URL for {path_ref}", reference=path_ref) from e
        # Supabase appends a bare "?" when no transform options are given
        return url.rstrip("?")

    async def delete(self, url_or_ref: str) -> None:
        path = self.path_from_reference(url_or_ref)
        try:
            removed = await self._files().remove([path])
        except Exception as e:
            logger.error(f"Failed to delete {self._bucket}/{path}: {e}")
            raise BlobStoreError(f"Delete failed for {path}", reference=url_or_ref) from e

        # Removing a missing object succeeds with an empty list
        if not removed:
            raise BlobNotFoundError(f"Object {path} not found", reference=url_or_ref)
        logger.info(f"Deleted {self._bucket}/{path}")
