"""
Blob Store Interface (Port).

This module defines the abstract interface for the object storage holding
workout thumbnails. Objects are addressed by a path inside one bucket and
are publicly resolvable by URL once uploaded.
"""
from typing import Protocol


class BlobStoreError(Exception):
    """Raised when the blob store cannot complete an operation."""

    def __init__(self, message: str, *, reference: str = ""):
        super().__init__(message)
        self.message = message
        self.reference = reference


class BlobNotFoundError(BlobStoreError):
    """Raised when the referenced object does not exist."""


class BlobStore(Protocol):
    """
    Abstract interface for thumbnail storage.
    """

    async def upload(self, path_ref: str, base64_payload: str) -> None:
        """
        Upload an image, overwriting any object at the same path.

        Args:
            path_ref: Object path inside the bucket (e.g., "workout_image/Leg Day.png")
            base64_payload: Image as a ``data:<media type>;base64,<body>`` URL

        Raises:
            BlobStoreError: If the store rejects the payload or is unreachable
        """
        ...

    async def resolve_url(self, path_ref: str) -> str:
        """
        Resolve an object path to its public URL.

        Args:
            path_ref: Object path inside the bucket

        Returns:
            Publicly resolvable URL

        Raises:
            BlobStoreError: If the URL cannot be resolved
        """
        ...

    async def delete(self, url_or_ref: str) -> None:
        """
        Delete an object.

        Args:
            url_or_ref: Either the public URL returned by resolve_url() or an
                object path inside the bucket

        Raises:
            BlobNotFoundError: If no such object exists
            BlobStoreError: For any other failure
        """
        ...
