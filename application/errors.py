"""
Error taxonomy for the admin components.

Every error here is recovered at the component boundary and turned into a
notification. ``kind`` is the stable identifier reported to API clients.
"""

from typing import Optional


class AdminError(Exception):
    """Base class for errors surfaced to the admin."""

    kind = "AdminError"

    def __init__(self, message: str, *, workout_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.workout_id = workout_id


class InvalidInput(AdminError):
    """User supplied input was rejected (bad image, out of range slot, blank name)."""

    kind = "InvalidInput"


class UploadFailed(AdminError):
    """The blob store was unreachable or rejected the thumbnail."""

    kind = "UploadFailed"


class WriteFailed(AdminError):
    """The record store rejected a write or delete."""

    kind = "WriteFailed"


class FetchFailed(AdminError):
    """The record store could not be read."""

    kind = "FetchFailed"


class AlreadyGone(AdminError):
    """The record selected for deletion no longer exists."""

    kind = "AlreadyGone"


class ImageCleanupFailed(AdminError):
    """The record was deleted but its thumbnail could not be removed."""

    kind = "ImageCleanupFailed"
