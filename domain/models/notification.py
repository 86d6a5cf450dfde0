"""
Notification value object for transient user-facing status messages.
"""

from enum import Enum

from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Severity of a notification, mirrors the alert colours of the admin UI."""

    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


class Notification(BaseModel):
    """
    A single queued status message.

    ``created_at`` is a monotonic timestamp used for auto-dismissal, not a
    wall clock time.
    """

    id: int
    message: str
    severity: Severity
    created_at: float = Field(..., description="Monotonic clock reading at push time")
