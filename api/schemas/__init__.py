"""
Pydantic schemas for API requests and responses.

Organized by feature/domain:
- admin: Workout list, editor and notification models
"""

from api.schemas.admin import (
    AttachImageRequest,
    BatchDeleteResponse,
    DeleteOutcomeResponse,
    EditorStateResponse,
    NotificationResponse,
    OpenEditorRequest,
    PendingImageResponse,
    SaveWorkoutResponse,
    SelectionResponse,
    SetExerciseCountRequest,
    SetExerciseRequest,
    SetNameRequest,
    ToggleLevelRequest,
    ToggleToolRequest,
    WorkoutListResponse,
)

__all__ = [
    "AttachImageRequest",
    "BatchDeleteResponse",
    "DeleteOutcomeResponse",
    "EditorStateResponse",
    "NotificationResponse",
    "OpenEditorRequest",
    "PendingImageResponse",
    "SaveWorkoutResponse",
    "SelectionResponse",
    "SetExerciseCountRequest",
    "SetExerciseRequest",
    "SetNameRequest",
    "ToggleLevelRequest",
    "ToggleToolRequest",
    "WorkoutListResponse",
]
