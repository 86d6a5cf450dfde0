"""
Pydantic models for the workout admin API.

Request bodies for the editor setters and response models that render the
state of the list controller, the editor and the notification queue.
"""

from typing import Dict, List, Literal, Optional, Union

from pydantic import BaseModel, Field

from application.use_cases import (
    BatchDeleteReport,
    LocalImage,
    PersistedImage,
    SaveWorkoutResult,
    WorkoutAdminSession,
    WorkoutListView,
)
from domain.models import Level, Notification, WorkoutRecord


# =============================================================================
# Requests
# =============================================================================


class OpenEditorRequest(BaseModel):
    """Open the editor blank (no id) or on an existing workout."""
    workout_id: Optional[str] = None


class SetNameRequest(BaseModel):
    name: str


class SetExerciseCountRequest(BaseModel):
    """Raw count as typed by the admin; invalid values clear all slots."""
    count: Union[int, str, None] = None


class SetExerciseRequest(BaseModel):
    title: str = ""


class ToggleLevelRequest(BaseModel):
    level: Level


class ToggleToolRequest(BaseModel):
    tool_id: str = Field(..., min_length=1)


class AttachImageRequest(BaseModel):
    """Thumbnail as a ``data:image/...;base64,...`` URL."""
    data_url: str


# =============================================================================
# Responses
# =============================================================================


class WorkoutListResponse(BaseModel):
    """One page of the filtered catalog.

    ``total`` is the number of workouts matching the filters, not the number
    of rows on this page.
    """
    rows: List[WorkoutRecord] = []
    total: int = 0
    page: int = 0
    page_size: int = 10
    page_size_options: List[int] = []
    name_filter: str = ""
    level_filter: str = "All"

    @classmethod
    def from_view(cls, view: WorkoutListView, session: WorkoutAdminSession) -> "WorkoutListResponse":
        filters = session.workouts.filters
        level = filters.level.value if isinstance(filters.level, Level) else filters.level
        return cls(
            rows=view.rows,
            total=view.total,
            page=view.page,
            page_size=view.page_size,
            page_size_options=session.workouts.page_size_options,
            name_filter=filters.name_substring,
            level_filter=level,
        )


class SelectionResponse(BaseModel):
    selected_ids: List[str] = []


class DeleteOutcomeResponse(BaseModel):
    workout_id: str
    status: str
    message: Optional[str] = None
    image_deleted: bool = False


class BatchDeleteResponse(BaseModel):
    success: bool
    rejected: bool = False
    outcomes: List[DeleteOutcomeResponse] = []
    deleted_ids: List[str] = []

    @classmethod
    def from_report(cls, report: BatchDeleteReport) -> "BatchDeleteResponse":
        return cls(
            success=report.success,
            rejected=report.rejected,
            outcomes=[
                DeleteOutcomeResponse(
                    workout_id=o.workout_id,
                    status=o.status.value,
                    message=o.message,
                    image_deleted=o.image_deleted,
                )
                for o in report.outcomes
            ],
            deleted_ids=report.deleted_ids,
        )


class PendingImageResponse(BaseModel):
    kind: Literal["local", "persisted"]
    media_type: Optional[str] = None
    size_bytes: Optional[int] = None
    url: Optional[str] = None


class EditorStateResponse(BaseModel):
    visibility: str
    mode: str
    name: str = ""
    exercise_count: int = 0
    exercise_steps: Dict[str, str] = {}
    levels: List[Level] = []
    tools: List[str] = []
    pending_image: Optional[PendingImageResponse] = None
    is_saving: bool = False

    @classmethod
    def from_session(cls, session: WorkoutAdminSession) -> "EditorStateResponse":
        editor = session.editor
        pending = editor.pending_image
        image = None
        if isinstance(pending, LocalImage):
            image = PendingImageResponse(
                kind="local",
                media_type=pending.media_type,
                size_bytes=len(pending.data),
            )
        elif isinstance(pending, PersistedImage):
            image = PendingImageResponse(kind="persisted", url=pending.url)

        return cls(
            visibility=session.editor_visibility.value,
            mode=editor.mode.value,
            name=editor.name,
            exercise_count=editor.exercise_count,
            exercise_steps=editor.exercise_steps,
            levels=editor.levels,
            tools=editor.tools,
            pending_image=image,
            is_saving=editor.is_saving,
        )


class SaveWorkoutResponse(BaseModel):
    success: bool
    rejected: bool = False
    workout: Optional[WorkoutRecord] = None
    error_kind: Optional[str] = None
    error: Optional[str] = None

    @classmethod
    def from_result(cls, result: SaveWorkoutResult) -> "SaveWorkoutResponse":
        return cls(
            success=result.success,
            rejected=result.rejected,
            workout=result.record,
            error_kind=result.error_kind,
            error=result.error,
        )


class NotificationResponse(BaseModel):
    id: int
    message: str
    severity: str

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        return cls(
            id=notification.id,
            message=notification.message,
            severity=notification.severity.value,
        )
