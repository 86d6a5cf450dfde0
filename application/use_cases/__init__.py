"""
Application Use Cases for the workout catalog admin.

This package contains the admin components and the use cases they run.
Dependencies are injected via constructors for testability.

- WorkoutEditor: create/edit form state and the save workflow
- WorkoutListController: snapshot, filters, pagination, selection, deletes
- DeleteWorkoutsUseCase: concurrent batch delete with per-id outcomes
- WorkoutAdminSession: list + editor + notifications wired together

Usage:
    from application.use_cases import WorkoutAdminSession

    session = WorkoutAdminSession(record_store, blob_store)
    await session.workouts.refresh()
    view = session.workouts.derived_view()

    await session.open_editor_for_add()
    session.editor.set_name("Leg Day")
    result = await session.editor.save()
"""

from application.use_cases.admin_session import WorkoutAdminSession
from application.use_cases.delete_workouts import (
    BatchDeleteReport,
    DeleteOutcome,
    DeleteStatus,
    DeleteWorkoutsUseCase,
)
from application.use_cases.image_payload import (
    LocalImage,
    PendingImage,
    PersistedImage,
    image_from_bytes,
    image_from_data_url,
)
from application.use_cases.workout_editor import (
    EditorMode,
    EditorState,
    SaveWorkoutResult,
    WorkoutEditor,
)
from application.use_cases.workout_list import (
    EditorVisibility,
    WorkoutFilters,
    WorkoutListController,
    WorkoutListView,
    derive_view,
    matches_filters,
    parse_level_filter,
)

__all__ = [
    # Session
    "WorkoutAdminSession",
    # Editor
    "WorkoutEditor",
    "EditorMode",
    "EditorState",
    "SaveWorkoutResult",
    # Images
    "LocalImage",
    "PersistedImage",
    "PendingImage",
    "image_from_bytes",
    "image_from_data_url",
    # List
    "WorkoutListController",
    "WorkoutFilters",
    "WorkoutListView",
    "EditorVisibility",
    "derive_view",
    "matches_filters",
    "parse_level_filter",
    # Delete
    "DeleteWorkoutsUseCase",
    "BatchDeleteReport",
    "DeleteOutcome",
    "DeleteStatus",
]
