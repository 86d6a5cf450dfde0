"""
WorkoutAdminSession - one admin's list, editor and notifications wired together.

The session routes "open for edit" from the list into editor.load(record),
the editor's "catalog changed" signal into list.refresh(), and the editor's
close into the list's visibility state.
"""

import logging
from typing import Optional

from application.notifications import NotificationCenter
from application.ports import BlobStore, ExerciseCatalog, ToolCatalog, WorkoutRecordStore
from application.use_cases.workout_editor import WorkoutEditor
from application.use_cases.workout_list import (
    DEFAULT_PAGE_SIZE_OPTIONS,
    EditorVisibility,
    WorkoutListController,
)
from backend.settings import Settings

logger = logging.getLogger(__name__)


class WorkoutAdminSession:
    """
    Composition root for the admin components.

    Usage:
        >>> session = WorkoutAdminSession.from_settings(
        ...     settings,
        ...     record_store=record_store,
        ...     blob_store=blob_store,
        ... )
        >>> await session.workouts.refresh()
        >>> await session.open_editor_for_edit("Leg Day")
    """

    def __init__(
        self,
        record_store: WorkoutRecordStore,
        blob_store: BlobStore,
        *,
        exercise_catalog: Optional[ExerciseCatalog] = None,
        tool_catalog: Optional[ToolCatalog] = None,
        notifications: Optional[NotificationCenter] = None,
        collection: str = "Workouts",
        image_path_prefix: str = "workout_image",
        page_size: int = 10,
        page_size_options=DEFAULT_PAGE_SIZE_OPTIONS,
        close_delay_seconds: float = 2.0,
    ) -> None:
        self.notifications = notifications or NotificationCenter()
        self.workouts = WorkoutListController(
            record_store=record_store,
            blob_store=blob_store,
            notifications=self.notifications,
            collection=collection,
            page_size=page_size,
            page_size_options=page_size_options,
        )
        self.editor = WorkoutEditor(
            record_store=record_store,
            blob_store=blob_store,
            notifications=self.notifications,
            collection=collection,
            image_path_prefix=image_path_prefix,
            close_delay_seconds=close_delay_seconds,
            exercise_catalog=exercise_catalog,
            tool_catalog=tool_catalog,
            on_catalog_changed=self.workouts.refresh,
            on_close=self.workouts.mark_editor_closed,
        )

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        *,
        record_store: WorkoutRecordStore,
        blob_store: BlobStore,
        exercise_catalog: Optional[ExerciseCatalog] = None,
        tool_catalog: Optional[ToolCatalog] = None,
    ) -> "WorkoutAdminSession":
        return cls(
            record_store,
            blob_store,
            exercise_catalog=exercise_catalog,
            tool_catalog=tool_catalog,
            notifications=NotificationCenter(ttl_seconds=settings.notification_ttl_seconds),
            collection=settings.workouts_collection,
            image_path_prefix=settings.image_path_prefix,
            page_size=settings.default_page_size,
            page_size_options=settings.page_size_options_list,
            close_delay_seconds=settings.save_close_delay_seconds,
        )

    @property
    def editor_visibility(self) -> EditorVisibility:
        return self.workouts.editor_visibility

    async def open_editor_for_add(self) -> None:
        """Open a blank editor."""
        self.workouts.open_for_add()
        self.editor.load(None)
        await self.editor.load_reference_data()

    async def open_editor_for_edit(self, workout_id: str) -> bool:
        """
        Open the editor seeded from a record in the current snapshot.

        Returns:
            False if the id is not in the snapshot; nothing opens
        """
        record = self.workouts.open_for_edit(workout_id)
        if record is None:
            return False
        self.editor.load(record)
        await self.editor.load_reference_data()
        return True

    def close_editor(self) -> None:
        self.editor.close()
