"""
WorkoutEditor - create/edit form state for a single workout.

Owns the form state (name, ordered exercise slots, levels, tools, pending
thumbnail) and the save workflow:

1. Upload a newly attached thumbnail and resolve its public URL
2. Build the complete WorkoutRecord from the form state
3. Upsert it into the record store keyed by name
4. Notify, signal that the catalog changed, then close after a short delay

Every failure is turned into a notification; save() never raises.
"""

import asyncio
import copy
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Awaitable, Callable, Dict, List, Optional

from application.errors import AdminError, InvalidInput, UploadFailed, WriteFailed
from application.notifications import NotificationCenter
from application.ports import (
    BlobStore,
    BlobStoreError,
    ExerciseCatalog,
    RecordStoreError,
    ToolCatalog,
    WorkoutRecordStore,
)
from application.use_cases.image_payload import (
    LocalImage,
    PendingImage,
    PersistedImage,
    image_from_data_url,
)
from domain.converters import workout_record_to_document
from domain.models import ExerciseRef, Level, ToolRef, WorkoutRecord, resize_exercise_steps

logger = logging.getLogger(__name__)


class EditorMode(str, Enum):
    """Whether the editor creates a new workout or edits a loaded one."""

    ADD = "add"
    EDIT = "edit"


@dataclass
class EditorState:
    """Form state of the editor. Replaced wholesale on load/reset."""

    mode: EditorMode = EditorMode.ADD
    name: str = ""
    exercise_steps: Dict[str, str] = field(default_factory=dict)
    levels: List[Level] = field(default_factory=list)
    tools: List[str] = field(default_factory=list)
    pending_image: PendingImage = None
    prior_image_ref: str = ""

    @property
    def exercise_count(self) -> int:
        return len(self.exercise_steps)


@dataclass
class SaveWorkoutResult:
    """Result of a WorkoutEditor.save() call."""

    success: bool
    record: Optional[WorkoutRecord] = None
    error_kind: Optional[str] = None
    error: Optional[str] = None
    rejected: bool = False

    @classmethod
    def failed(cls, error: AdminError) -> "SaveWorkoutResult":
        return cls(success=False, error_kind=error.kind, error=error.message)


def _parse_count(value: Any) -> Optional[int]:
    """Non-negative integer from an int or a decimal-digit string, else None."""
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value if value >= 0 else None
    if isinstance(value, str):
        text = value.strip()
        if text.isascii() and text.isdigit():
            return int(text)
    return None


class WorkoutEditor:
    """
    Form state machine for adding or editing one workout.

    Dependencies are injected via constructor for testability.

    Usage:
        >>> editor = WorkoutEditor(
        ...     record_store=record_store,
        ...     blob_store=blob_store,
        ...     notifications=NotificationCenter(),
        ...     collection="Workouts",
        ... )
        >>> editor.load(None)
        >>> editor.set_name("Leg Day")
        >>> editor.set_exercise_count(2)
        >>> editor.set_exercise_at(0, "Squat")
        >>> result = await editor.save()
    """

    def __init__(
        self,
        record_store: WorkoutRecordStore,
        blob_store: BlobStore,
        notifications: NotificationCenter,
        *,
        collection: str = "Workouts",
        image_path_prefix: str = "workout_image",
        close_delay_seconds: float = 2.0,
        exercise_catalog: Optional[ExerciseCatalog] = None,
        tool_catalog: Optional[ToolCatalog] = None,
        on_catalog_changed: Optional[Callable[[], Awaitable[Any]]] = None,
        on_close: Optional[Callable[[], None]] = None,
    ) -> None:
        self._record_store = record_store
        self._blob_store = blob_store
        self._notifications = notifications
        self._collection = collection
        self._image_path_prefix = image_path_prefix.rstrip("/")
        self._close_delay = close_delay_seconds
        self._exercise_catalog = exercise_catalog
        self._tool_catalog = tool_catalog
        self.on_catalog_changed = on_catalog_changed
        self.on_close = on_close

        self._state = EditorState()
        self._saving = False
        self._close_task: Optional[asyncio.Task] = None
        # Bumped whenever the form is replaced; a save only closes the form it started on
        self._generation = 0
        self._available_exercises: List[ExerciseRef] = []
        self._available_tools: List[ToolRef] = []

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def mode(self) -> EditorMode:
        return self._state.mode

    @property
    def name(self) -> str:
        return self._state.name

    @property
    def exercise_steps(self) -> Dict[str, str]:
        return dict(self._state.exercise_steps)

    @property
    def exercise_count(self) -> int:
        return self._state.exercise_count

    @property
    def levels(self) -> List[Level]:
        return list(self._state.levels)

    @property
    def tools(self) -> List[str]:
        return list(self._state.tools)

    @property
    def pending_image(self) -> PendingImage:
        return self._state.pending_image

    @property
    def is_saving(self) -> bool:
        return self._saving

    @property
    def available_exercises(self) -> List[ExerciseRef]:
        return list(self._available_exercises)

    @property
    def available_tools(self) -> List[ToolRef]:
        return list(self._available_tools)

    @property
    def pending_close(self) -> Optional[asyncio.Task]:
        """Delayed close scheduled by a successful save, if still outstanding."""
        return self._close_task

    # =========================================================================
    # Mount / load
    # =========================================================================

    async def load_reference_data(self) -> None:
        """
        Fetch the exercise and tool catalogs once for this mount.

        Failures are logged and leave the corresponding list empty.
        """
        if self._exercise_catalog is not None:
            try:
                self._available_exercises = await self._exercise_catalog.list_exercises()
            except RecordStoreError as e:
                logger.error(f"Error fetching exercises: {e}")
                self._available_exercises = []
        if self._tool_catalog is not None:
            try:
                self._available_tools = await self._tool_catalog.list_tools()
            except RecordStoreError as e:
                logger.error(f"Error fetching tools: {e}")
                self._available_tools = []

    def load(self, record: Optional[WorkoutRecord]) -> None:
        """
        Seed the form from ``record`` (edit mode) or reset it (add mode).

        Safe to call repeatedly as the target record changes. Cancels a
        delayed close left over from a previous save.
        """
        self._cancel_pending_close()
        self._generation += 1
        if record is None:
            self._state = EditorState()
            return

        self._state = EditorState(
            mode=EditorMode.EDIT,
            name=record.name,
            exercise_steps=dict(record.exercise_steps),
            levels=list(record.levels),
            tools=list(record.tools),
            pending_image=PersistedImage(record.image_ref) if record.image_ref else None,
            prior_image_ref=record.image_ref,
        )

    def reset(self) -> None:
        """Clear all form state back to add mode."""
        self._generation += 1
        self._state = EditorState()

    def close(self) -> None:
        """Reset the form and signal the owner that the editor closed."""
        self._cancel_pending_close()
        self.reset()
        if self.on_close is not None:
            self.on_close()

    # =========================================================================
    # Field setters
    # =========================================================================

    def set_name(self, name: str) -> None:
        self._state.name = name

    def set_exercise_count(self, value: Any) -> int:
        """
        Resize the exercise slots.

        A non-negative integer keeps entries below min(old, new) and pads new
        slots with "". Anything else clears all slots.

        Returns:
            The resulting slot count
        """
        count = _parse_count(value)
        if count is None:
            self._state.exercise_steps = {}
            return 0
        self._state.exercise_steps = resize_exercise_steps(self._state.exercise_steps, count)
        return count

    def set_exercise_at(self, index: Any, title: str) -> None:
        """
        Overwrite the exercise title in one slot.

        Raises:
            InvalidInput: If ``index`` is not an existing slot
        """
        key = str(index)
        if key not in self._state.exercise_steps:
            raise InvalidInput(
                f"Exercise slot {index} does not exist "
                f"(workout has {self._state.exercise_count} slots)"
            )
        self._state.exercise_steps[key] = title or ""

    def exercise_candidates(self, index: Any) -> List[ExerciseRef]:
        """
        Exercises offered for one slot.

        The slot's current title comes first, followed by every exercise not
        already chosen in any slot. This is advisory only; set_exercise_at()
        does not enforce it.
        """
        current = self._state.exercise_steps.get(str(index), "")
        chosen = set(self._state.exercise_steps.values())
        candidates: List[ExerciseRef] = []
        if current:
            match = next((e for e in self._available_exercises if e.title == current), None)
            candidates.append(match or ExerciseRef(id=current, title=current))
        candidates.extend(e for e in self._available_exercises if e.title not in chosen)
        return candidates

    def toggle_level(self, level: Level) -> None:
        levels = self._state.levels
        if level in levels:
            levels.remove(level)
        else:
            levels.append(level)

    def set_levels(self, levels: List[Level]) -> None:
        self._state.levels = list(dict.fromkeys(levels))

    def toggle_tool(self, tool_id: str) -> None:
        tools = self._state.tools
        if tool_id in tools:
            tools.remove(tool_id)
        else:
            tools.append(tool_id)

    def set_tools(self, tool_ids: List[str]) -> None:
        self._state.tools = list(dict.fromkeys(tool_ids))

    def attach_image(self, payload: str) -> LocalImage:
        """
        Attach a thumbnail given as a base64 data URL.

        Raises:
            InvalidInput: If the payload is not an image; pending_image is untouched
        """
        try:
            image = image_from_data_url(payload)
        except InvalidInput as e:
            self._notifications.error(e.message)
            raise
        self._state.pending_image = image
        return image

    # =========================================================================
    # Save
    # =========================================================================

    def image_path_for(self, name: str) -> str:
        """Deterministic blob path for a workout's thumbnail."""
        return f"{self._image_path_prefix}/{name}.png"

    async def save(self) -> SaveWorkoutResult:
        """
        Persist the current form state.

        Returns:
            SaveWorkoutResult; ``rejected`` is set when a save is already running
        """
        if self._saving:
            logger.warning("Save already in progress, ignoring request")
            return SaveWorkoutResult(
                success=False,
                error="Save already in progress",
                rejected=True,
            )

        self._saving = True
        try:
            return await self._save()
        finally:
            self._saving = False

    async def _save(self) -> SaveWorkoutResult:
        # The form may be closed or reloaded while the upload or upsert is pending
        state = copy.deepcopy(self._state)
        generation = self._generation
        name = state.name
        if not name or not name.strip():
            error = InvalidInput("Workout name is required")
            self._notifications.error(error.message)
            return SaveWorkoutResult.failed(error)

        # Step 1: Determine the thumbnail URL
        try:
            image_ref = await self._resolve_image_ref(state)
        except UploadFailed as e:
            self._notifications.error("Image upload failed")
            return SaveWorkoutResult.failed(e)

        # Step 2: Build the complete record
        record = WorkoutRecord(
            id=name,
            name=name,
            exercise_steps=state.exercise_steps,
            levels=state.levels,
            tools=state.tools,
            image_ref=image_ref,
        )

        # Step 3: Upsert keyed by name
        try:
            await self._record_store.upsert(
                self._collection,
                record.id,
                workout_record_to_document(record),
            )
        except RecordStoreError as e:
            logger.error(f"Error saving workout '{name}': {e}")
            error = WriteFailed(f"Failed to save workout: {e.message}", workout_id=record.id)
            self._notifications.error("Failed to save workout")
            return SaveWorkoutResult.failed(error)

        # Step 4: Notify, signal and close after the display delay
        logger.info(f"Workout saved: {record.id}")
        self._notifications.success("Workout saved successfully")
        if self.on_catalog_changed is not None:
            await self.on_catalog_changed()
        if self._generation == generation:
            self._schedule_close()
        else:
            logger.info(f"Editor form replaced while saving '{name}', leaving it open")

        return SaveWorkoutResult(success=True, record=record)

    async def _resolve_image_ref(self, state: EditorState) -> str:
        name = state.name
        pending = state.pending_image
        if isinstance(pending, LocalImage):
            path = self.image_path_for(name)
            try:
                await self._blob_store.upload(path, pending.data_url)
                url = await self._blob_store.resolve_url(path)
            except BlobStoreError as e:
                logger.error(f"Error uploading image for workout '{name}': {e}")
                raise UploadFailed(f"Image upload failed: {e.message}", workout_id=name) from e
            logger.info(f"Uploaded image for workout '{name}' to {path}")
            return url

        if state.mode is EditorMode.EDIT:
            return state.prior_image_ref
        return ""

    def _schedule_close(self) -> None:
        self._cancel_pending_close()
        self._close_task = asyncio.get_running_loop().create_task(self._close_after_delay())

    async def _close_after_delay(self) -> None:
        await asyncio.sleep(self._close_delay)
        self._close_task = None
        self.reset()
        if self.on_close is not None:
            self.on_close()

    def _cancel_pending_close(self) -> None:
        if self._close_task is not None and not self._close_task.done():
            self._close_task.cancel()
        self._close_task = None
