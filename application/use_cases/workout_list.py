"""
WorkoutListController - the catalog table.

Holds a point-in-time snapshot of every workout, filters and paginates it in
memory, tracks a multi-selection, runs batched deletes and decides when the
editor may open.

The snapshot is only replaced by refresh(); a failed refresh keeps the
previous snapshot (stale but available).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Optional, Sequence, Set, Union

from application.errors import FetchFailed, InvalidInput
from application.notifications import NotificationCenter
from application.ports import BlobStore, RecordStoreError, WorkoutRecordStore
from application.use_cases.delete_workouts import BatchDeleteReport, DeleteWorkoutsUseCase
from domain.converters import document_to_workout_record
from domain.models import ALL_LEVELS, Level, WorkoutRecord

logger = logging.getLogger(__name__)

LevelFilter = Union[Level, str]

DEFAULT_PAGE_SIZE_OPTIONS = (10, 25, 50)


class EditorVisibility(str, Enum):
    """Editor dialog state as seen from the list."""

    CLOSED = "closed"
    OPEN_FOR_ADD = "open_for_add"
    OPEN_FOR_EDIT = "open_for_edit"


@dataclass(frozen=True)
class WorkoutFilters:
    """Name substring (case-insensitive) and level filter."""

    name_substring: str = ""
    level: LevelFilter = ALL_LEVELS


@dataclass
class WorkoutListView:
    """One page of the filtered catalog."""

    rows: List[WorkoutRecord] = field(default_factory=list)
    total: int = 0
    page: int = 0
    page_size: int = 10


def parse_level_filter(value: Any) -> LevelFilter:
    """
    Accept "All", a Level, or a level's stored string.

    Raises:
        InvalidInput: For any other value
    """
    if value is None or value == ALL_LEVELS:
        return ALL_LEVELS
    if isinstance(value, Level):
        return value
    try:
        return Level(value)
    except ValueError:
        raise InvalidInput(
            f"Unknown level '{value}'. Expected 'All' or one of "
            f"{[level.value for level in Level]}"
        ) from None


def matches_filters(record: WorkoutRecord, filters: WorkoutFilters) -> bool:
    """Name contains the substring (case-insensitive) and the level matches."""
    if filters.name_substring.lower() not in record.name.lower():
        return False
    return filters.level == ALL_LEVELS or record.has_level(filters.level)


def derive_view(
    records: Sequence[WorkoutRecord],
    filters: WorkoutFilters,
    page: int,
    page_size: int,
) -> WorkoutListView:
    """
    Filter then slice one page. Pure function of its arguments.

    ``total`` is the filtered count and does not depend on the page.
    """
    matching = [r for r in records if matches_filters(r, filters)]
    start = page * page_size
    return WorkoutListView(
        rows=matching[start:start + page_size],
        total=len(matching),
        page=page,
        page_size=page_size,
    )


class WorkoutListController:
    """
    State and operations behind the workout table.

    Usage:
        >>> controller = WorkoutListController(
        ...     record_store=record_store,
        ...     blob_store=blob_store,
        ...     notifications=NotificationCenter(),
        ... )
        >>> await controller.refresh()
        >>> controller.set_filters(name_substring="day")
        >>> view = controller.derived_view()
    """

    def __init__(
        self,
        record_store: WorkoutRecordStore,
        blob_store: BlobStore,
        notifications: NotificationCenter,
        *,
        collection: str = "Workouts",
        page_size: int = 10,
        page_size_options: Sequence[int] = DEFAULT_PAGE_SIZE_OPTIONS,
    ) -> None:
        self._record_store = record_store
        self._notifications = notifications
        self._collection = collection
        self._delete_use_case = DeleteWorkoutsUseCase(
            record_store=record_store,
            blob_store=blob_store,
            collection=collection,
        )
        self._page_size_options = tuple(page_size_options)
        if page_size not in self._page_size_options:
            raise ValueError(f"page_size {page_size} not in {self._page_size_options}")

        self._all_records: List[WorkoutRecord] = []
        self._filters = WorkoutFilters()
        self._page = 0
        self._page_size = page_size
        self._selected: List[str] = []
        self._deleting = False
        self._editor_visibility = EditorVisibility.CLOSED
        self._editing_record: Optional[WorkoutRecord] = None

    # =========================================================================
    # Read-only views
    # =========================================================================

    @property
    def all_records(self) -> List[WorkoutRecord]:
        return list(self._all_records)

    @property
    def filters(self) -> WorkoutFilters:
        return self._filters

    @property
    def page(self) -> int:
        return self._page

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def page_size_options(self) -> List[int]:
        return list(self._page_size_options)

    @property
    def selected_ids(self) -> Set[str]:
        return set(self._selected)

    @property
    def selected_in_order(self) -> List[str]:
        """Selected ids in the order they were selected."""
        return list(self._selected)

    @property
    def is_deleting(self) -> bool:
        return self._deleting

    @property
    def editor_visibility(self) -> EditorVisibility:
        return self._editor_visibility

    @property
    def editing_record(self) -> Optional[WorkoutRecord]:
        return self._editing_record

    # =========================================================================
    # Snapshot
    # =========================================================================

    async def refresh(self) -> bool:
        """
        Replace the snapshot with every record in the store.

        Returns:
            True on success. On failure a notification is emitted and the
            previous snapshot is kept.
        """
        try:
            documents = await self._record_store.list_all(self._collection)
        except RecordStoreError as e:
            logger.error(f"Cannot fetch workouts ({FetchFailed.kind}): {e}")
            self._notifications.error("Cannot fetch workouts.")
            return False

        records = []
        for document in documents:
            doc_id = document.get("id")
            if not doc_id:
                logger.warning(f"Skipping workout document without id: {document!r}")
                continue
            records.append(document_to_workout_record(str(doc_id), document))

        self._all_records = records
        logger.info(f"Fetched {len(records)} workouts")
        return True

    # =========================================================================
    # Filtering & pagination
    # =========================================================================

    def set_filters(
        self,
        *,
        name_substring: Optional[str] = None,
        level: Any = None,
    ) -> WorkoutFilters:
        """
        Update one or both filters and go back to the first page.

        Raises:
            InvalidInput: If ``level`` is not "All" or a known level
        """
        new_level = self._filters.level if level is None else parse_level_filter(level)
        new_name = self._filters.name_substring if name_substring is None else name_substring
        self._filters = WorkoutFilters(name_substring=new_name, level=new_level)
        self._page = 0
        return self._filters

    def set_page(self, page: int) -> None:
        if isinstance(page, bool) or not isinstance(page, int) or page < 0:
            raise InvalidInput(f"Invalid page {page!r}")
        self._page = page

    def set_page_size(self, page_size: int) -> None:
        """Change rows per page and go back to the first page."""
        if page_size not in self._page_size_options:
            raise InvalidInput(
                f"Invalid page size {page_size!r}. Expected one of {list(self._page_size_options)}"
            )
        self._page_size = page_size
        self._page = 0

    def derived_view(self) -> WorkoutListView:
        return derive_view(self._all_records, self._filters, self._page, self._page_size)

    # =========================================================================
    # Selection
    # =========================================================================

    def toggle_select(self, workout_id: str) -> bool:
        """
        Add or remove an id from the selection.

        Returns:
            True if the id is selected afterwards
        """
        if workout_id in self._selected:
            self._selected.remove(workout_id)
            return False
        self._selected.append(workout_id)
        return True

    def clear_selection(self) -> None:
        self._selected = []

    # =========================================================================
    # Batched delete
    # =========================================================================

    async def delete_selected(self) -> BatchDeleteReport:
        """
        Delete every selected workout and its thumbnail.

        Emits one aggregated warning if any id failed, otherwise a success
        notification; then clears the selection and refreshes once.
        """
        if self._deleting:
            logger.warning("Delete already in progress, ignoring request")
            return BatchDeleteReport(rejected=True)

        self._deleting = True
        try:
            report = await self._delete_use_case.execute(self._selected)

            if report.errors:
                messages = ", ".join(o.message or o.status.value for o in report.errors)
                self._notifications.warning(f"Some errors occurred: {messages}")
            else:
                self._notifications.success("Deleted selected workouts.")

            self.clear_selection()
            await self.refresh()
            return report
        finally:
            self._deleting = False

    # =========================================================================
    # Editor visibility
    # =========================================================================

    def open_for_add(self) -> None:
        self._editing_record = None
        self._editor_visibility = EditorVisibility.OPEN_FOR_ADD

    def open_for_edit(self, workout_id: str) -> Optional[WorkoutRecord]:
        """
        Open the editor on a record from the current snapshot.

        Returns:
            The record, or None if the id is not in the snapshot (the editor
            stays as it was)
        """
        record = next((r for r in self._all_records if r.id == workout_id), None)
        if record is None:
            logger.error(f"Workout with ID: {workout_id} not found.")
            return None
        self._editing_record = record
        self._editor_visibility = EditorVisibility.OPEN_FOR_EDIT
        return record

    def mark_editor_closed(self) -> None:
        self._editing_record = None
        self._editor_visibility = EditorVisibility.CLOSED
