"""
DeleteWorkouts use case.

Deletes a batch of workouts and their thumbnails. Each id runs its own
read -> record delete -> thumbnail delete sequence; all ids run concurrently
and the batch waits for every one of them. One id's failure never stops
another id.

Per-id outcomes:
- Deleted: record (and thumbnail, if any) removed; a missing thumbnail counts
  as already clean
- AlreadyGone: the record no longer existed, nothing attempted
- ImageCleanupFailed: record removed, thumbnail removal failed (not rolled back)
- FetchFailed: the record could not be read, nothing deleted
- WriteFailed: the record delete failed, thumbnail left alone
"""

import asyncio
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional

from application.errors import (
    AlreadyGone,
    FetchFailed,
    ImageCleanupFailed,
    WriteFailed,
)
from application.ports import (
    BlobNotFoundError,
    BlobStore,
    BlobStoreError,
    RecordStoreError,
    WorkoutRecordStore,
)

logger = logging.getLogger(__name__)


class DeleteStatus(str, Enum):
    """Tagged result of deleting one workout."""

    DELETED = "Deleted"
    ALREADY_GONE = AlreadyGone.kind
    IMAGE_CLEANUP_FAILED = ImageCleanupFailed.kind
    FETCH_FAILED = FetchFailed.kind
    WRITE_FAILED = WriteFailed.kind


@dataclass
class DeleteOutcome:
    """Result for a single workout id."""

    workout_id: str
    status: DeleteStatus
    message: Optional[str] = None
    image_deleted: bool = False

    @property
    def is_error(self) -> bool:
        return self.status is not DeleteStatus.DELETED

    @property
    def record_deleted(self) -> bool:
        return self.status in (DeleteStatus.DELETED, DeleteStatus.IMAGE_CLEANUP_FAILED)


@dataclass
class BatchDeleteReport:
    """Joined outcomes of a batch delete."""

    outcomes: List[DeleteOutcome] = field(default_factory=list)
    rejected: bool = False

    @property
    def errors(self) -> List[DeleteOutcome]:
        return [o for o in self.outcomes if o.is_error]

    @property
    def deleted_ids(self) -> List[str]:
        return [o.workout_id for o in self.outcomes if o.record_deleted]

    @property
    def success(self) -> bool:
        return not self.rejected and not self.errors

    def outcome_for(self, workout_id: str) -> Optional[DeleteOutcome]:
        return next((o for o in self.outcomes if o.workout_id == workout_id), None)


class DeleteWorkoutsUseCase:
    """
    Use case for deleting workouts together with their thumbnails.

    Usage:
        >>> use_case = DeleteWorkoutsUseCase(
        ...     record_store=record_store,
        ...     blob_store=blob_store,
        ...     collection="Workouts",
        ... )
        >>> report = await use_case.execute(["Leg Day", "Arm Day"])
        >>> [o.status for o in report.outcomes]
    """

    def __init__(
        self,
        record_store: WorkoutRecordStore,
        blob_store: BlobStore,
        *,
        collection: str = "Workouts",
    ) -> None:
        self._record_store = record_store
        self._blob_store = blob_store
        self._collection = collection

    async def execute(self, workout_ids: Iterable[str]) -> BatchDeleteReport:
        """
        Delete every id concurrently and join on all of them.

        Returns:
            BatchDeleteReport with one outcome per id, in input order
        """
        ids = list(dict.fromkeys(workout_ids))
        outcomes = await asyncio.gather(*(self._delete_one(wid) for wid in ids))
        return BatchDeleteReport(outcomes=list(outcomes))

    async def _delete_one(self, workout_id: str) -> DeleteOutcome:
        # Step 1: Read the record to learn its thumbnail
        try:
            document = await self._record_store.get_one(self._collection, workout_id)
        except RecordStoreError as e:
            logger.error(f"Error reading workout {workout_id}: {e}")
            return DeleteOutcome(
                workout_id,
                DeleteStatus.FETCH_FAILED,
                f"Could not read workout {workout_id}",
            )

        if document is None:
            logger.info(f"Workout with ID {workout_id} does not exist.")
            return DeleteOutcome(
                workout_id,
                DeleteStatus.ALREADY_GONE,
                f"Workout with ID {workout_id} does not exist.",
            )

        image_ref = document.get("pic")
        image_ref = image_ref if isinstance(image_ref, str) else ""

        # Step 2: Delete the record
        try:
            await self._record_store.delete(self._collection, workout_id)
        except RecordStoreError as e:
            logger.error(f"Error deleting workout {workout_id}: {e}")
            return DeleteOutcome(
                workout_id,
                DeleteStatus.WRITE_FAILED,
                f"Error deleting workout {workout_id}",
            )
        logger.info(f"Deleted workout {workout_id}")

        if not image_ref:
            return DeleteOutcome(workout_id, DeleteStatus.DELETED)

        # Step 3: Delete the thumbnail, only after the record is gone
        try:
            await self._blob_store.delete(image_ref)
        except BlobNotFoundError:
            logger.info(f"Image for workout {workout_id} not found")
            return DeleteOutcome(workout_id, DeleteStatus.DELETED)
        except BlobStoreError as e:
            logger.error(f"Error deleting image for workout {workout_id}: {e}")
            return DeleteOutcome(
                workout_id,
                DeleteStatus.IMAGE_CLEANUP_FAILED,
                f"Error deleting image for workout {workout_id}",
            )

        logger.info(f"Deleted image for workout {workout_id}")
        return DeleteOutcome(workout_id, DeleteStatus.DELETED, image_deleted=True)
