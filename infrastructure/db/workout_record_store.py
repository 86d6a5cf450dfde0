"""
Supabase implementation of WorkoutRecordStore.

Each collection is a table whose primary key column ``id`` holds the
document id; the remaining columns are the document fields. The async
Supabase client is injected so the event loop is never blocked on I/O.
"""
import logging
from typing import Any, Dict, List, Optional

from supabase import AsyncClient

from application.ports import RecordStoreError

logger = logging.getLogger(__name__)


def _log_permission_hint(error: Exception) -> None:
    error_msg = str(error)
    if "PGRST" in error_msg or "permission" in error_msg.lower() or "row-level security" in error_msg.lower():
        logger.error("RLS/Permissions error: Consider using SUPABASE_SERVICE_ROLE_KEY instead of SUPABASE_ANON_KEY for the admin API")


class SupabaseWorkoutRecordStore:
    """
    Supabase implementation of WorkoutRecordStore protocol.

    All Supabase query logic for workout documents is encapsulated here.
    Failures are logged and re-raised as RecordStoreError.
    """

    def __init__(self, client: AsyncClient):
        """
        Initialize with Supabase client.

        Args:
            client: Async Supabase client instance (injected, not global)
        """
        self._client = client

    async def list_all(self, collection: str) -> List[Dict[str, Any]]:
        """Fetch every document in the collection."""
        try:
            result = await self._client.table(collection).select("*").execute()
        except Exception as e:
            logger.error(f"Failed to list {collection}: {e}")
            _log_permission_hint(e)
            raise RecordStoreError(f"Could not fetch {collection}", collection=collection) from e
        return list(result.data or [])

    async def get_one(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Fetch one document, None if it does not exist."""
        try:
            result = await self._client.table(collection).select("*").eq("id", doc_id).limit(1).execute()
        except Exception as e:
            logger.error(f"Failed to get {collection}/{doc_id}: {e}")
            _log_permission_hint(e)
            raise RecordStoreError(
                f"Could not read {doc_id}", collection=collection, doc_id=doc_id
            ) from e
        if result.data and len(result.data) > 0:
            return result.data[0]
        return None

    async def upsert(self, collection: str, doc_id: str, document: Dict[str, Any]) -> None:
        """Create or fully overwrite the document keyed by doc_id."""
        row = {**document, "id": doc_id}
        try:
            await self._client.table(collection).upsert(row, on_conflict="id").execute()
        except Exception as e:
            logger.error(f"Failed to save {collection}/{doc_id}: {e}")
            _log_permission_hint(e)
            raise RecordStoreError(
                f"Could not save {doc_id}", collection=collection, doc_id=doc_id
            ) from e
        logger.info(f"Upserted {collection}/{doc_id}")

    async def delete(self, collection: str, doc_id: str) -> None:
        """Delete the document keyed by doc_id."""
        try:
            logger.info(f"Attempting to delete {collection}/{doc_id}")
            result = await self._client.table(collection).delete().eq("id", doc_id).execute()
        except Exception as e:
            logger.error(f"Failed to delete {collection}/{doc_id}: {e}")
            _log_permission_hint(e)
            raise RecordStoreError(
                f"Could not delete {doc_id}", collection=collection, doc_id=doc_id
            ) from e

        deleted_count = len(result.data) if result.data else 0
        if deleted_count == 0:
            logger.warning(f"No document found with id {doc_id} in {collection} (0 rows deleted)")
