"""
Workout Record Store Interface (Port).

This module defines the abstract interface for the document collection that
holds one document per workout. Implementations may use Supabase, in-memory
storage, or other backends.
"""
from typing import Any, Dict, List, Optional, Protocol


class RecordStoreError(Exception):
    """Raised when the record store cannot complete an operation."""

    def __init__(self, message: str, *, collection: Optional[str] = None, doc_id: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.collection = collection
        self.doc_id = doc_id


class WorkoutRecordStore(Protocol):
    """
    Abstract interface for a keyed document collection.

    Documents are loosely typed field maps; callers coerce them into domain
    models (see domain.converters). Every method is a coroutine because each
    call crosses the network.
    """

    async def list_all(self, collection: str) -> List[Dict[str, Any]]:
        """
        Fetch every document in a collection.

        Args:
            collection: Collection name (e.g., "Workouts")

        Returns:
            List of documents. Each includes its document id under "id".

        Raises:
            RecordStoreError: If the collection cannot be read
        """
        ...

    async def get_one(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """
        Fetch a single document.

        Args:
            collection: Collection name
            doc_id: Document id

        Returns:
            The document (including "id"), or None if it does not exist

        Raises:
            RecordStoreError: If the read fails for any other reason
        """
        ...

    async def upsert(self, collection: str, doc_id: str, document: Dict[str, Any]) -> None:
        """
        Create or fully overwrite a document.

        Args:
            collection: Collection name
            doc_id: Document id
            document: Complete document body (without "id")

        Raises:
            RecordStoreError: If the write fails
        """
        ...

    async def delete(self, collection: str, doc_id: str) -> None:
        """
        Delete a document. Deleting a missing document is not an error.

        Args:
            collection: Collection name
            doc_id: Document id

        Raises:
            RecordStoreError: If the delete fails
        """
        ...
