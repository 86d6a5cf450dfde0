"""
Collection-backed implementations of ExerciseCatalog and ToolCatalog.

Both read a whole collection through the record store and coerce each
document at the boundary.
"""
import logging
from typing import List

from application.ports import WorkoutRecordStore
from domain.converters import document_to_exercise_ref, document_to_tool_ref
from domain.models import ExerciseRef, ToolRef

logger = logging.getLogger(__name__)


class CollectionExerciseCatalog:
    """
    ExerciseCatalog backed by the exercises collection.

    Exercise documents carry a ``name`` that becomes the ref's title.
    """

    def __init__(self, store: WorkoutRecordStore, collection: str = "Exercises"):
        self._store = store
        self._collection = collection

    async def list_exercises(self) -> List[ExerciseRef]:
        documents = await self._store.list_all(self._collection)
        exercises = [
            document_to_exercise_ref(str(doc["id"]), doc)
            for doc in documents
            if doc.get("id")
        ]
        logger.info(f"Loaded {len(exercises)} exercises")
        return exercises


class CollectionToolCatalog:
    """ToolCatalog backed by the tools collection."""

    def __init__(self, store: WorkoutRecordStore, collection: str = "Tools"):
        self._store = store
        self._collection = collection

    async def list_tools(self) -> List[ToolRef]:
        documents = await self._store.list_all(self._collection)
        tools = [
            document_to_tool_ref(str(doc["id"]), doc)
            for doc in documents
            if doc.get("id")
        ]
        logger.info(f"Loaded {len(tools)} tools")
        return tools
