"""
Fake Workout Record Store for testing.

This module provides an in-memory implementation of WorkoutRecordStore
for fast, isolated testing without database dependencies.
"""
import asyncio
import copy
from typing import Any, Dict, List, Optional, Set

from application.ports import RecordStoreError


class FakeWorkoutRecordStore:
    """
    In-memory fake implementation of WorkoutRecordStore for testing.

    Stores documents per collection in dicts keyed by document id. Supports
    seeding, failure injection and a gate to hold operations in flight.

    Usage:
        store = FakeWorkoutRecordStore()
        store.seed("Workouts", [{"id": "Leg Day", "name": "Leg Day", "pic": ""}])
        store.fail_delete_ids.add("Leg Day")
        docs = await store.list_all("Workouts")
    """

    def __init__(self):
        """Initialize with empty storage."""
        self._collections: Dict[str, Dict[str, Dict[str, Any]]] = {}
        self.fail_list = False
        self.fail_upsert = False
        self.fail_get_ids: Set[str] = set()
        self.fail_delete_ids: Set[str] = set()
        self.list_calls: List[str] = []
        self.upserts: List[Dict[str, Any]] = []
        self.deleted: List[str] = []
        # When set, every operation waits on it before touching storage
        self.gate: Optional[asyncio.Event] = None

    def reset(self) -> None:
        """Clear all stored documents, injected failures and call records."""
        self.__init__()

    def seed(self, collection: str, documents: List[Dict[str, Any]]) -> None:
        """
        Seed a collection with test data.

        Args:
            collection: Collection name
            documents: Document dicts. Must include 'id'.
        """
        docs = self._collections.setdefault(collection, {})
        for document in documents:
            docs[document["id"]] = copy.deepcopy(document)

    def get_all(self, collection: str) -> List[Dict[str, Any]]:
        """Get all stored documents of a collection (test helper)."""
        return [copy.deepcopy(d) for d in self._collections.get(collection, {}).values()]

    def get(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        """Get one stored document without failure injection (test helper)."""
        doc = self._collections.get(collection, {}).get(doc_id)
        return copy.deepcopy(doc) if doc is not None else None

    async def _wait(self) -> None:
        if self.gate is not None:
            await self.gate.wait()

    # =========================================================================
    # WorkoutRecordStore Protocol Methods
    # =========================================================================

    async def list_all(self, collection: str) -> List[Dict[str, Any]]:
        await self._wait()
        self.list_calls.append(collection)
        if self.fail_list:
            raise RecordStoreError("Simulated list failure", collection=collection)
        return self.get_all(collection)

    async def get_one(self, collection: str, doc_id: str) -> Optional[Dict[str, Any]]:
        await self._wait()
        if doc_id in self.fail_get_ids:
            raise RecordStoreError("Simulated read failure", collection=collection, doc_id=doc_id)
        return self.get(collection, doc_id)

    async def upsert(self, collection: str, doc_id: str, document: Dict[str, Any]) -> None:
        await self._wait()
        if self.fail_upsert:
            raise RecordStoreError("Simulated write failure", collection=collection, doc_id=doc_id)
        row = {**copy.deepcopy(document), "id": doc_id}
        self._collections.setdefault(collection, {})[doc_id] = row
        self.upserts.append(copy.deepcopy(row))

    async def delete(self, collection: str, doc_id: str) -> None:
        await self._wait()
        if doc_id in self.fail_delete_ids:
            raise RecordStoreError("Simulated delete failure", collection=collection, doc_id=doc_id)
        self._collections.get(collection, {}).pop(doc_id, None)
        self.deleted.append(doc_id)
