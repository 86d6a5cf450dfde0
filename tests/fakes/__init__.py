"""
Fake Store Implementations for Testing.

This package provides in-memory fake implementations of the store interfaces
for fast, isolated testing. No database or external dependencies required.

Features:
- All fakes implement the same Protocol interfaces as real implementations
- Supports seeding with test data
- Supports failure injection per operation
- Factory functions for common test scenarios

Usage:
    from tests.fakes import FakeWorkoutRecordStore, create_record_store

    # Direct instantiation
    store = FakeWorkoutRecordStore()
    store.seed("Workouts", [{"id": "Leg Day", "name": "Leg Day"}])

    # Factory function with pre-populated data
    store = create_record_store(num_workouts=5)
"""
from typing import Any, Dict, List, Optional

from tests.fakes.blob_store import FakeBlobStore
from tests.fakes.record_store import FakeWorkoutRecordStore
from tests.fakes.reference_data import FakeExerciseCatalog, FakeToolCatalog


class FakeClock:
    """Manually advanced monotonic clock for the notification center."""

    def __init__(self, start: float = 1000.0):
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


# =============================================================================
# Factory Functions
# =============================================================================


def workout_document(
    name: str,
    *,
    exercises: Optional[List[str]] = None,
    levels: Optional[List[str]] = None,
    tools: Optional[List[str]] = None,
    pic: str = "",
) -> Dict[str, Any]:
    """Build a stored workout document keyed by its name."""
    return {
        "id": name,
        "name": name,
        "exercise_list": {str(i): title for i, title in enumerate(exercises or [])},
        "level": list(levels or []),
        "tool": list(tools or []),
        "pic": pic,
    }


def create_record_store(
    *,
    collection: str = "Workouts",
    num_workouts: int = 0,
) -> FakeWorkoutRecordStore:
    """
    Create a FakeWorkoutRecordStore with optional pre-populated workouts.

    Args:
        collection: Collection to seed
        num_workouts: Number of workouts named "Workout 1".."Workout N"

    Returns:
        Configured FakeWorkoutRecordStore
    """
    store = FakeWorkoutRecordStore()
    if num_workouts > 0:
        store.seed(
            collection,
            [workout_document(f"Workout {i + 1}") for i in range(num_workouts)],
        )
    return store


__all__ = [
    # Fake classes
    "FakeWorkoutRecordStore",
    "FakeBlobStore",
    "FakeExerciseCatalog",
    "FakeToolCatalog",
    "FakeClock",
    # Factory functions
    "workout_document",
    "create_record_store",
]
