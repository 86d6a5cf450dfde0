"""
Infrastructure Database Layer.

This package provides Supabase-backed implementations of the store interfaces
defined in application.ports. These implementations are injected into the
admin components for clean separation of concerns and testability.

Usage:
    from supabase import acreate_client
    from infrastructure.db import (
        SupabaseWorkoutRecordStore,
        CollectionExerciseCatalog,
        CollectionToolCatalog,
    )

    client = await acreate_client(SUPABASE_URL, SUPABASE_KEY)
    record_store = SupabaseWorkoutRecordStore(client)
    exercises = CollectionExerciseCatalog(record_store, "Exercises")
    tools = CollectionToolCatalog(record_store, "Tools")
"""

from infrastructure.db.workout_record_store import SupabaseWorkoutRecordStore
from infrastructure.db.reference_data import (
    CollectionExerciseCatalog,
    CollectionToolCatalog,
)

__all__ = [
    # Workout documents
    "SupabaseWorkoutRecordStore",

    # Reference data
    "CollectionExerciseCatalog",
    "CollectionToolCatalog",
]
