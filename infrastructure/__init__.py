"""
Infrastructure Layer for the workout catalog admin.

This package contains concrete implementations of the store interfaces:
- db/: Supabase document collections (workouts, exercises, tools)
- storage/: Supabase Storage bucket for workout thumbnails
"""

# Re-export implementations for convenient access
from infrastructure.db import (
    SupabaseWorkoutRecordStore,
    CollectionExerciseCatalog,
    CollectionToolCatalog,
)
from infrastructure.storage import SupabaseBlobStore

__all__ = [
    "SupabaseWorkoutRecordStore",
    "CollectionExerciseCatalog",
    "CollectionToolCatalog",
    "SupabaseBlobStore",
]
