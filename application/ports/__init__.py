"""
Store Interfaces (Ports) for the workout catalog admin.

This package defines abstract interfaces that decouple the admin components
from infrastructure (document database, object storage). Implementations are
provided in the infrastructure layer.

Architecture follows the Ports & Adapters (Hexagonal) pattern:
- Ports: Abstract interfaces defined here (what the components need)
- Adapters: Concrete implementations in infrastructure/ (how it's provided)

Usage:
    from application.ports import WorkoutRecordStore, BlobStore

    class WorkoutEditor:
        def __init__(self, record_store: WorkoutRecordStore, blob_store: BlobStore):
            self._record_store = record_store
            self._blob_store = blob_store
"""

# Workout documents
from application.ports.workout_record_store import (
    RecordStoreError,
    WorkoutRecordStore,
)

# Thumbnail storage
from application.ports.blob_store import (
    BlobNotFoundError,
    BlobStore,
    BlobStoreError,
)

# Reference data
from application.ports.reference_data import ExerciseCatalog, ToolCatalog

__all__ = [
    # Record store
    "WorkoutRecordStore",
    "RecordStoreError",
    # Blob store
    "BlobStore",
    "BlobStoreError",
    "BlobNotFoundError",
    # Reference data
    "ExerciseCatalog",
    "ToolCatalog",
]
