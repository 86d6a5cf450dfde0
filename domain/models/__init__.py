"""
Domain models for the workout catalog admin.

This package contains pure domain models that are independent of
infrastructure concerns (database, storage, HTTP).

- WorkoutRecord: a workout routine in the catalog
- Level: difficulty/goal tags a workout carries
- ExerciseRef / ToolRef: read-only reference data for the editor
- Notification: transient status message shown to the admin

Usage:
    >>> from domain.models import WorkoutRecord, Level

    >>> record = WorkoutRecord(
    ...     id="Leg Day",
    ...     name="Leg Day",
    ...     exercise_steps={"0": "Squat"},
    ...     levels=[Level.WEIGHT_LOSS],
    ... )
"""

from domain.models.notification import Notification, Severity
from domain.models.reference import ExerciseRef, ToolRef
from domain.models.workout_record import (
    ALL_LEVELS,
    Level,
    WorkoutRecord,
    dense_keys,
    resize_exercise_steps,
)

__all__ = [
    # Main entities
    "WorkoutRecord",
    "ExerciseRef",
    "ToolRef",
    "Notification",
    # Enums
    "Level",
    "Severity",
    # Helpers
    "ALL_LEVELS",
    "dense_keys",
    "resize_exercise_steps",
]
