"""
Domain layer for the workout catalog admin.

This package contains pure domain models and converters that are independent
of infrastructure concerns (database, storage, HTTP).
"""

from domain.models import (
    ExerciseRef,
    Level,
    Notification,
    Severity,
    ToolRef,
    WorkoutRecord,
)

__all__ = [
    "WorkoutRecord",
    "Level",
    "ExerciseRef",
    "ToolRef",
    "Notification",
    "Severity",
]
