"""
Domain converters between stored documents and domain models.

All converters are pure functions with no side effects.

Examples:
    >>> from domain.converters import (
    ...     document_to_workout_record,
    ...     workout_record_to_document,
    ... )

    >>> record = document_to_workout_record("Leg Day", {"name": "Leg Day"})
    >>> doc = workout_record_to_document(record)
"""

from domain.converters.document_converters import (
    UNNAMED_WORKOUT,
    document_to_exercise_ref,
    document_to_tool_ref,
    document_to_workout_record,
    workout_record_to_document,
)

__all__ = [
    "document_to_workout_record",
    "workout_record_to_document",
    "document_to_exercise_ref",
    "document_to_tool_ref",
    "UNNAMED_WORKOUT",
]
