"""
Read-only reference data shown in the workout editor.
"""

from pydantic import BaseModel, Field


class ExerciseRef(BaseModel):
    """An exercise that can be placed in a workout slot."""

    id: str
    title: str = Field(..., description="Title stored in a workout's exercise steps")


class ToolRef(BaseModel):
    """A piece of equipment a workout can require."""

    id: str
    name: str
