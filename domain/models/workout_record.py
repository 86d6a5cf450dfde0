"""
WorkoutRecord - the persisted catalog entity.

A workout record is written whole by the editor (no patch semantics) and
deleted by the list controller. Its identity is the workout name at the time
it was first saved.
"""

from enum import Enum
from typing import Dict, List

from pydantic import BaseModel, Field, field_validator


class Level(str, Enum):
    """
    Difficulty/goal levels a workout can be tagged with.

    The values are the exact strings stored in the document collection.
    """

    WEIGHT_LOSS = "Weight Loss"
    INCREASE_FITNESS = "Increase Fitness"
    FAT_LOSS_AND_TONING = "Fat Loss & Toning"


ALL_LEVELS = "All"


def dense_keys(count: int) -> List[str]:
    """Positional keys "0".."count-1"."""
    return [str(i) for i in range(count)]


def resize_exercise_steps(steps: Dict[str, str], count: int) -> Dict[str, str]:
    """
    Resize an ordered exercise map to exactly ``count`` entries.

    Entries at positions below ``min(len(steps), count)`` are kept, new
    positions are filled with empty strings.

    Examples:
        >>> resize_exercise_steps({"0": "Squat", "1": "Lunge"}, 3)
        {'0': 'Squat', '1': 'Lunge', '2': ''}
        >>> resize_exercise_steps({"0": "Squat", "1": "Lunge"}, 1)
        {'0': 'Squat'}
    """
    if count < 0:
        raise ValueError("count must be non-negative")
    return {key: steps.get(key, "") for key in dense_keys(count)}


def _unique(values: List) -> List:
    seen = set()
    result = []
    for value in values:
        if value not in seen:
            seen.add(value)
            result.append(value)
    return result


class WorkoutRecord(BaseModel):
    """
    A workout routine in the catalog.

    Examples:
        >>> record = WorkoutRecord(
        ...     id="Leg Day",
        ...     name="Leg Day",
        ...     exercise_steps={"0": "Squat", "1": "Lunge"},
        ...     levels=[Level.WEIGHT_LOSS],
        ...     tools=["dumbbell"],
        ... )
        >>> record.exercise_count
        2
    """

    id: str = Field(..., min_length=1, description="Document id (the name at creation)")
    name: str = Field(..., min_length=1, description="Display name")
    exercise_steps: Dict[str, str] = Field(
        default_factory=dict,
        description="Dense positional map of exercise titles",
    )
    levels: List[Level] = Field(default_factory=list, description="Levels, no duplicates")
    tools: List[str] = Field(default_factory=list, description="Tool ids, no duplicates")
    image_ref: str = Field(default="", description="Thumbnail URL, empty when absent")

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("Workout name must not be blank")
        return v

    @field_validator("exercise_steps")
    @classmethod
    def validate_exercise_steps(cls, v: Dict[str, str]) -> Dict[str, str]:
        """Keys must be exactly "0".."n-1" with no gaps."""
        expected = dense_keys(len(v))
        if sorted(v.keys(), key=lambda k: (len(k), k)) != expected:
            raise ValueError(
                f"Exercise steps must use dense positional keys, got {list(v.keys())}"
            )
        # Normalize ordering so iteration follows position
        return {key: v[key] for key in expected}

    @field_validator("levels", "tools")
    @classmethod
    def deduplicate(cls, v: List) -> List:
        return _unique(v)

    @property
    def exercise_count(self) -> int:
        return len(self.exercise_steps)

    @property
    def ordered_exercises(self) -> List[str]:
        """Exercise titles in positional order."""
        return list(self.exercise_steps.values())

    def has_level(self, level: Level) -> bool:
        return level in self.levels
