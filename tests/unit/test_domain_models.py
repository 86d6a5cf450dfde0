"""
Unit tests for domain models.

Tests for:
- WorkoutRecord validation (dense exercise keys, blank names, de-duplication)
- resize_exercise_steps
- Level values
"""

import pytest
from pydantic import ValidationError

from domain.models import (
    ALL_LEVELS,
    Level,
    WorkoutRecord,
    dense_keys,
    resize_exercise_steps,
)


@pytest.mark.unit
class TestLevel:
    def test_stored_values(self):
        assert [level.value for level in Level] == [
            "Weight Loss",
            "Increase Fitness",
            "Fat Loss & Toning",
        ]

    def test_all_is_not_a_level(self):
        with pytest.raises(ValueError):
            Level(ALL_LEVELS)


@pytest.mark.unit
class TestResizeExerciseSteps:
    def test_grow_pads_with_empty_titles(self):
        assert resize_exercise_steps({"0": "Squat"}, 3) == {"0": "Squat", "1": "", "2": ""}

    def test_shrink_drops_trailing_slots(self):
        steps = {"0": "Squat", "1": "Lunge", "2": "Plank"}
        assert resize_exercise_steps(steps, 1) == {"0": "Squat"}

    def test_zero_clears(self):
        assert resize_exercise_steps({"0": "Squat"}, 0) == {}

    def test_negative_count_rejected(self):
        with pytest.raises(ValueError):
            resize_exercise_steps({}, -1)

    @pytest.mark.parametrize("old_count,new_count", [(0, 4), (4, 2), (3, 3), (5, 0), (2, 7)])
    def test_keeps_prefix_and_has_exact_keys(self, old_count, new_count):
        steps = {str(i): f"Exercise {i}" for i in range(old_count)}
        resized = resize_exercise_steps(steps, new_count)

        assert list(resized.keys()) == dense_keys(new_count)
        for i in range(new_count):
            expected = f"Exercise {i}" if i < old_count else ""
            assert resized[str(i)] == expected


@pytest.mark.unit
class TestWorkoutRecord:
    def test_minimal_record(self):
        record = WorkoutRecord(id="Leg Day", name="Leg Day")
        assert record.exercise_steps == {}
        assert record.levels == []
        assert record.tools == []
        assert record.image_ref == ""
        assert record.exercise_count == 0

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError):
            WorkoutRecord(id="x", name="   ")

    def test_gapped_exercise_keys_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            WorkoutRecord(id="x", name="x", exercise_steps={"0": "Squat", "2": "Lunge"})
        assert "dense positional keys" in str(exc_info.value)

    def test_exercise_steps_ordered_by_position(self):
        steps = {str(i): f"E{i}" for i in reversed(range(12))}
        record = WorkoutRecord(id="x", name="x", exercise_steps=steps)
        assert list(record.exercise_steps.keys()) == dense_keys(12)
        assert record.ordered_exercises == [f"E{i}" for i in range(12)]

    def test_levels_and_tools_deduplicated(self):
        record = WorkoutRecord(
            id="x",
            name="x",
            levels=[Level.WEIGHT_LOSS, Level.WEIGHT_LOSS, Level.INCREASE_FITNESS],
            tools=["mat", "mat", "dumbbell"],
        )
        assert record.levels == [Level.WEIGHT_LOSS, Level.INCREASE_FITNESS]
        assert record.tools == ["mat", "dumbbell"]

    def test_levels_accept_stored_strings(self):
        record = WorkoutRecord(id="x", name="x", levels=["Fat Loss & Toning"])
        assert record.has_level(Level.FAT_LOSS_AND_TONING)
        assert not record.has_level(Level.WEIGHT_LOSS)
