"""
Converters: stored document <-> domain WorkoutRecord.

Documents coming back from the record store are loosely typed field maps.
Everything is coerced into the strict WorkoutRecord shape here, immediately
on read, so component logic never sees an unvalidated document.

Document schema (Workouts collection, keyed by document id):
- name: Display name
- exercise_list: Map of positional key ("0", "1", ...) -> exercise title
- level: Array of level strings ("Weight Loss", "Increase Fitness", ...)
- tool: Array of tool ids
- pic: Public thumbnail URL ("" when absent)
"""

from typing import Any, Dict, List, Mapping

from domain.models import ExerciseRef, Level, ToolRef, WorkoutRecord

UNNAMED_WORKOUT = "Unnamed Workout"

_LEVEL_VALUES = {level.value: level for level in Level}


def _position(key: Any) -> tuple:
    """Sort key putting numeric positions first, in numeric order."""
    text = str(key)
    if text.isdigit():
        return (0, int(text), "")
    return (1, 0, text)


def _parse_exercise_list(value: Any) -> Dict[str, str]:
    """Coerce an exercise_list field into a dense positional map."""
    if isinstance(value, Mapping):
        ordered = [value[key] for key in sorted(value.keys(), key=_position)]
    elif isinstance(value, (list, tuple)):
        ordered = list(value)
    else:
        return {}
    return {
        str(i): title if isinstance(title, str) else ""
        for i, title in enumerate(ordered)
    }


def _parse_levels(value: Any) -> List[Level]:
    """Keep recognized level strings, silently dropping anything else."""
    if not isinstance(value, (list, tuple, set)):
        return []
    result: List[Level] = []
    for item in value:
        level = _LEVEL_VALUES.get(item) if isinstance(item, str) else None
        if level is not None and level not in result:
            result.append(level)
    return result


def _parse_tools(value: Any) -> List[str]:
    if not isinstance(value, (list, tuple, set)):
        return []
    result: List[str] = []
    for item in value:
        if isinstance(item, str) and item and item not in result:
            result.append(item)
    return result


def document_to_workout_record(doc_id: str, document: Mapping[str, Any]) -> WorkoutRecord:
    """
    Convert a stored document to a WorkoutRecord.

    Missing fields get defaults and unrecognized level values are dropped.

    Examples:
        >>> record = document_to_workout_record(
        ...     "Leg Day",
        ...     {"name": "Leg Day", "level": ["Weight Loss", "Bogus"]},
        ... )
        >>> record.levels
        [<Level.WEIGHT_LOSS: 'Weight Loss'>]
        >>> record.exercise_steps
        {}
    """
    name = document.get("name")
    if not isinstance(name, str) or not name.strip():
        name = UNNAMED_WORKOUT

    pic = document.get("pic")

    return WorkoutRecord(
        id=doc_id,
        name=name,
        exercise_steps=_parse_exercise_list(document.get("exercise_list")),
        levels=_parse_levels(document.get("level")),
        tools=_parse_tools(document.get("tool")),
        image_ref=pic if isinstance(pic, str) else "",
    )


def workout_record_to_document(record: WorkoutRecord) -> Dict[str, Any]:
    """
    Convert a WorkoutRecord to the stored document shape.

    The document id is not part of the document body; callers pass it to the
    store separately.

    Examples:
        >>> from domain.models import WorkoutRecord
        >>> doc = workout_record_to_document(
        ...     WorkoutRecord(id="Arm Day", name="Arm Day")
        ... )
        >>> doc["pic"]
        ''
    """
    return {
        "name": record.name,
        "exercise_list": dict(record.exercise_steps),
        "level": [level.value for level in record.levels],
        "pic": record.image_ref,
        "tool": list(record.tools),
    }


def document_to_exercise_ref(doc_id: str, document: Mapping[str, Any]) -> ExerciseRef:
    """Exercises are stored with a ``name`` field that the editor shows as title."""
    title = document.get("name") or document.get("title") or ""
    return ExerciseRef(id=doc_id, title=str(title))


def document_to_tool_ref(doc_id: str, document: Mapping[str, Any]) -> ToolRef:
    return ToolRef(id=doc_id, name=str(document.get("name") or doc_id))
