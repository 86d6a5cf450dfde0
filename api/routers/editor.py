"""
Editor router for adding and editing a workout.

This router contains endpoints for:
- /editor - Current editor state
- /editor/open, /editor/close - Editor visibility
- /editor/name, /editor/exercise-count, /editor/exercises/{index} - Form fields
- /editor/levels/toggle, /editor/tools/toggle - Set toggles
- /editor/image - Attach a thumbnail (base64 data URL)
- /editor/save - Upload the thumbnail, then upsert the workout

Field setters answer 409 while the editor is closed.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_admin_session
from api.schemas import (
    AttachImageRequest,
    EditorStateResponse,
    OpenEditorRequest,
    SaveWorkoutResponse,
    SetExerciseCountRequest,
    SetExerciseRequest,
    SetNameRequest,
    ToggleLevelRequest,
    ToggleToolRequest,
)
from application.errors import InvalidInput
from application.use_cases import EditorVisibility, WorkoutAdminSession

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/editor",
    tags=["Editor"],
)


def _require_open(session: WorkoutAdminSession) -> None:
    if session.editor_visibility is EditorVisibility.CLOSED:
        raise HTTPException(status_code=409, detail="Editor is not open")


@router.get("", response_model=EditorStateResponse)
async def get_editor(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Get the editor form state."""
    return EditorStateResponse.from_session(session)


@router.post("/open", response_model=EditorStateResponse)
async def open_editor(
    request: OpenEditorRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """
    Open the editor.

    Without ``workout_id`` the form is blank (add). With it, the workout is
    looked up in the current snapshot; an unknown id answers 404 and nothing
    opens.
    """
    if request.workout_id is None:
        await session.open_editor_for_add()
    elif not await session.open_editor_for_edit(request.workout_id):
        raise HTTPException(
            status_code=404,
            detail=f"Workout with ID: {request.workout_id} not found.",
        )
    return EditorStateResponse.from_session(session)


@router.post("/close", response_model=EditorStateResponse)
async def close_editor(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Discard the form and close the editor."""
    session.close_editor()
    return EditorStateResponse.from_session(session)


@router.put("/name", response_model=EditorStateResponse)
async def set_name(
    request: SetNameRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    _require_open(session)
    session.editor.set_name(request.name)
    return EditorStateResponse.from_session(session)


@router.put("/exercise-count", response_model=EditorStateResponse)
async def set_exercise_count(
    request: SetExerciseCountRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Resize the exercise slots. Invalid counts clear every slot."""
    _require_open(session)
    session.editor.set_exercise_count(request.count)
    return EditorStateResponse.from_session(session)


@router.put("/exercises/{index}", response_model=EditorStateResponse)
async def set_exercise(
    index: int,
    request: SetExerciseRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    _require_open(session)
    try:
        session.editor.set_exercise_at(index, request.title)
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=e.message)
    return EditorStateResponse.from_session(session)


@router.post("/levels/toggle", response_model=EditorStateResponse)
async def toggle_level(
    request: ToggleLevelRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    _require_open(session)
    session.editor.toggle_level(request.level)
    return EditorStateResponse.from_session(session)


@router.post("/tools/toggle", response_model=EditorStateResponse)
async def toggle_tool(
    request: ToggleToolRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    _require_open(session)
    session.editor.toggle_tool(request.tool_id)
    return EditorStateResponse.from_session(session)


@router.put("/image", response_model=EditorStateResponse)
async def attach_image(
    request: AttachImageRequest,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Attach a thumbnail. Non-image payloads answer 422 and keep the old one."""
    _require_open(session)
    try:
        session.editor.attach_image(request.data_url)
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=e.message)
    return EditorStateResponse.from_session(session)


@router.post("/save", response_model=SaveWorkoutResponse)
async def save(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """
    Save the workout.

    Failures are reported in the body (``error_kind``) and as a
    notification; the form is left as it was so the save can be retried.
    """
    _require_open(session)
    result = await session.editor.save()
    return SaveWorkoutResponse.from_result(result)
