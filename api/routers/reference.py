"""
Reference data router.

Exercises and tools loaded by the editor when it was opened.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query

from api.deps import get_admin_session
from application.use_cases import WorkoutAdminSession
from domain.models import ExerciseRef, ToolRef

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/reference",
    tags=["Reference"],
)


@router.get("/exercises", response_model=List[ExerciseRef])
async def list_exercises(
    slot: Optional[int] = Query(
        None,
        ge=0,
        description="Only offer exercises not already chosen, keeping this slot's own choice",
    ),
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """List exercises, optionally as the candidate list for one slot."""
    if slot is None:
        return session.editor.available_exercises
    return session.editor.exercise_candidates(slot)


@router.get("/tools", response_model=List[ToolRef])
async def list_tools(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """List tools."""
    return session.editor.available_tools
