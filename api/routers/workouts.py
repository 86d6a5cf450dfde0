"""
Workouts router for the catalog table.

This router contains endpoints for:
- /workouts - Filtered, paginated view of the catalog snapshot
- /workouts/refresh - Refetch the snapshot from the record store
- /workouts/selection - Read or clear the multi-selection
- /workouts/{workout_id}/select - Toggle one workout in the selection
- /workouts/delete-selected - Delete every selected workout and its thumbnail

All handlers are async so the shared admin session is only ever touched from
the event loop.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from api.deps import get_admin_session
from api.schemas import BatchDeleteResponse, SelectionResponse, WorkoutListResponse
from application.errors import InvalidInput
from application.use_cases import WorkoutAdminSession

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/workouts",
    tags=["Workouts"],
)


@router.get("", response_model=WorkoutListResponse)
async def list_workouts(
    name: Optional[str] = Query(None, description="Case-insensitive name substring"),
    level: Optional[str] = Query(None, description="'All' or a level value"),
    page: Optional[int] = Query(None, ge=0),
    page_size: Optional[int] = Query(None, gt=0),
    refresh: bool = Query(False, description="Refetch the snapshot first"),
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """
    Get one page of the filtered catalog.

    Changing a filter or the page size goes back to the first page; an
    explicit ``page`` is applied last.
    """
    controller = session.workouts
    if refresh:
        await controller.refresh()

    try:
        current = controller.filters
        level_changed = level is not None and level != current.level
        if (name is not None and name != current.name_substring) or level_changed:
            controller.set_filters(name_substring=name, level=level)
        if page_size is not None and page_size != controller.page_size:
            controller.set_page_size(page_size)
        if page is not None:
            controller.set_page(page)
    except InvalidInput as e:
        raise HTTPException(status_code=422, detail=e.message)

    return WorkoutListResponse.from_view(controller.derived_view(), session)


@router.post("/refresh")
async def refresh_workouts(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """
    Refetch every workout.

    A failed fetch keeps the previous snapshot and queues a notification.
    """
    success = await session.workouts.refresh()
    return {"success": success, "count": len(session.workouts.all_records)}


@router.get("/selection", response_model=SelectionResponse)
async def get_selection(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Get the selected workout ids in selection order."""
    return SelectionResponse(selected_ids=session.workouts.selected_in_order)


@router.delete("/selection", response_model=SelectionResponse)
async def clear_selection(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Clear the selection."""
    session.workouts.clear_selection()
    return SelectionResponse(selected_ids=[])


@router.post("/delete-selected", response_model=BatchDeleteResponse)
async def delete_selected(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """
    Delete every selected workout and its thumbnail.

    Per-workout failures are reported in ``outcomes``; the selection is
    cleared and the snapshot refreshed regardless. A request made while a
    delete is still running is answered with ``rejected: true``.
    """
    report = await session.workouts.delete_selected()
    return BatchDeleteResponse.from_report(report)


@router.post("/{workout_id}/select")
async def toggle_select(
    workout_id: str,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Toggle one workout in the selection."""
    selected = session.workouts.toggle_select(workout_id)
    return {
        "workout_id": workout_id,
        "selected": selected,
        "selected_ids": session.workouts.selected_in_order,
    }
