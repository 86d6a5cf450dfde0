"""
Notifications router.

Transient status messages queued by the list and the editor. Messages expire
on their own; clients may also dismiss them early.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException

from api.deps import get_admin_session
from api.schemas import NotificationResponse
from application.use_cases import WorkoutAdminSession

router = APIRouter(
    prefix="/notifications",
    tags=["Notifications"],
)


@router.get("", response_model=List[NotificationResponse])
async def list_notifications(
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    """Visible notifications, oldest first."""
    return [
        NotificationResponse.from_notification(n)
        for n in session.notifications.active()
    ]


@router.delete("/{notification_id}")
async def dismiss_notification(
    notification_id: int,
    session: WorkoutAdminSession = Depends(get_admin_session),
):
    if not session.notifications.dismiss(notification_id):
        raise HTTPException(status_code=404, detail="Notification not found")
    return {"success": True}
