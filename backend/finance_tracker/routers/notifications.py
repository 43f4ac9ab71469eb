"""Notifications router."""

from fastapi import APIRouter, Depends

from finance_tracker.dependencies import get_current_user
from finance_tracker.schemas.notification import Notification
from finance_tracker.services.notifier import Notifier, get_notifier


router = APIRouter(prefix="/notifications", tags=["Notifications"])


@router.get("", response_model=list[Notification])
async def list_notifications(
    user: dict = Depends(get_current_user),
    notifier: Notifier = Depends(get_notifier),
):
    """Newest-first notifications for the current user."""
    return notifier.list_for(user["id"])
