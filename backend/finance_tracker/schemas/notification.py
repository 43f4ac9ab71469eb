"""Notification schemas."""

from datetime import datetime
from enum import Enum
from pydantic import BaseModel


class NotificationLevel(str, Enum):
    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class Notification(BaseModel):
    """A toast-style message for the dashboard."""

    level: NotificationLevel
    title: str
    description: str | None = None
    created_at: datetime
