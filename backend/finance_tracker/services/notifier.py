"""Toast-style notifications for the dashboard."""

from collections import defaultdict, deque
from datetime import datetime, timezone
from functools import lru_cache

from finance_tracker.logging_config import get_logger
from finance_tracker.schemas.notification import Notification, NotificationLevel


logger = get_logger("notifier")

MAX_NOTIFICATIONS_PER_USER = 50


class Notifier:
    """Keeps a bounded, newest-first feed of notifications per user."""

    def __init__(self, max_per_user: int = MAX_NOTIFICATIONS_PER_USER):
        self._feeds: dict[str, deque[Notification]] = defaultdict(
            lambda: deque(maxlen=max_per_user)
        )

    def notify(
        self,
        user_id: str,
        level: NotificationLevel,
        title: str,
        description: str | None = None,
    ) -> Notification:
        notification = Notification(
            level=level,
            title=title,
            description=description,
            created_at=datetime.now(timezone.utc),
        )
        self._feeds[user_id].appendleft(notification)
        return notification

    def list_for(self, user_id: str) -> list[Notification]:
        return list(self._feeds.get(user_id, ()))


def notify_safely(
    notifier: Notifier | None,
    user_id: str,
    level: NotificationLevel,
    title: str,
    description: str | None = None,
) -> Notification | None:
    """
    Send a notification without letting notifier problems reach the caller.

    A missing notifier, or one that raises, is logged and the call returns
    None.
    """
    if notifier is None:
        logger.info("Notifier not available: %s", title)
        return None

    try:
        return notifier.notify(user_id, level, title, description)
    except Exception:
        logger.warning("Notification failed: %s", title, exc_info=True)
        return None


@lru_cache
def get_notifier() -> Notifier:
    """Get the process-wide notifier."""
    return Notifier()
