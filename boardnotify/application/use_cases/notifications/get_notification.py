"""Use case for retrieving a single notification."""

from sqlalchemy.orm import Session

from boardnotify.domain.entities import Notification
from boardnotify.infrastructure.repositories import NotificationRepository

from .validators import ensure_present


def get_notification(session: Session, notification_id: str) -> Notification | None:
    """Return the notification identified by ``notification_id`` or ``None``."""

    ensure_present(notification_id, "notificationID")
    return NotificationRepository(session).get(notification_id)
