"""Use cases for deleting notifications."""

from sqlalchemy.orm import Session

from boardnotify.infrastructure.repositories import NotificationRepository

from .validators import ensure_present


def delete_notification(session: Session, notification_id: str) -> None:
    """Delete the specified notification; unknown ids are ignored."""

    ensure_present(notification_id, "notificationID")
    NotificationRepository(session).delete(notification_id)


def delete_notifications_for_user(session: Session, user_id: str) -> None:
    """Delete every notification addressed to ``user_id``."""

    ensure_present(user_id, "userID")
    NotificationRepository(session).delete_for_user(user_id)
