"""Use cases for reading a user's notifications."""

from collections.abc import Sequence

from sqlalchemy.orm import Session

from boardnotify.config import get_settings
from boardnotify.domain.entities import Notification
from boardnotify.infrastructure.repositories import NotificationRepository

from .validators import ensure_present


def list_notifications(
    session: Session,
    user_id: str,
    *,
    limit: int | None = None,
    offset: int = 0,
) -> Sequence[Notification]:
    """Return a page of notifications for ``user_id``, newest first.

    ``limit`` defaults to the ``notifications_page_size`` setting.
    """

    ensure_present(user_id, "userID")
    if limit is None:
        limit = get_settings().notifications_page_size
    return NotificationRepository(session).list_for_user(user_id, limit, offset)


def count_unread_notifications(session: Session, user_id: str) -> int:
    """Return how many of ``user_id``'s notifications are still unread."""

    ensure_present(user_id, "userID")
    return NotificationRepository(session).count_unread(user_id)
