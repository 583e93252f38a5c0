"""Use cases for flipping the read flag of notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from sqlalchemy.orm import Session

from boardnotify.config import get_settings
from boardnotify.domain.exceptions import StorageError
from boardnotify.infrastructure.repositories import NotificationRepository

from .validators import ensure_present

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MarkAllAsReadResult:
    """Outcome of a best-effort bulk read update."""

    attempted: int = 0
    succeeded: int = 0
    failed_ids: tuple[str, ...] = field(default_factory=tuple)

    @property
    def failed(self) -> int:
        return len(self.failed_ids)


def mark_notification_as_read(session: Session, notification_id: str) -> None:
    """Mark a single notification as read; unknown ids are ignored."""

    ensure_present(notification_id, "notificationID")
    NotificationRepository(session).set_read_status(notification_id, True)


def mark_all_notifications_as_read(
    session: Session,
    user_id: str,
    *,
    fetch_limit: int | None = None,
) -> MarkAllAsReadResult:
    """Mark the unread notifications of ``user_id`` as read, one update at a time.

    Only the ``fetch_limit`` most recent notifications are examined (the
    ``mark_all_fetch_limit`` setting by default). Each update is independent: a
    storage failure on one notification is logged and recorded in the result
    while the remaining updates still run. Failing to fetch the notifications
    in the first place propagates.
    """

    ensure_present(user_id, "userID")
    if fetch_limit is None:
        fetch_limit = get_settings().mark_all_fetch_limit

    repository = NotificationRepository(session)
    notifications = repository.list_for_user(user_id, fetch_limit, 0)

    attempted = 0
    succeeded = 0
    failed_ids: list[str] = []
    for notification in notifications:
        if notification.read:
            continue
        attempted += 1
        try:
            repository.set_read_status(notification.id, True)
        except StorageError:
            logger.error(
                "Error marking notification as read",
                extra={"notification_id": notification.id, "user_id": user_id},
                exc_info=True,
            )
            failed_ids.append(notification.id)
        else:
            succeeded += 1

    if failed_ids:
        logger.warning(
            "Marked %s of %s notifications as read for user %s",
            succeeded,
            attempted,
            user_id,
        )
    return MarkAllAsReadResult(
        attempted=attempted, succeeded=succeeded, failed_ids=tuple(failed_ids)
    )
