"""Use cases for creating notifications."""

from __future__ import annotations

from dataclasses import replace

from sqlalchemy.orm import Session

from boardnotify.domain.entities import Notification
from boardnotify.infrastructure.repositories import NotificationRepository
from boardnotify.utils import get_millis, new_id

from .links import resolve_link
from .validators import ensure_present, ensure_valid_notification


def create_notification(session: Session, notification: Notification) -> Notification:
    """Persist ``notification`` after filling server-side defaults.

    A missing ``id`` is generated and a non-positive ``create_at`` becomes the
    current time. When the notification references a board and carries no
    explicit link, the link is derived from the board (and card) ids as long as
    the board exists.
    """

    ensure_valid_notification(notification)

    entity = replace(notification)
    if not entity.id:
        entity.id = new_id()
    if entity.create_at <= 0:
        entity.create_at = get_millis()
    if entity.board_id and not entity.link:
        entity.link = resolve_link(session, entity.board_id, entity.card_id)

    return NotificationRepository(session).save(entity)


def create_notification_with_params(
    session: Session,
    *,
    user_id: str,
    message: str,
    from_user: str,
    board_id: str = "",
    card_id: str = "",
) -> Notification:
    """Build an unread notification from its parts and persist it."""

    ensure_present(user_id, "userID")
    ensure_present(message, "message")
    ensure_present(from_user, "from")

    entity = Notification(
        id=new_id(),
        user_id=user_id,
        message=message,
        from_user=from_user,
        create_at=get_millis(),
        read=False,
        board_id=board_id,
        card_id=card_id,
    )
    if board_id:
        entity.link = resolve_link(session, board_id, card_id)

    return NotificationRepository(session).save(entity)
