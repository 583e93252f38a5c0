"""Helpers that turn board events into notifications.

Every helper composes a message from the acting user and the target, skips
events where the actor is also the recipient, and delegates to
:func:`create_notification_with_params`.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from boardnotify.domain.entities import Notification, User
from boardnotify.domain.exceptions import BoardNotFoundError, NotificationValidationError
from boardnotify.infrastructure.repositories import BoardRepository

from .create_notification import create_notification_with_params


def should_notify(actor: User, recipient_id: str) -> bool:
    """Return ``False`` when ``actor`` would be notifying themselves."""

    return actor.id != recipient_id


def _ensure_arguments(actor_field: str, actor: User | None, **values: str) -> None:
    missing = [name for name, value in values.items() if not value]
    if actor is None:
        missing.append(actor_field)
    if missing:
        required = ", ".join([*values, actor_field])
        raise NotificationValidationError(f"{required} are required")


def notify_board_membership_added(
    session: Session,
    *,
    added_by: User | None,
    user_id: str,
    board_id: str,
) -> Notification | None:
    """Tell ``user_id`` that ``added_by`` added them to ``board_id``."""

    _ensure_arguments("addedBy", added_by, userID=user_id, boardID=board_id)
    if not should_notify(added_by, user_id):
        return None

    board = BoardRepository(session).get(board_id)
    if board is None:
        raise BoardNotFoundError(board_id)

    return create_notification_with_params(
        session,
        user_id=user_id,
        message=f'{added_by.username} added you to the board "{board.title}"',
        from_user=added_by.username,
        board_id=board_id,
    )


def notify_card_assigned(
    session: Session,
    *,
    assigned_by: User | None,
    user_id: str,
    board_id: str,
    card_id: str,
    card_title: str,
) -> Notification | None:
    """Tell ``user_id`` that ``assigned_by`` assigned them to a card."""

    _ensure_arguments(
        "assignedBy", assigned_by, userID=user_id, boardID=board_id, cardID=card_id
    )
    if not should_notify(assigned_by, user_id):
        return None

    return create_notification_with_params(
        session,
        user_id=user_id,
        message=f'{assigned_by.username} assigned you to the card "{card_title}"',
        from_user=assigned_by.username,
        board_id=board_id,
        card_id=card_id,
    )


def notify_card_commented(
    session: Session,
    *,
    commented_by: User | None,
    user_id: str,
    board_id: str,
    card_id: str,
    card_title: str,
) -> Notification | None:
    """Tell ``user_id`` that ``commented_by`` commented on a card."""

    _ensure_arguments(
        "commentedBy", commented_by, userID=user_id, boardID=board_id, cardID=card_id
    )
    if not should_notify(commented_by, user_id):
        return None

    return create_notification_with_params(
        session,
        user_id=user_id,
        message=f'{commented_by.username} commented on the card "{card_title}"',
        from_user=commented_by.username,
        board_id=board_id,
        card_id=card_id,
    )
