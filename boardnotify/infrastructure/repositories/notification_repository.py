"""Persistence helpers for notification entities."""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import replace

from sqlalchemy import false, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from boardnotify.domain.entities import Notification
from boardnotify.domain.exceptions import StorageError
from boardnotify.infrastructure.models import NotificationModel
from boardnotify.utils import new_id

logger = logging.getLogger(__name__)


class NotificationRepository:
    """Store notifications.

    Rows are insert-only; the read flag is the one column that changes after
    creation. Driver failures, including integers the backend cannot store,
    are logged here and re-raised as :class:`StorageError`.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, notification: Notification) -> Notification:
        if not notification.id:
            notification = replace(notification, id=new_id())
        model = NotificationModel()
        self._apply_entity_to_model(model, notification)
        with self._storage_errors("Cannot insert notification"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_for_user(
        self, user_id: str, limit: int = 0, offset: int = 0
    ) -> Sequence[Notification]:
        """Return ``user_id``'s notifications, newest first.

        ``limit <= 0`` returns every row and ``offset <= 0`` starts at the first
        one. Pages are computed against the live table, so rows inserted between
        two calls shift the following pages.
        """

        query = (
            self.session.query(NotificationModel)
            .filter(NotificationModel.user_id == user_id)
            .order_by(NotificationModel.create_at.desc(), NotificationModel.id.desc())
        )
        if offset > 0:
            query = query.offset(offset)
        if limit > 0:
            query = query.limit(limit)
        with self._storage_errors("Cannot get notifications for user"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    def count_unread(self, user_id: str) -> int:
        query = self.session.query(func.count(NotificationModel.id)).filter(
            NotificationModel.user_id == user_id,
            NotificationModel.read == false(),
        )
        with self._storage_errors("Cannot get unread notifications count"):
            count = query.scalar()
        return int(count or 0)

    def get(self, notification_id: str) -> Notification | None:
        with self._storage_errors("Cannot get notification"):
            model = self.session.get(NotificationModel, notification_id)
        return self._to_entity(model) if model else None

    def set_read_status(self, notification_id: str, read: bool) -> None:
        with self._storage_errors("Cannot update notification read status"):
            self.session.query(NotificationModel).filter(
                NotificationModel.id == notification_id
            ).update({NotificationModel.read: read}, synchronize_session=False)
            self.session.commit()

    def delete(self, notification_id: str) -> None:
        with self._storage_errors("Cannot delete notification"):
            self.session.query(NotificationModel).filter(
                NotificationModel.id == notification_id
            ).delete(synchronize_session=False)
            self.session.commit()

    def delete_for_user(self, user_id: str) -> None:
        with self._storage_errors("Cannot delete notifications for user"):
            self.session.query(NotificationModel).filter(
                NotificationModel.user_id == user_id
            ).delete(synchronize_session=False)
            self.session.commit()

    @contextmanager
    def _storage_errors(self, message: str) -> Iterator[None]:
        try:
            yield
        except (SQLAlchemyError, OverflowError) as exc:
            logger.exception(message)
            self.session.rollback()
            raise StorageError(f"{message}: {exc}") from exc

    @staticmethod
    def _apply_entity_to_model(
        model: NotificationModel, notification: Notification
    ) -> None:
        model.id = notification.id
        model.user_id = notification.user_id
        model.message = notification.message
        model.from_user = notification.from_user
        model.create_at = notification.create_at
        model.read = notification.read
        model.link = notification.link or ""
        model.board_id = notification.board_id or ""
        model.card_id = notification.card_id or ""

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            user_id=model.user_id,
            message=model.message,
            from_user=model.from_user,
            create_at=model.create_at,
            read=bool(model.read),
            link=model.link or "",
            board_id=model.board_id or "",
            card_id=model.card_id or "",
        )


__all__ = ["NotificationRepository"]
