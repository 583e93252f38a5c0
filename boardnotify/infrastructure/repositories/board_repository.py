"""Persistence helpers for boards."""

from __future__ import annotations

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from boardnotify.domain.entities import Board
from boardnotify.domain.exceptions import StorageError
from boardnotify.infrastructure.models import BoardModel

logger = logging.getLogger(__name__)


class BoardRepository:
    """Look up boards referenced by notifications."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, board_id: str) -> Board | None:
        try:
            model = self.session.get(BoardModel, board_id)
        except SQLAlchemyError as exc:
            logger.exception("Cannot get board %s", board_id)
            self.session.rollback()
            raise StorageError(f"Cannot get board: {exc}") from exc
        return self._to_entity(model) if model else None

    def create(self, board: Board) -> Board:
        model = BoardModel(id=board.id, title=board.title)
        try:
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        except SQLAlchemyError as exc:
            logger.exception("Cannot insert board %s", board.id)
            self.session.rollback()
            raise StorageError(f"Cannot insert board: {exc}") from exc
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: BoardModel) -> Board:
        return Board(id=model.id, title=model.title or "")


__all__ = ["BoardRepository"]
