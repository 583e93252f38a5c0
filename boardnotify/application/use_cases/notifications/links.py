"""Derivation of navigable links from board and card context."""

from __future__ import annotations

from sqlalchemy.orm import Session

from boardnotify.infrastructure.repositories import BoardRepository


def build_link(board_id: str, card_id: str = "") -> str:
    """Return ``/boards/{board_id}`` or ``/boards/{board_id}/{card_id}``."""

    link = f"/boards/{board_id}"
    if card_id:
        link = f"{link}/{card_id}"
    return link


def resolve_link(session: Session, board_id: str, card_id: str = "") -> str:
    """Return the link for ``board_id``/``card_id`` or ``""`` when the board is unknown.

    Failures of the board lookup itself propagate.
    """

    if not board_id:
        return ""
    board = BoardRepository(session).get(board_id)
    if board is None:
        return ""
    return build_link(board_id, card_id)
