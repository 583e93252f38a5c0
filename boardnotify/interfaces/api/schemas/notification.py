"""Pydantic models describing notification payloads."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class NotificationRead(BaseModel):
    """Representation of a notification delivered to the client."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str = Field(alias="userID")
    message: str
    from_user: str = Field(alias="from")
    create_at: int = Field(alias="createAt")
    read: bool
    link: str | None = None
    board_id: str | None = Field(default=None, alias="boardID")
    card_id: str | None = Field(default=None, alias="cardID")


class UnreadCountRead(BaseModel):
    """Number of unread notifications for the authenticated user."""

    count: int


class MarkAllAsReadResponse(BaseModel):
    """Summary of a mark-all-as-read request."""

    attempted: int
    succeeded: int
    failed: int


__all__ = ["MarkAllAsReadResponse", "NotificationRead", "UnreadCountRead"]
