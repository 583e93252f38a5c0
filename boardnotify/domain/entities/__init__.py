"""Domain entities exposed by the application."""

from .board import Board
from .notification import (
    Notification,
    notification_from_json,
    notification_list_from_json,
)
from .notification_hint import BlockType, NotificationHint
from .user import User

__all__ = [
    "Board",
    "BlockType",
    "Notification",
    "NotificationHint",
    "User",
    "notification_from_json",
    "notification_list_from_json",
]
