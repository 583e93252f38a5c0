"""Repository implementations for infrastructure layer."""

from .board_repository import BoardRepository
from .notification_repository import NotificationRepository

__all__ = [
    "BoardRepository",
    "NotificationRepository",
]
