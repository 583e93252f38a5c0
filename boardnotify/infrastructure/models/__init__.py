"""ORM models used by the application infrastructure."""

from .board import BoardModel
from .notification import NotificationModel

__all__ = [
    "BoardModel",
    "NotificationModel",
]
