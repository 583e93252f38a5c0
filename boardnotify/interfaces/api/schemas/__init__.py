from .notification import MarkAllAsReadResponse, NotificationRead, UnreadCountRead

__all__ = [
    "MarkAllAsReadResponse",
    "NotificationRead",
    "UnreadCountRead",
]
