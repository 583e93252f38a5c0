"""Aggregate application use cases."""

from .notifications import (
    create_notification,
    list_notifications,
    mark_all_notifications_as_read,
)

__all__ = [
    "create_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
]
