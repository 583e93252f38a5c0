"""Use cases for storing and serving user notifications."""

from .create_notification import create_notification, create_notification_with_params
from .delete_notification import delete_notification, delete_notifications_for_user
from .events import (
    notify_board_membership_added,
    notify_card_assigned,
    notify_card_commented,
    should_notify,
)
from .get_notification import get_notification
from .links import build_link, resolve_link
from .list_notifications import (
    count_unread_notifications,
    list_notifications,
)
from .mark_as_read import (
    MarkAllAsReadResult,
    mark_all_notifications_as_read,
    mark_notification_as_read,
)

__all__ = [
    "MarkAllAsReadResult",
    "build_link",
    "count_unread_notifications",
    "create_notification",
    "create_notification_with_params",
    "delete_notification",
    "delete_notifications_for_user",
    "get_notification",
    "list_notifications",
    "mark_all_notifications_as_read",
    "mark_notification_as_read",
    "notify_board_membership_added",
    "notify_card_assigned",
    "notify_card_commented",
    "resolve_link",
    "should_notify",
]
