"""Required-field checks shared by the notification use cases."""

from boardnotify.domain.entities import Notification
from boardnotify.domain.exceptions import NotificationValidationError
from boardnotify.utils import is_int64


def ensure_present(value: str | None, field_name: str) -> str:
    """Return ``value`` or raise when it is empty."""

    if not value:
        raise NotificationValidationError(f"{field_name} is required")
    return value


def ensure_valid_notification(notification: Notification) -> None:
    """Check the fields every persisted notification must carry."""

    ensure_present(notification.user_id, "userID")
    ensure_present(notification.message, "message")
    ensure_present(notification.from_user, "from")
    if not is_int64(notification.create_at):
        raise NotificationValidationError("createAt is out of range")
