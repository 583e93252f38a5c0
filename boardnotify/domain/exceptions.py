"""Error categories raised by the notification core."""

from __future__ import annotations


class NotificationError(Exception):
    """Base class for every error raised by the notification core."""


class NotificationValidationError(NotificationError, ValueError):
    """A required value is missing or a parameter cannot be interpreted."""


class NotificationParseError(NotificationValidationError):
    """An inbound payload could not be decoded into a notification."""


class InvalidNotificationHintError(NotificationValidationError):
    """A notification hint is missing one of its required fields."""


class NotFoundError(NotificationError, LookupError):
    """The requested record does not exist."""


class BoardNotFoundError(NotFoundError):
    """The referenced board does not exist."""

    def __init__(self, board_id: str) -> None:
        super().__init__(f"board not found: {board_id}")
        self.board_id = board_id


class PermissionDeniedError(NotificationError):
    """The caller is not allowed to act on the requested record."""


class StorageError(NotificationError):
    """The persistence layer failed; the original error is chained."""


__all__ = [
    "NotificationError",
    "NotificationValidationError",
    "NotificationParseError",
    "InvalidNotificationHintError",
    "NotFoundError",
    "BoardNotFoundError",
    "PermissionDeniedError",
    "StorageError",
]
