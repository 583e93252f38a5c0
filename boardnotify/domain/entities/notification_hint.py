"""Domain entity describing a pending block-change notification."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from boardnotify.domain.exceptions import InvalidNotificationHintError
from boardnotify.utils import format_millis


class BlockType(str, Enum):
    """Kinds of blocks that can carry subscribers."""

    BOARD = "board"
    VIEW = "view"
    CARD = "card"
    TEXT = "text"
    COMMENT = "comment"
    IMAGE = "image"
    CHECKBOX = "checkbox"
    DIVIDER = "divider"


@dataclass
class NotificationHint:
    """Signal that a block changed and its subscribers should be told at ``notify_at``.

    ``create_at`` and ``notify_at`` are milliseconds since the epoch.
    """

    block_type: BlockType | str
    block_id: str
    modified_by_id: str
    create_at: int = 0
    notify_at: int = 0

    def validate(self) -> None:
        """Raise :class:`InvalidNotificationHintError` when a required field is empty."""

        if not self.block_id:
            raise InvalidNotificationHintError("missing block id")
        if not self.block_type:
            raise InvalidNotificationHintError("missing block type")
        if not self.modified_by_id:
            raise InvalidNotificationHintError("missing modified_by id")

    def copy(self) -> "NotificationHint":
        return replace(self)

    def log_clone(self) -> dict[str, str]:
        """Return a representation suited to structured log records."""

        block_type = (
            self.block_type.value
            if isinstance(self.block_type, BlockType)
            else self.block_type
        )
        return {
            "block_type": block_type,
            "block_id": self.block_id,
            "modified_by_id": self.modified_by_id,
            "create_at": format_millis(self.create_at),
            "notify_at": format_millis(self.notify_at),
        }


__all__ = ["BlockType", "NotificationHint"]
