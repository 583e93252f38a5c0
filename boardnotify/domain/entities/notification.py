"""Domain entity representing a user notification."""

from __future__ import annotations

from dataclasses import dataclass
from typing import IO, Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictInt, StrictStr, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from boardnotify.domain.exceptions import NotificationParseError
from boardnotify.utils import INT64_MAX, INT64_MIN


@dataclass
class Notification:
    """One event requiring the attention of ``user_id``."""

    id: str
    user_id: str
    message: str
    from_user: str
    create_at: int = 0
    read: bool = False
    link: str = ""
    board_id: str = ""
    card_id: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON document exchanged with clients."""

        payload: dict[str, Any] = {
            "id": self.id,
            "userID": self.user_id,
            "message": self.message,
            "from": self.from_user,
            "createAt": self.create_at,
            "read": self.read,
        }
        if self.link:
            payload["link"] = self.link
        if self.board_id:
            payload["boardID"] = self.board_id
        if self.card_id:
            payload["cardID"] = self.card_id
        return payload


class _NotificationDocument(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: StrictStr | None = None
    user_id: StrictStr | None = Field(default=None, alias="userID")
    message: StrictStr | None = None
    from_user: StrictStr | None = Field(default=None, alias="from")
    create_at: Annotated[StrictInt, Field(ge=INT64_MIN, le=INT64_MAX)] | None = Field(
        default=None, alias="createAt"
    )
    read: StrictBool | None = None
    link: StrictStr | None = None
    board_id: StrictStr | None = Field(default=None, alias="boardID")
    card_id: StrictStr | None = Field(default=None, alias="cardID")

    def to_entity(self) -> Notification:
        return Notification(
            id=self.id or "",
            user_id=self.user_id or "",
            message=self.message or "",
            from_user=self.from_user or "",
            create_at=self.create_at or 0,
            read=bool(self.read),
            link=self.link or "",
            board_id=self.board_id or "",
            card_id=self.card_id or "",
        )


_document_list_adapter = TypeAdapter(list[_NotificationDocument])

JSONSource = str | bytes | bytearray | IO[str] | IO[bytes]


def _read_source(data: JSONSource) -> str | bytes:
    if isinstance(data, (str, bytes)):
        return data
    if isinstance(data, bytearray):
        return bytes(data)
    return data.read()


def notification_from_json(data: JSONSource) -> Notification:
    """Decode a single notification from a JSON document.

    Absent keys (and explicit ``null`` values) fall back to the empty defaults;
    required-field checks are left to the application layer. A malformed
    document or a value of the wrong JSON type raises
    :class:`NotificationParseError`.
    """

    try:
        document = _NotificationDocument.model_validate_json(_read_source(data))
    except PydanticValidationError as exc:
        raise NotificationParseError(f"cannot parse notification: {exc}") from exc
    return document.to_entity()


def notification_list_from_json(data: JSONSource) -> list[Notification]:
    """Decode a JSON array of notifications."""

    try:
        documents = _document_list_adapter.validate_json(_read_source(data))
    except PydanticValidationError as exc:
        raise NotificationParseError(f"cannot parse notification list: {exc}") from exc
    return [document.to_entity() for document in documents]


__all__ = ["Notification", "notification_from_json", "notification_list_from_json"]
