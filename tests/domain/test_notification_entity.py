"""Tests for decoding and rendering notification entities."""

from __future__ import annotations

import io

import pytest

from boardnotify.domain.entities import (
    Notification,
    notification_from_json,
    notification_list_from_json,
)
from boardnotify.domain.exceptions import NotificationParseError, NotificationValidationError


def test_notification_from_json_reads_every_field():
    payload = (
        b'{"id": "n1", "userID": "u1", "message": "hello", "from": "alice",'
        b' "createAt": 1700000000000, "read": true, "link": "/boards/b1",'
        b' "boardID": "b1", "cardID": "c1"}'
    )

    notification = notification_from_json(payload)

    assert notification == Notification(
        id="n1",
        user_id="u1",
        message="hello",
        from_user="alice",
        create_at=1700000000000,
        read=True,
        link="/boards/b1",
        board_id="b1",
        card_id="c1",
    )


def test_notification_from_json_fills_defaults_for_missing_and_null_fields():
    notification = notification_from_json('{"message": "hi", "from": null, "extra": 1}')

    assert notification.message == "hi"
    assert notification.from_user == ""
    assert notification.id == ""
    assert notification.create_at == 0
    assert notification.read is False
    assert notification.link == ""


def test_notification_from_json_accepts_file_objects():
    stream = io.BytesIO(b'{"message": "hi", "from": "bob"}')

    assert notification_from_json(stream).from_user == "bob"


@pytest.mark.parametrize(
    "payload",
    [
        "",
        "{",
        "[]",
        '"message"',
        "null",
        '{"message": 5}',
        '{"read": "true"}',
        '{"createAt": "123"}',
        '{"createAt": 1.5}',
        '{"boardID": ["b1"]}',
    ],
)
def test_notification_from_json_rejects_malformed_payloads(payload):
    with pytest.raises(NotificationParseError):
        notification_from_json(payload)


def test_parse_errors_are_validation_errors():
    with pytest.raises(NotificationValidationError):
        notification_from_json("{not json}")
    with pytest.raises(ValueError):
        notification_from_json("{not json}")


def test_notification_list_from_json():
    notifications = notification_list_from_json(
        '[{"id": "a", "message": "one", "from": "x"}, {"id": "b", "message": "two", "from": "y"}]'
    )

    assert [notification.id for notification in notifications] == ["a", "b"]


def test_notification_list_from_json_requires_an_array():
    with pytest.raises(NotificationParseError):
        notification_list_from_json('{"id": "a"}')


def test_to_dict_omits_empty_optional_fields():
    notification = Notification(
        id="n1", user_id="u1", message="hi", from_user="alice", create_at=10
    )

    assert notification.to_dict() == {
        "id": "n1",
        "userID": "u1",
        "message": "hi",
        "from": "alice",
        "createAt": 10,
        "read": False,
    }


def test_to_dict_round_trips_through_from_json():
    import json

    notification = Notification(
        id="n1",
        user_id="u1",
        message="hi",
        from_user="alice",
        create_at=10,
        link="/boards/b1/c1",
        board_id="b1",
        card_id="c1",
    )

    assert notification_from_json(json.dumps(notification.to_dict())) == notification


@pytest.mark.parametrize(
    "create_at", ["9223372036854775808", "-9223372036854775809", "99999999999999999999"]
)
def test_notification_from_json_rejects_create_at_outside_int64(create_at):
    with pytest.raises(NotificationParseError):
        notification_from_json(f'{{"userID": "u1", "createAt": {create_at}}}')


def test_notification_from_json_accepts_int64_bounds():
    assert notification_from_json('{"createAt": 9223372036854775807}').create_at == 2**63 - 1
    assert notification_from_json('{"createAt": -9223372036854775808}').create_at == -(2**63)
