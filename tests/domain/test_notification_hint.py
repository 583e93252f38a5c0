"""Tests for the notification hint data contract."""

from __future__ import annotations

import pytest

from boardnotify.domain.entities import BlockType, NotificationHint
from boardnotify.domain.exceptions import InvalidNotificationHintError


def _hint(**overrides) -> NotificationHint:
    values = {
        "block_type": BlockType.CARD,
        "block_id": "c1",
        "modified_by_id": "u1",
        "create_at": 0,
        "notify_at": 1234,
    }
    values.update(overrides)
    return NotificationHint(**values)


def test_valid_hint_passes_validation():
    _hint().validate()


@pytest.mark.parametrize(
    ("overrides", "message"),
    [
        ({"block_id": ""}, "missing block id"),
        ({"block_type": ""}, "missing block type"),
        ({"modified_by_id": ""}, "missing modified_by id"),
        ({"block_id": "", "block_type": "", "modified_by_id": ""}, "missing block id"),
    ],
)
def test_invalid_hint_reports_first_missing_field(overrides, message):
    with pytest.raises(InvalidNotificationHintError, match=message):
        _hint(**overrides).validate()


def test_copy_is_independent():
    original = _hint()
    duplicate = original.copy()

    duplicate.block_id = "c2"

    assert original.block_id == "c1"
    assert duplicate == _hint(block_id="c2")


def test_log_clone_renders_timestamps():
    clone = _hint().log_clone()

    assert clone == {
        "block_type": "card",
        "block_id": "c1",
        "modified_by_id": "u1",
        "create_at": "Jan 01 00:00:00.000",
        "notify_at": "Jan 01 00:00:01.234",
    }
