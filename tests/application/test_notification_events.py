"""Tests for the helpers that turn board events into notifications."""

from __future__ import annotations

import pytest

from boardnotify.application.use_cases.notifications import (
    list_notifications,
    notify_board_membership_added,
    notify_card_assigned,
    notify_card_commented,
    should_notify,
)
from boardnotify.domain.entities import Board, User
from boardnotify.domain.exceptions import BoardNotFoundError, NotificationValidationError
from boardnotify.infrastructure.repositories import BoardRepository

ALICE = User(id="alice-id", username="alice")


@pytest.fixture(autouse=True)
def board(reset_database, session):
    return BoardRepository(session).create(Board(id="B1", title="Roadmap"))


def test_should_notify_skips_self():
    assert should_notify(ALICE, "bob-id") is True
    assert should_notify(ALICE, "alice-id") is False


def test_membership_added_notification(session):
    created = notify_board_membership_added(
        session, added_by=ALICE, user_id="bob-id", board_id="B1"
    )

    assert created.user_id == "bob-id"
    assert created.message == 'alice added you to the board "Roadmap"'
    assert created.from_user == "alice"
    assert created.link == "/boards/B1"
    assert list_notifications(session, "bob-id") == [created]


def test_membership_added_requires_existing_board(session):
    with pytest.raises(BoardNotFoundError, match="missing"):
        notify_board_membership_added(
            session, added_by=ALICE, user_id="bob-id", board_id="missing"
        )
    assert list_notifications(session, "bob-id") == []


def test_card_assigned_notification(session):
    created = notify_card_assigned(
        session,
        assigned_by=ALICE,
        user_id="bob-id",
        board_id="B1",
        card_id="C1",
        card_title="Ship it",
    )

    assert created.message == 'alice assigned you to the card "Ship it"'
    assert created.link == "/boards/B1/C1"
    assert created.card_id == "C1"


def test_card_commented_notification(session):
    created = notify_card_commented(
        session,
        commented_by=ALICE,
        user_id="bob-id",
        board_id="B1",
        card_id="C1",
        card_title="Ship it",
    )

    assert created.message == 'alice commented on the card "Ship it"'
    assert created.from_user == "alice"


def test_self_notifications_are_suppressed(session):
    assert (
        notify_board_membership_added(
            session, added_by=ALICE, user_id="alice-id", board_id="B1"
        )
        is None
    )
    assert (
        notify_card_assigned(
            session,
            assigned_by=ALICE,
            user_id="alice-id",
            board_id="B1",
            card_id="C1",
            card_title="Ship it",
        )
        is None
    )
    assert (
        notify_card_commented(
            session,
            commented_by=ALICE,
            user_id="alice-id",
            board_id="B1",
            card_id="C1",
            card_title="Ship it",
        )
        is None
    )
    assert list_notifications(session, "alice-id") == []


@pytest.mark.parametrize(
    "arguments",
    [
        {"assigned_by": None, "user_id": "bob-id", "board_id": "B1", "card_id": "C1"},
        {"assigned_by": ALICE, "user_id": "", "board_id": "B1", "card_id": "C1"},
        {"assigned_by": ALICE, "user_id": "bob-id", "board_id": "", "card_id": "C1"},
        {"assigned_by": ALICE, "user_id": "bob-id", "board_id": "B1", "card_id": ""},
    ],
)
def test_card_assigned_requires_arguments(session, arguments):
    with pytest.raises(NotificationValidationError, match="are required"):
        notify_card_assigned(session, card_title="Ship it", **arguments)


def test_membership_added_requires_arguments(session):
    with pytest.raises(NotificationValidationError):
        notify_board_membership_added(session, added_by=None, user_id="bob-id", board_id="B1")
    with pytest.raises(NotificationValidationError):
        notify_board_membership_added(session, added_by=ALICE, user_id="bob-id", board_id="")
