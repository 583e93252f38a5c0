"""Endpoints for reading and managing the authenticated user's notifications."""

from __future__ import annotations

import logging
from dataclasses import replace

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.orm import Session

from boardnotify.application.use_cases.notifications import (
    count_unread_notifications as count_unread_uc,
    create_notification as create_notification_uc,
    delete_notification as delete_notification_uc,
    get_notification as get_notification_uc,
    list_notifications as list_notifications_uc,
    mark_all_notifications_as_read as mark_all_as_read_uc,
    mark_notification_as_read as mark_as_read_uc,
)
from boardnotify.config import get_settings
from boardnotify.domain.entities import Notification
from boardnotify.domain.exceptions import (
    NotFoundError,
    NotificationError,
    PermissionDeniedError,
)
from boardnotify.infrastructure.database import get_db
from boardnotify.interfaces.api.dependencies import (
    get_current_user_id,
    read_notification_payload,
)
from boardnotify.interfaces.api.routes_helpers import http_error_from, parse_int_param
from boardnotify.interfaces.api.schemas import (
    MarkAllAsReadResponse,
    NotificationRead,
    UnreadCountRead,
)
from boardnotify.utils import get_millis

router = APIRouter(prefix="/notifications", tags=["notifications"])
logger = logging.getLogger(__name__)


def _notification_to_schema(notification: Notification) -> NotificationRead:
    return NotificationRead.model_validate(notification.to_dict())


def _get_owned_notification(
    db: Session, notification_id: str, user_id: str
) -> Notification:
    notification = get_notification_uc(db, notification_id)
    if notification is None:
        raise NotFoundError("notification not found")
    if notification.user_id != user_id:
        raise PermissionDeniedError(
            "user doesn't have permission to this notification"
        )
    return notification


@router.get(
    "",
    response_model=list[NotificationRead],
    response_model_exclude_none=True,
)
def list_notifications(
    limit: str | None = Query(None, description="Maximum number of notifications"),
    offset: str | None = Query(None, description="Number of notifications to skip"),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> list[NotificationRead]:
    """Return the authenticated user's notifications, newest first."""

    try:
        page_size = parse_int_param(
            limit, name="limit", default=get_settings().notifications_page_size
        )
        start = parse_int_param(offset, name="offset", default=0)
        notifications = list_notifications_uc(
            db, user_id, limit=page_size, offset=start
        )
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return [_notification_to_schema(notification) for notification in notifications]


@router.post(
    "",
    response_model=NotificationRead,
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
)
def create_notification(
    payload: Notification = Depends(read_notification_payload),
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> NotificationRead:
    """Create a notification addressed to the authenticated user."""

    if not payload.message:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="message is required"
        )
    if not payload.from_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="from is required"
        )

    notification = replace(payload, id="", user_id=user_id, create_at=get_millis())
    try:
        created = create_notification_uc(db, notification)
    except NotificationError as exc:
        logger.info("createNotification failed for user %s", user_id)
        raise http_error_from(exc) from exc

    logger.info("createNotification %s for user %s", created.id, user_id)
    return _notification_to_schema(created)


@router.get("/unread_count", response_model=UnreadCountRead)
def unread_count(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> UnreadCountRead:
    """Return how many notifications the authenticated user has not read."""

    try:
        count = count_unread_uc(db, user_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return UnreadCountRead(count=count)


@router.put("/mark_all_as_read", response_model=MarkAllAsReadResponse)
def mark_all_as_read(
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> MarkAllAsReadResponse:
    """Mark every unread notification of the authenticated user as read."""

    try:
        result = mark_all_as_read_uc(db, user_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return MarkAllAsReadResponse(
        attempted=result.attempted,
        succeeded=result.succeeded,
        failed=result.failed,
    )


@router.get(
    "/{notification_id}",
    response_model=NotificationRead,
    response_model_exclude_none=True,
)
def read_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> NotificationRead:
    """Return one of the authenticated user's notifications."""

    try:
        notification = _get_owned_notification(db, notification_id, user_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return _notification_to_schema(notification)


@router.put("/{notification_id}/read")
def mark_as_read(
    notification_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> dict:
    """Mark one of the authenticated user's notifications as read."""

    try:
        _get_owned_notification(db, notification_id, user_id)
        mark_as_read_uc(db, notification_id)
    except NotificationError as exc:
        raise http_error_from(exc) from exc
    return {}


@router.delete("/{notification_id}")
def delete_notification(
    notification_id: str,
    db: Session = Depends(get_db),
    user_id: str = Depends(get_current_user_id),
) -> dict:
    """Delete one of the authenticated user's notifications."""

    try:
        _get_owned_notification(db, notification_id, user_id)
        delete_notification_uc(db, notification_id)
    except NotificationError as exc:
        logger.info("deleteNotification %s failed for user %s", notification_id, user_id)
        raise http_error_from(exc) from exc

    logger.info("deleteNotification %s for user %s", notification_id, user_id)
    return {}
