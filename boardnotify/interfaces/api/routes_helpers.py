"""Helper utilities shared across API route handlers."""

import re

from fastapi import HTTPException, status

from boardnotify.domain.exceptions import (
    NotFoundError,
    NotificationError,
    NotificationValidationError,
    PermissionDeniedError,
)
from boardnotify.utils import is_int64


_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_int_param(raw: str | None, *, name: str, default: int) -> int:
    """Return ``raw`` as a signed 64-bit integer, ``default`` when it was not supplied.

    Only an optional sign followed by ASCII digits is accepted; whitespace,
    underscores and values outside the 64-bit range are rejected.
    """

    if raw is None or raw == "":
        return default
    if not _INTEGER_PATTERN.fullmatch(raw):
        raise NotificationValidationError(f"{name} must be an integer, got {raw!r}")
    value = int(raw)
    if not is_int64(value):
        raise NotificationValidationError(f"{name} is out of range, got {raw!r}")
    return value


def http_error_from(exc: NotificationError) -> HTTPException:
    """Translate a core error category into the matching HTTP error."""

    if isinstance(exc, NotificationValidationError):
        code = status.HTTP_400_BAD_REQUEST
    elif isinstance(exc, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(exc, PermissionDeniedError):
        code = status.HTTP_403_FORBIDDEN
    else:
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="internal error"
        )
    return HTTPException(status_code=code, detail=str(exc))
