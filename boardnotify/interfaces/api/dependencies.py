"""FastAPI dependency utilities."""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from boardnotify.domain.entities import Notification, notification_from_json
from boardnotify.domain.exceptions import NotificationParseError
from boardnotify.infrastructure.security import decode_access_token

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


def resolve_user_id(token: str) -> str:
    """Return the user id carried by ``token``."""

    try:
        payload = decode_access_token(token)
    except ValueError as exc:
        raise _unauthorized("Invalid credentials") from exc

    user_id = payload.get("sub")
    if not isinstance(user_id, str) or not user_id:
        raise _unauthorized("Invalid credentials")
    return user_id


def get_current_user_id(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> str:
    """Return the id of the authenticated user."""

    if credentials is None:
        raise _unauthorized("Not authenticated")
    return resolve_user_id(credentials.credentials)


async def read_notification_payload(request: Request) -> Notification:
    """Decode the request body into a :class:`Notification`."""

    body = await request.body()
    try:
        return notification_from_json(body)
    except NotificationParseError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="cannot parse request body",
        ) from exc
