"""Helpers for working with epoch-millisecond timestamps."""

from __future__ import annotations

import re
import time
from datetime import datetime, timedelta, timezone, tzinfo
from functools import lru_cache
from typing import Final

from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from boardnotify.config import get_settings

_DEFAULT_TIMEZONE: Final[str] = "UTC"
_HUMAN_FORMAT: Final[str] = "%b %d %H:%M:%S.%f"
_EPOCH: Final[datetime] = datetime(1970, 1, 1, tzinfo=timezone.utc)
_OFFSET_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^(?:UTC|GMT)(?P<sign>[+-])(?P<hours>\d{1,2})(?::?(?P<minutes>\d{2}))?$",
    re.IGNORECASE,
)


@lru_cache(maxsize=1)
def get_app_timezone() -> tzinfo:
    """Return the configured application timezone.

    The timezone is resolved using the ``APP_TIMEZONE`` environment variable (via
    the ``Settings`` model). Offsets such as ``UTC-05:00`` are accepted; values
    that cannot be resolved fall back to UTC.
    """

    settings = get_settings()
    tz_name = (settings.app_timezone or "").strip() or _DEFAULT_TIMEZONE
    return _resolve_timezone(tz_name)


def get_millis() -> int:
    """Return the current time as milliseconds since the epoch."""

    return time.time_ns() // 1_000_000


def time_from_millis(millis: int) -> datetime:
    """Convert epoch ``millis`` into an aware datetime in the app timezone."""

    moment = _EPOCH + timedelta(milliseconds=millis)
    return moment.astimezone(get_app_timezone())


def format_millis(millis: int) -> str:
    """Render ``millis`` as a short human readable stamp (``Jan 02 15:04:05.000``)."""

    rendered = time_from_millis(millis).strftime(_HUMAN_FORMAT)
    # strftime only knows microseconds
    return rendered[:-3]


def _resolve_timezone(tz_name: str) -> tzinfo:
    """Resolve ``tz_name`` into a ``timezone`` instance."""

    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError):
        match = _OFFSET_PATTERN.match(tz_name)
        if match:
            sign = -1 if match.group("sign") == "-" else 1
            hours = int(match.group("hours"))
            minutes = int(match.group("minutes") or 0)
            offset = timedelta(hours=hours, minutes=minutes)
            return timezone(sign * offset)
    return timezone.utc
