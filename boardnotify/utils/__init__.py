"""Utility helpers for reusable functionality."""

from .datetime import (
    format_millis,
    get_app_timezone,
    get_millis,
    time_from_millis,
)
from .identifiers import ID_TYPE_BLOCK, new_id
from .numbers import INT64_MAX, INT64_MIN, is_int64

__all__ = [
    "format_millis",
    "get_app_timezone",
    "get_millis",
    "time_from_millis",
    "ID_TYPE_BLOCK",
    "new_id",
    "INT64_MAX",
    "INT64_MIN",
    "is_int64",
]
