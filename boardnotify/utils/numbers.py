"""Bounds of the signed 64-bit integers stored in BIGINT columns."""

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def is_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


__all__ = ["INT64_MAX", "INT64_MIN", "is_int64"]
