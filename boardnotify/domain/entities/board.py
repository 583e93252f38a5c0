"""Domain entity representing a board."""

from dataclasses import dataclass


@dataclass
class Board:
    """Minimal board attributes the notification core relies on."""

    id: str
    title: str = ""


__all__ = ["Board"]
