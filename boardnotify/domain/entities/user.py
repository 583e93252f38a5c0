"""Domain entity representing a user acting on boards."""

from dataclasses import dataclass


@dataclass
class User:
    """Identity of the person who triggered an event."""

    id: str
    username: str


__all__ = ["User"]
