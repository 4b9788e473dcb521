"""Enumerations shared across the library."""

from __future__ import annotations

from enum import Enum


class PageLabel(str, Enum):
    """Relation names used in ``Link`` headers and as page keys."""

    FIRST = "first"
    PREVIOUS = "prev"
    NEXT = "next"
    LAST = "last"

    @classmethod
    def values(cls) -> list[str]:
        """All labels as plain strings, in navigation order."""
        return [label.value for label in cls]

    @classmethod
    def from_key(cls, key: object) -> PageLabel | None:
        """Return the label matching ``key`` exactly, or None."""
        if isinstance(key, cls):
            return key
        if not isinstance(key, str):
            return None
        try:
            return cls(key)
        except ValueError:
            return None
