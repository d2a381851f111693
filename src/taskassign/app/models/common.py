"""Shared model helpers."""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from beanie import PydanticObjectId
from bson.errors import InvalidId


class Role(str, Enum):
    """Roles embedded in identity tokens."""

    ADMIN = "admin"
    USER = "user"


def utcnow() -> datetime:
    """Return a timezone-aware UTC timestamp."""
    return datetime.now(timezone.utc)


def ensure_tzaware(timestamp: datetime) -> datetime:
    if timestamp.tzinfo is None:
        return timestamp.replace(tzinfo=timezone.utc)
    return timestamp


def parse_object_id(value: object) -> PydanticObjectId | None:
    """Coerce ``value`` into an ObjectId, returning ``None`` when malformed."""
    if isinstance(value, PydanticObjectId):
        return value
    if not value:
        return None
    try:
        return PydanticObjectId(str(value))
    except (InvalidId, TypeError):
        return None


__all__ = ["Role", "ensure_tzaware", "parse_object_id", "utcnow"]
