"""User documents."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from beanie import Document, Indexed
from pydantic import Field

from .common import utcnow


class User(Document):
    """Persistent user record; the target of task assignment."""

    name: str = Field(max_length=255)
    email: Annotated[str, Indexed(unique=True)]
    hashed_password: str
    designation: str | None = Field(default=None, max_length=255)
    created_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "users"


__all__ = ["User"]
