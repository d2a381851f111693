"""Administrator documents."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from beanie import Document, Indexed
from pydantic import Field

from .common import utcnow


class Admin(Document):
    """Persistent administrator record."""

    name: str = Field(max_length=255)
    email: Annotated[str, Indexed(unique=True)]
    hashed_password: str
    created_at: datetime = Field(default_factory=utcnow)

    class Settings:
        name = "admins"


__all__ = ["Admin"]
