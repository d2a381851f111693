"""Repositories for admin and user credential records."""

from __future__ import annotations

from typing import TypeVar

from ..models import Admin, User
from .base import BaseRepository

IdentityType = TypeVar("IdentityType", Admin, User)


class IdentityRepository(BaseRepository[IdentityType]):
    """Lookups shared by both credential collections."""

    async def get_by_email(self, email: str) -> IdentityType | None:
        """Return the record matching the supplied email if it exists."""
        return await self.model_type.find_one(self.model_type.email == email)


class AdminRepository(IdentityRepository[Admin]):
    def __init__(self) -> None:
        super().__init__(Admin)


class UserRepository(IdentityRepository[User]):
    def __init__(self) -> None:
        super().__init__(User)
