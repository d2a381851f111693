"""Public representations of admins and users; password hashes never appear here."""

from __future__ import annotations

from datetime import datetime

from ..models import Admin, User
from .base import CamelModel


class AdminPublic(CamelModel):
    id: str
    name: str
    email: str
    created_at: datetime

    @classmethod
    def from_document(cls, admin: Admin) -> "AdminPublic":
        return cls(
            id=str(admin.id),
            name=admin.name,
            email=admin.email,
            created_at=admin.created_at,
        )


class UserPublic(CamelModel):
    id: str
    name: str
    email: str
    designation: str | None = None
    created_at: datetime

    @classmethod
    def from_document(cls, user: User) -> "UserPublic":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            designation=user.designation,
            created_at=user.created_at,
        )


__all__ = ["AdminPublic", "UserPublic"]
