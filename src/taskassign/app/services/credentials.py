"""Credential store owning admin and user records and password verification."""

from __future__ import annotations

import logging
from typing import Sequence

from passlib.context import CryptContext
from pymongo.errors import DuplicateKeyError

from ..core.security import get_password_hash, verify_password
from ..errors import DuplicateIdentityError, InvalidCredentialsError, NotFoundError
from ..models import Admin, User, parse_object_id
from ..repositories import AdminRepository, UserRepository

logger = logging.getLogger(__name__)


def normalise_email(email: str) -> str:
    return email.strip().lower()


class CredentialStore:
    """Registration, lookup and password checks for admins and users."""

    def __init__(self, *, password_context: CryptContext | None = None) -> None:
        self._password_context = password_context
        self._admins = AdminRepository()
        self._users = UserRepository()

    async def register_admin(self, *, name: str, email: str, password: str) -> Admin:
        """Persist a new admin; fails with ``DuplicateIdentityError`` if the email is taken."""
        email = normalise_email(email)
        if await self._admins.get_by_email(email) is not None:
            raise DuplicateIdentityError("Admin already exists")
        admin = Admin(
            name=name,
            email=email,
            hashed_password=get_password_hash(password, context=self._password_context),
        )
        try:
            await self._admins.add(admin)
        except DuplicateKeyError as exc:
            raise DuplicateIdentityError("Admin already exists") from exc
        logger.info("Admin registered", extra={"admin_id": str(admin.id)})
        return admin

    async def register_user(
        self,
        *,
        name: str,
        email: str,
        password: str,
        designation: str | None = None,
    ) -> User:
        """Persist a new user; fails with ``DuplicateIdentityError`` if the email is taken."""
        email = normalise_email(email)
        if await self._users.get_by_email(email) is not None:
            raise DuplicateIdentityError("User already exists")
        user = User(
            name=name,
            email=email,
            designation=designation,
            hashed_password=get_password_hash(password, context=self._password_context),
        )
        try:
            await self._users.add(user)
        except DuplicateKeyError as exc:
            raise DuplicateIdentityError("User already exists") from exc
        logger.info("User registered", extra={"user_id": str(user.id)})
        return user

    async def verify_admin_credentials(self, email: str, password: str) -> Admin:
        admin = await self._admins.get_by_email(normalise_email(email))
        if admin is None:
            raise NotFoundError("Admin not found")
        if not verify_password(password, admin.hashed_password, context=self._password_context):
            raise InvalidCredentialsError()
        return admin

    async def verify_user_credentials(self, email: str, password: str) -> User:
        user = await self._users.get_by_email(normalise_email(email))
        if user is None:
            raise NotFoundError("User not found")
        if not verify_password(password, user.hashed_password, context=self._password_context):
            raise InvalidCredentialsError()
        return user

    async def get_admin(self, admin_id: object) -> Admin:
        object_id = parse_object_id(admin_id)
        admin = await self._admins.get(object_id) if object_id is not None else None
        if admin is None:
            raise NotFoundError("Admin not found")
        return admin

    async def get_user(self, user_id: object) -> User:
        object_id = parse_object_id(user_id)
        user = await self._users.get(object_id) if object_id is not None else None
        if user is None:
            raise NotFoundError("User not found")
        return user

    async def list_users(self) -> list[User]:
        """Return all registered users."""
        return await self._users.list()

    async def list_admins_by_ids(self, ids: Sequence[object]) -> list[Admin]:
        return await self._admins.list_by_ids(_valid_ids(ids))

    async def list_users_by_ids(self, ids: Sequence[object]) -> list[User]:
        return await self._users.list_by_ids(_valid_ids(ids))


def _valid_ids(ids: Sequence[object]) -> list:
    parsed = (parse_object_id(value) for value in ids)
    return list({object_id for object_id in parsed if object_id is not None})


__all__ = ["CredentialStore", "normalise_email"]
