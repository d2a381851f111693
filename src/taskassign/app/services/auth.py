"""Login workflows turning verified credentials into identity tokens."""

from __future__ import annotations

import logging

from ..core.security import IssuedToken, TokenIssuer
from ..models import Role
from .credentials import CredentialStore

logger = logging.getLogger(__name__)


class AuthService:
    """Issue identity tokens for admins and users presenting valid credentials."""

    def __init__(self, credentials: CredentialStore, tokens: TokenIssuer) -> None:
        self._credentials = credentials
        self._tokens = tokens

    async def login_admin(self, email: str, password: str) -> IssuedToken:
        admin = await self._credentials.verify_admin_credentials(email, password)
        logger.info("Admin logged in", extra={"admin_id": str(admin.id)})
        return self._tokens.issue(str(admin.id), Role.ADMIN)

    async def login_user(self, email: str, password: str) -> IssuedToken:
        user = await self._credentials.verify_user_credentials(email, password)
        logger.info("User logged in", extra={"user_id": str(user.id)})
        return self._tokens.issue(str(user.id), Role.USER)


__all__ = ["AuthService"]
