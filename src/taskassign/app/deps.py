"""Reusable FastAPI dependencies: authentication strictly before authorization."""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header
from passlib.context import CryptContext

from .core.config import Settings, get_settings
from .core.guard import Identity, authenticate
from .core.policy import Operation, authorize
from .core.security import TokenService, build_password_context
from .errors import ForbiddenError, UnauthorizedError
from .services import AuthService, CredentialStore, TaskRegistry

SettingsDependency = Annotated[Settings, Depends(get_settings)]


@lru_cache()
def _password_context(rounds: int) -> CryptContext:
    return build_password_context(rounds)


def get_token_service(settings: SettingsDependency) -> TokenService:
    """Return a token service bound to the configured secret."""

    return TokenService.from_settings(settings)


def get_credential_store(settings: SettingsDependency) -> CredentialStore:
    return CredentialStore(password_context=_password_context(settings.password_hash_rounds))


TokenServiceDependency = Annotated[TokenService, Depends(get_token_service)]
CredentialStoreDependency = Annotated[CredentialStore, Depends(get_credential_store)]


def get_auth_service(
    credentials: CredentialStoreDependency,
    tokens: TokenServiceDependency,
) -> AuthService:
    return AuthService(credentials, tokens)


def get_task_registry(credentials: CredentialStoreDependency) -> TaskRegistry:
    return TaskRegistry(credentials)


AuthServiceDependency = Annotated[AuthService, Depends(get_auth_service)]
TaskRegistryDependency = Annotated[TaskRegistry, Depends(get_task_registry)]


def get_identity(
    tokens: TokenServiceDependency,
    authorization: Annotated[str | None, Header()] = None,
) -> Identity:
    """Authenticate the request from its ``Authorization`` header."""

    result = authenticate(authorization, tokens)
    if result.identity is None:
        reason = result.failure.value if result.failure is not None else None
        raise UnauthorizedError(reason or "Could not validate credentials.")
    return result.identity


IdentityDependency = Annotated[Identity, Depends(get_identity)]


def require(operation: Operation) -> Callable[[Identity], Identity]:
    """Return a dependency authorizing ``operation`` for the authenticated identity."""

    def _dependency(identity: IdentityDependency) -> Identity:
        decision = authorize(identity, operation)
        if not decision.permitted:
            raise ForbiddenError(decision.reason or "Not enough permissions.")
        return identity

    return _dependency


__all__ = [
    "AuthServiceDependency",
    "CredentialStoreDependency",
    "IdentityDependency",
    "SettingsDependency",
    "TaskRegistryDependency",
    "TokenServiceDependency",
    "get_credential_store",
    "get_identity",
    "get_token_service",
    "require",
]
