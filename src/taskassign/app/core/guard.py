"""Request-level access guard resolving bearer tokens into identities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from ..models.common import Role
from .security import TokenInvalidError, TokenMissingError, TokenVerifier


class AuthenticationFailure(str, Enum):
    """Reasons an inbound request could not be authenticated."""

    MISSING_TOKEN = "No token provided"
    INVALID_TOKEN = "Invalid token"


@dataclass(frozen=True, slots=True)
class Identity:
    """Authenticated caller resolved from a verified token."""

    subject_id: str
    role: Role | None

    @property
    def is_admin(self) -> bool:
        return self.role is Role.ADMIN


@dataclass(frozen=True, slots=True)
class AuthenticationResult:
    """Outcome of the authentication stage: an identity or a failure reason."""

    identity: Identity | None = None
    failure: AuthenticationFailure | None = None

    @property
    def authenticated(self) -> bool:
        return self.identity is not None


def extract_bearer_token(authorization: str | None) -> str | None:
    """Pull the token out of an ``Authorization`` header value.

    A header using another scheme is returned whole so that verification
    rejects it as invalid rather than missing.
    """

    if not authorization:
        return None
    scheme, _, token = authorization.strip().partition(" ")
    if scheme.lower() != "bearer":
        return authorization.strip()
    return token.strip() or None


def authenticate(authorization: str | None, verifier: TokenVerifier) -> AuthenticationResult:
    """Resolve the caller identity from an ``Authorization`` header value."""

    token = extract_bearer_token(authorization)
    try:
        claims = verifier.verify(token)
    except TokenMissingError:
        return AuthenticationResult(failure=AuthenticationFailure.MISSING_TOKEN)
    except TokenInvalidError:
        return AuthenticationResult(failure=AuthenticationFailure.INVALID_TOKEN)
    return AuthenticationResult(identity=Identity(subject_id=claims.subject_id, role=claims.role))


__all__ = [
    "AuthenticationFailure",
    "AuthenticationResult",
    "Identity",
    "authenticate",
    "extract_bearer_token",
]
