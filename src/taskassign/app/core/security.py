"""Security helpers for password hashing and identity token management."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Protocol, runtime_checkable

from jose import JWTError, jwt
from passlib.context import CryptContext

from ..models.common import Role
from .config import Settings

DEFAULT_HASH_ROUNDS = 10


def build_password_context(rounds: int = DEFAULT_HASH_ROUNDS) -> CryptContext:
    """Return a bcrypt context using a fixed cost factor."""

    return CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)


pwd_context = build_password_context()


def get_password_hash(password: str, *, context: CryptContext | None = None) -> str:
    """Return a salted one-way hash of ``password``."""

    return (context or pwd_context).hash(password)


def verify_password(
    plain_password: str,
    hashed_password: str,
    *,
    context: CryptContext | None = None,
) -> bool:
    """Verify a plain password against its hashed counterpart."""

    try:
        return (context or pwd_context).verify(plain_password, hashed_password)
    except ValueError:
        # Malformed stored hash.
        return False


class TokenError(Exception):
    """Base class for identity token failures."""


class TokenMissingError(TokenError):
    """No token was presented."""


class TokenInvalidError(TokenError):
    """The token failed signature, expiry or claim checks."""


@dataclass(frozen=True, slots=True)
class IssuedToken:
    """A signed identity token and its expiry."""

    token: str
    expires_at: datetime


@dataclass(frozen=True, slots=True)
class TokenClaims:
    """Identity recovered from a verified token."""

    subject_id: str
    role: Role | None
    issued_at: datetime
    expires_at: datetime


@runtime_checkable
class TokenIssuer(Protocol):
    """Anything able to mint identity tokens."""

    def issue(self, subject_id: str, role: Role) -> IssuedToken:  # pragma: no cover - interface definition
        ...


@runtime_checkable
class TokenVerifier(Protocol):
    """Anything able to verify identity tokens."""

    def verify(self, token: str | None) -> TokenClaims:  # pragma: no cover - interface definition
        ...


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _as_datetime(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value), tz=timezone.utc)


class TokenService:
    """Stateless signed-token issuer and verifier.

    The signing secret never leaves this object; callers depend on the
    ``TokenIssuer``/``TokenVerifier`` protocols so that another scheme
    (short-lived tokens, a revocation list) can be dropped in later.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        ttl: timedelta = timedelta(days=365),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        if not secret:
            raise ValueError("A signing secret is required.")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = ttl
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            ttl=timedelta(days=settings.token_expire_days),
        )

    def issue(self, subject_id: str, role: Role) -> IssuedToken:
        """Sign a token embedding ``subject_id`` and ``role``."""

        now = self._clock()
        expires_at = now + self._ttl
        payload: dict[str, Any] = {
            "id": str(subject_id),
            "role": Role(role).value,
            "iat": int(now.timestamp()),
            "exp": int(expires_at.timestamp()),
        }
        token = jwt.encode(payload, self._secret, algorithm=self._algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str | None) -> TokenClaims:
        """Return the claims embedded in ``token`` or raise a ``TokenError``."""

        if not token:
            raise TokenMissingError("No token provided")
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as exc:
            raise TokenInvalidError("Invalid token") from exc

        subject_id = payload.get("id")
        if not isinstance(subject_id, str) or not subject_id:
            raise TokenInvalidError("Invalid token")
        raw_role = payload.get("role")
        try:
            # A token without a role still authenticates; the policy denies it.
            role = Role(raw_role) if raw_role else None
            issued_at = _as_datetime(payload["iat"])
            expires_at = _as_datetime(payload["exp"])
        except (KeyError, TypeError, ValueError) as exc:
            raise TokenInvalidError("Invalid token") from exc
        return TokenClaims(
            subject_id=subject_id,
            role=role,
            issued_at=issued_at,
            expires_at=expires_at,
        )


__all__ = [
    "DEFAULT_HASH_ROUNDS",
    "IssuedToken",
    "TokenClaims",
    "TokenError",
    "TokenInvalidError",
    "TokenIssuer",
    "TokenMissingError",
    "TokenService",
    "TokenVerifier",
    "build_password_context",
    "get_password_hash",
    "verify_password",
]
