from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest
from jose import jwt

from taskassign.app.core.security import (
    TokenInvalidError,
    TokenIssuer,
    TokenMissingError,
    TokenService,
    TokenVerifier,
    build_password_context,
    get_password_hash,
    verify_password,
)
from taskassign.app.models import Role

SUBJECT_ID = "665f1c2e9b1d4a7f0c3e2a0b"


def _clock(offset: timedelta):
    return lambda: datetime.now(timezone.utc) + offset


def _flip(token: str, index: int) -> str:
    replacement = "A" if token[index] != "A" else "B"
    return token[:index] + replacement + token[index + 1 :]


def test_password_hash_is_salted_and_verifiable() -> None:
    context = build_password_context(4)
    first = get_password_hash("s3cret!", context=context)
    second = get_password_hash("s3cret!", context=context)

    assert first != "s3cret!"
    assert first != second
    assert verify_password("s3cret!", first, context=context)
    assert not verify_password("wrong", first, context=context)


def test_verify_password_rejects_malformed_hash() -> None:
    assert verify_password("s3cret!", "not-a-bcrypt-hash") is False


def test_token_round_trip_preserves_identity() -> None:
    service = TokenService("secret")
    issued = service.issue(SUBJECT_ID, Role.ADMIN)

    claims = service.verify(issued.token)

    assert claims.subject_id == SUBJECT_ID
    assert claims.role is Role.ADMIN
    assert claims.expires_at - claims.issued_at == timedelta(days=365)
    assert isinstance(service, TokenIssuer)
    assert isinstance(service, TokenVerifier)


def test_token_valid_until_expiry() -> None:
    issued = TokenService("secret", clock=_clock(-timedelta(days=364))).issue(SUBJECT_ID, Role.USER)

    assert TokenService("secret").verify(issued.token).role is Role.USER


def test_token_rejected_after_expiry() -> None:
    issued = TokenService("secret", clock=_clock(-timedelta(days=366))).issue(SUBJECT_ID, Role.USER)

    with pytest.raises(TokenInvalidError):
        TokenService("secret").verify(issued.token)


def test_token_signed_with_other_secret_is_rejected() -> None:
    issued = TokenService("other-secret").issue(SUBJECT_ID, Role.USER)

    with pytest.raises(TokenInvalidError):
        TokenService("secret").verify(issued.token)


@pytest.mark.parametrize("segment", [1, 2])
def test_tampered_token_is_rejected(segment: int) -> None:
    service = TokenService("secret")
    token = service.issue(SUBJECT_ID, Role.USER).token
    parts = token.split(".")
    middle = sum(len(part) + 1 for part in parts[:segment]) + len(parts[segment]) // 2

    with pytest.raises(TokenInvalidError):
        service.verify(_flip(token, middle))


@pytest.mark.parametrize("token", [None, ""])
def test_missing_token_is_distinguished(token: str | None) -> None:
    with pytest.raises(TokenMissingError):
        TokenService("secret").verify(token)


def test_token_service_requires_secret() -> None:
    with pytest.raises(ValueError):
        TokenService("")


def _sign(payload: dict) -> str:
    now = datetime.now(timezone.utc)
    claims = {"iat": int(now.timestamp()), "exp": int((now + timedelta(days=1)).timestamp())}
    claims.update(payload)
    return jwt.encode(claims, "secret", algorithm="HS256")


def test_token_without_role_verifies_with_no_role() -> None:
    claims = TokenService("secret").verify(_sign({"id": SUBJECT_ID}))

    assert claims.subject_id == SUBJECT_ID
    assert claims.role is None


def test_token_with_unknown_role_is_rejected() -> None:
    with pytest.raises(TokenInvalidError):
        TokenService("secret").verify(_sign({"id": SUBJECT_ID, "role": "superuser"}))


def test_token_without_subject_is_rejected() -> None:
    with pytest.raises(TokenInvalidError):
        TokenService("secret").verify(_sign({"role": "user"}))
