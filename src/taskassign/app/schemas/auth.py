"""Schemas describing signup and login payloads."""

from __future__ import annotations

from pydantic import EmailStr, Field

from ..models import Role
from .base import CamelModel


class AdminSignupRequest(CamelModel):
    """Incoming payload for registering a new administrator."""

    name: str = Field(min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(min_length=1)


class UserSignupRequest(AdminSignupRequest):
    """Incoming payload for registering a new user."""

    designation: str | None = Field(default=None, max_length=255)


class LoginRequest(CamelModel):
    """Email and password credentials."""

    email: str = Field(min_length=1)
    password: str = Field(min_length=1)


class LoginResponse(CamelModel):
    """Signed identity token returned after a successful login."""

    message: str = "Login successful"
    token: str


class RoleResponse(CamelModel):
    """Role carried by the caller's identity token."""

    role: Role


__all__ = [
    "AdminSignupRequest",
    "LoginRequest",
    "LoginResponse",
    "RoleResponse",
    "UserSignupRequest",
]
