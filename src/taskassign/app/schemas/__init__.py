"""Pydantic schemas for public interfaces."""

from __future__ import annotations

from .auth import (
    AdminSignupRequest,
    LoginRequest,
    LoginResponse,
    RoleResponse,
    UserSignupRequest,
)
from .system import ErrorResponse, HealthCheckResponse, MessageResponse, RootResponse
from .task import (
    PartySummary,
    TaskAssignRequest,
    TaskRead,
    TaskStatusUpdate,
    TaskUpdate,
    TaskUpdateResponse,
)
from .user import AdminPublic, UserPublic

__all__ = [
    "AdminPublic",
    "AdminSignupRequest",
    "ErrorResponse",
    "HealthCheckResponse",
    "LoginRequest",
    "LoginResponse",
    "MessageResponse",
    "PartySummary",
    "RoleResponse",
    "RootResponse",
    "TaskAssignRequest",
    "TaskRead",
    "TaskStatusUpdate",
    "TaskUpdate",
    "TaskUpdateResponse",
    "UserPublic",
    "UserSignupRequest",
]
