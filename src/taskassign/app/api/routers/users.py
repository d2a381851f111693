"""User signup, login, profile and role routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ...core.guard import Identity
from ...core.policy import Operation
from ...deps import AuthServiceDependency, CredentialStoreDependency, require
from ...schemas import (
    LoginRequest,
    LoginResponse,
    MessageResponse,
    RoleResponse,
    UserPublic,
    UserSignupRequest,
)

router = APIRouter(tags=["users"])


@router.post(
    "/user/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def user_signup(
    payload: UserSignupRequest,
    credentials: CredentialStoreDependency,
) -> MessageResponse:
    await credentials.register_user(
        name=payload.name,
        email=payload.email,
        password=payload.password,
        designation=payload.designation,
    )
    return MessageResponse(message="User signed up successfully")


@router.post(
    "/user/login",
    response_model=LoginResponse,
    summary="Authenticate a user using email and password",
)
async def user_login(payload: LoginRequest, auth: AuthServiceDependency) -> LoginResponse:
    issued = await auth.login_user(payload.email, payload.password)
    return LoginResponse(token=issued.token)


@router.get("/users", response_model=list[UserPublic], summary="List all users")
async def list_users(
    _: Annotated[Identity, Depends(require(Operation.LIST_USERS))],
    credentials: CredentialStoreDependency,
) -> list[UserPublic]:
    users = await credentials.list_users()
    return [UserPublic.from_document(user) for user in users]


@router.get("/users/me", response_model=UserPublic, summary="Return the authenticated user")
async def read_current_user(
    identity: Annotated[Identity, Depends(require(Operation.READ_OWN_PROFILE))],
    credentials: CredentialStoreDependency,
) -> UserPublic:
    user = await credentials.get_user(identity.subject_id)
    return UserPublic.from_document(user)


@router.get("/api/user/role", response_model=RoleResponse, summary="Return the caller's role")
async def read_role(
    identity: Annotated[Identity, Depends(require(Operation.READ_ROLE))],
) -> RoleResponse:
    return RoleResponse(role=identity.role)
