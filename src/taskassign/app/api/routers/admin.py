"""Administrator signup, login and profile routes."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, status

from ...core.guard import Identity
from ...core.policy import Operation
from ...deps import AuthServiceDependency, CredentialStoreDependency, require
from ...schemas import AdminPublic, AdminSignupRequest, LoginRequest, LoginResponse, MessageResponse

router = APIRouter(prefix="/admin", tags=["admin"])


@router.post(
    "/signup",
    response_model=MessageResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new administrator",
)
async def admin_signup(
    payload: AdminSignupRequest,
    credentials: CredentialStoreDependency,
) -> MessageResponse:
    await credentials.register_admin(
        name=payload.name,
        email=payload.email,
        password=payload.password,
    )
    return MessageResponse(message="Admin registered successfully")


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Authenticate an administrator using email and password",
)
async def admin_login(payload: LoginRequest, auth: AuthServiceDependency) -> LoginResponse:
    issued = await auth.login_admin(payload.email, payload.password)
    return LoginResponse(token=issued.token)


@router.get("", response_model=AdminPublic, summary="Return the authenticated admin profile")
async def read_admin_profile(
    identity: Annotated[Identity, Depends(require(Operation.READ_ADMIN_PROFILE))],
    credentials: CredentialStoreDependency,
) -> AdminPublic:
    admin = await credentials.get_admin(identity.subject_id)
    return AdminPublic.from_document(admin)
