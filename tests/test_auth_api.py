from __future__ import annotations

import time

import pytest
from httpx import AsyncClient
from jose import jwt

from conftest import TEST_SECRET

pytestmark = pytest.mark.asyncio


async def test_admin_signup_and_login(client: AsyncClient) -> None:
    payload = {"name": "Ada", "email": "ada@example.com", "password": "pw-123"}

    signup = await client.post("/admin/signup", json=payload)
    assert signup.status_code == 201
    assert signup.json() == {"message": "Admin registered successfully"}

    login = await client.post("/admin/login", json={"email": "ada@example.com", "password": "pw-123"})
    assert login.status_code == 200
    body = login.json()
    assert body["message"] == "Login successful"
    claims = jwt.decode(body["token"], TEST_SECRET, algorithms=["HS256"])
    assert claims["role"] == "admin"
    assert claims["id"]


async def test_duplicate_admin_signup(client: AsyncClient) -> None:
    payload = {"name": "Ada", "email": "ada@example.com", "password": "pw-123"}
    await client.post("/admin/signup", json=payload)

    response = await client.post("/admin/signup", json=payload)

    assert response.status_code == 400
    assert response.json()["message"] == "Admin already exists"


async def test_user_signup_and_login(client: AsyncClient) -> None:
    signup = await client.post(
        "/user/signup",
        json={"name": "Uma", "email": "uma@example.com", "password": "pw", "designation": "QA"},
    )
    assert signup.status_code == 201
    assert signup.json() == {"message": "User signed up successfully"}

    login = await client.post("/user/login", json={"email": "uma@example.com", "password": "pw"})
    assert login.status_code == 200
    claims = jwt.decode(login.json()["token"], TEST_SECRET, algorithms=["HS256"])
    assert claims["role"] == "user"


async def test_signup_rejects_invalid_email(client: AsyncClient) -> None:
    response = await client.post(
        "/user/signup",
        json={"name": "Uma", "email": "not-an-email", "password": "pw"},
    )

    assert response.status_code == 422
    assert response.json()["code"] == "validation_error"


async def test_login_failures(client: AsyncClient, create_user) -> None:
    user = await create_user()

    wrong = await client.post("/user/login", json={"email": user.email, "password": "nope"})
    assert wrong.status_code == 401
    assert wrong.json()["message"] == "Invalid credentials"

    unknown = await client.post("/user/login", json={"email": "ghost@example.com", "password": "pw"})
    assert unknown.status_code == 404
    assert unknown.json()["message"] == "User not found"

    wrong_kind = await client.post("/admin/login", json={"email": user.email, "password": user.password})
    assert wrong_kind.status_code == 404
    assert wrong_kind.json()["message"] == "Admin not found"


async def test_protected_route_without_token(client: AsyncClient) -> None:
    response = await client.get("/api/user/role")

    assert response.status_code == 401
    assert response.json()["message"] == "No token provided"
    assert response.headers["WWW-Authenticate"] == "Bearer"


async def test_protected_route_with_invalid_token(client: AsyncClient) -> None:
    response = await client.get("/api/user/role", headers={"Authorization": "Bearer junk"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"


async def test_role_endpoint_reports_token_role(client: AsyncClient, create_admin, create_user) -> None:
    admin = await create_admin()
    user = await create_user()

    admin_role = await client.get("/api/user/role", headers=admin.headers)
    user_role = await client.get("/api/user/role", headers=user.headers)

    assert admin_role.json() == {"role": "admin"}
    assert user_role.json() == {"role": "user"}


async def test_signed_token_without_role_is_forbidden(client: AsyncClient, create_user) -> None:
    user = await create_user()
    now = int(time.time())
    token = jwt.encode(
        {"id": user.id, "iat": now, "exp": now + 3600},
        TEST_SECRET,
        algorithm="HS256",
    )
    headers = {"Authorization": f"Bearer {token}"}

    role = await client.get("/api/user/role", headers=headers)
    own_tasks = await client.get("/tasks/user", headers=headers)

    assert role.status_code == 403
    assert role.json()["code"] == "forbidden"
    assert role.json()["message"] == "Role not found"
    assert own_tasks.status_code == 403


async def test_signed_token_with_unknown_role_is_unauthorized(client: AsyncClient, create_user) -> None:
    user = await create_user()
    now = int(time.time())
    token = jwt.encode(
        {"id": user.id, "role": "superuser", "iat": now, "exp": now + 3600},
        TEST_SECRET,
        algorithm="HS256",
    )

    response = await client.get("/api/user/role", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token"
