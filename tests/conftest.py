from __future__ import annotations

from collections.abc import AsyncIterator, Awaitable, Callable
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from itertools import count
from uuid import uuid4

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from taskassign.app.core.config import Settings
from taskassign.app.core.security import TokenService, build_password_context
from taskassign.app.db import init_document_store, set_document_client
from taskassign.app.main import create_app
from taskassign.app.services import CredentialStore

TEST_SECRET = "test-signing-secret"


@dataclass(slots=True)
class Account:
    id: str
    email: str
    password: str
    token: str

    @property
    def headers(self) -> dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


def future_due_date(days: int = 7) -> str:
    return (datetime.now(timezone.utc) + timedelta(days=days)).isoformat()


@pytest.fixture()
def settings() -> Settings:
    return Settings(
        environment="test",
        jwt_secret_key=TEST_SECRET,
        password_hash_rounds=4,
    )


@pytest.fixture()
def token_service(settings: Settings) -> TokenService:
    return TokenService.from_settings(settings)


@pytest_asyncio.fixture
async def document_store() -> AsyncIterator[AsyncMongoMockClient]:
    client = AsyncMongoMockClient(tz_aware=True)
    await init_document_store(
        client=client,
        database_name=f"taskassign_test_{uuid4().hex}",
        force=True,
    )
    try:
        yield client
    finally:
        set_document_client(None)


@pytest.fixture()
def credentials(document_store, settings: Settings) -> CredentialStore:
    return CredentialStore(password_context=build_password_context(settings.password_hash_rounds))


@pytest.fixture()
def app(document_store, settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncIterator[AsyncClient]:
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        yield http_client


@pytest_asyncio.fixture
async def create_admin(
    client: AsyncClient,
    token_service: TokenService,
) -> AsyncIterator[Callable[..., Awaitable[Account]]]:
    counter = count()

    async def _factory(*, email: str | None = None, password: str = "AdminPass123!") -> Account:
        actual_email = email or f"admin-{next(counter)}@example.com"
        response = await client.post(
            "/admin/signup",
            json={"name": "Admin Example", "email": actual_email, "password": password},
        )
        assert response.status_code == 201, response.text
        login = await client.post("/admin/login", json={"email": actual_email, "password": password})
        assert login.status_code == 200, login.text
        token = login.json()["token"]
        return Account(
            id=token_service.verify(token).subject_id,
            email=actual_email,
            password=password,
            token=token,
        )

    yield _factory


@pytest_asyncio.fixture
async def create_user(
    client: AsyncClient,
    token_service: TokenService,
) -> AsyncIterator[Callable[..., Awaitable[Account]]]:
    counter = count()

    async def _factory(
        *,
        email: str | None = None,
        password: str = "UserPass123!",
        designation: str | None = "Engineer",
    ) -> Account:
        actual_email = email or f"user-{next(counter)}@example.com"
        response = await client.post(
            "/user/signup",
            json={
                "name": "User Example",
                "email": actual_email,
                "password": password,
                "designation": designation,
            },
        )
        assert response.status_code == 201, response.text
        login = await client.post("/user/login", json={"email": actual_email, "password": password})
        assert login.status_code == 200, login.text
        token = login.json()["token"]
        return Account(
            id=token_service.verify(token).subject_id,
            email=actual_email,
            password=password,
            token=token,
        )

    yield _factory
