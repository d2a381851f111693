from __future__ import annotations

import pytest
from fastapi import status
from httpx import ASGITransport, AsyncClient

from taskassign import __version__
from taskassign.app.core.config import Settings
from taskassign.app.db import set_document_client
from taskassign.app.main import create_app

pytestmark = pytest.mark.asyncio


async def test_health_reports_ready_store(client: AsyncClient) -> None:
    response = await client.get("/healthz")

    assert response.status_code == status.HTTP_200_OK
    assert response.json() == {
        "status": "ok",
        "service": "Task Assignment Service",
        "version": __version__,
        "document_store": "ready",
    }


async def test_health_is_unavailable_before_store_initialisation(settings: Settings) -> None:
    set_document_client(None)
    transport = ASGITransport(app=create_app(settings))

    async with AsyncClient(transport=transport, base_url="http://testserver") as http_client:
        response = await http_client.get("/healthz")

    assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
    assert response.json()["status"] == "unavailable"
    assert response.json()["document_store"] == "not initialised"
