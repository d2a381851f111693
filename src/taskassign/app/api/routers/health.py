"""Liveness and readiness check for orchestrators."""

from __future__ import annotations

from fastapi import APIRouter, Response, status

from ...db import is_document_store_ready
from ...deps import SettingsDependency
from ...schemas.system import HealthCheckResponse

router = APIRouter(tags=["system"])


@router.get(
    "/healthz",
    response_model=HealthCheckResponse,
    responses={status.HTTP_503_SERVICE_UNAVAILABLE: {"model": HealthCheckResponse}},
    summary="Report whether the service can serve task and credential requests",
)
async def read_health(settings: SettingsDependency, response: Response) -> HealthCheckResponse:
    ready = is_document_store_ready()
    if not ready:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE
    return HealthCheckResponse(
        status="ok" if ready else "unavailable",
        service=settings.project_name,
        version=settings.version,
        document_store="ready" if ready else "not initialised",
    )
