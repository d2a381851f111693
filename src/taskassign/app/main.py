"""Entry point for the task assignment service."""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from .api.routers import api_router, health
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .core.middleware import CorrelationIdMiddleware
from .db import close_document_store, init_document_store, ping_document_store
from .deps import SettingsDependency
from .errors import register_exception_handlers
from .schemas.system import RootResponse

logger = logging.getLogger(__name__)


def _normalise_prefix(raw_prefix: str) -> str:
    router_prefix = raw_prefix.strip()
    if router_prefix and not router_prefix.startswith("/"):
        router_prefix = f"/{router_prefix}"
    router_prefix = router_prefix.rstrip("/")
    if router_prefix == "/":
        router_prefix = ""
    return router_prefix


def create_app(settings: Settings | None = None) -> FastAPI:
    """Instantiate and configure the FastAPI application."""

    settings = settings or get_settings()
    configure_logging(settings)

    router_prefix = _normalise_prefix(settings.api_prefix)
    openapi_url = "/openapi.json" if not router_prefix else f"{router_prefix}/openapi.json"

    application = FastAPI(
        title=settings.project_name,
        version=settings.version,
        summary="Assign tasks to users and track them through completion.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url=openapi_url,
    )

    application.state.settings = settings
    application.dependency_overrides[get_settings] = lambda: settings

    application.add_middleware(CorrelationIdMiddleware)
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allow_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    if router_prefix:
        application.include_router(api_router, prefix=router_prefix)
    else:
        application.include_router(api_router)

    application.include_router(health.router)

    register_exception_handlers(application)

    @application.get("/", response_model=RootResponse, summary="Service metadata")
    async def read_root(current: SettingsDependency) -> RootResponse:
        """Expose minimal service metadata for API clients."""

        return RootResponse(
            name=current.project_name,
            environment=current.environment,
            version=current.version,
            api_prefix=current.api_prefix,
        )

    @application.on_event("startup")
    async def _initialise_document_store() -> None:
        try:
            await init_document_store(settings=settings)
            await ping_document_store()
        except PyMongoError as exc:
            logger.critical(
                "Document store unreachable",
                extra={"database": settings.mongo_database},
                exc_info=exc,
            )
            raise SystemExit(1) from exc
        logger.info("Service ready", extra={"port": settings.app_port})

    @application.on_event("shutdown")
    async def _dispose_document_store() -> None:
        await close_document_store()

    return application


app = create_app()


def run() -> None:
    """Console entry point serving the application with uvicorn."""

    settings: Settings = get_settings()
    uvicorn.run(
        "taskassign.app.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=settings.reload,
        log_config=None,
    )
