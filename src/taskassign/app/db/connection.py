"""Document store lifecycle: client injection, beanie initialisation and teardown."""

from __future__ import annotations

import asyncio
import logging

from beanie import init_beanie
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from ..core.config import Settings, get_settings
from ..models import DOCUMENT_MODELS

logger = logging.getLogger(__name__)

_client: AsyncIOMotorClient | None = None
_database: AsyncIOMotorDatabase | None = None
_initialized = False
_lock = asyncio.Lock()


def set_document_client(client: AsyncIOMotorClient | None) -> None:
    """Inject a custom motor client instance (primarily for tests)."""

    global _client, _database, _initialized
    _client = client
    _database = None
    _initialized = False


async def init_document_store(
    *,
    client: AsyncIOMotorClient | None = None,
    database_name: str | None = None,
    settings: Settings | None = None,
    force: bool = False,
) -> None:
    """Bind the beanie document models to the configured database.

    ``settings`` defaults to the process-wide configuration; an explicit
    ``client`` or ``database_name`` wins over it.
    """

    global _client, _database, _initialized

    async with _lock:
        if client is not None:
            set_document_client(client)

        if _initialized and not force:
            return

        settings = settings or get_settings()
        if _client is None:
            _client = AsyncIOMotorClient(
                settings.mongo_url,
                tz_aware=True,
                uuidRepresentation="standard",
                serverSelectionTimeoutMS=settings.mongo_connect_timeout_ms,
            )
        _database = _client[database_name or settings.mongo_database]

        await init_beanie(database=_database, document_models=DOCUMENT_MODELS)
        _initialized = True
        logger.info("Document store initialised", extra={"database": _database.name})


def is_document_store_ready() -> bool:
    """Return whether the document models are bound to a database."""

    return _initialized


async def ping_document_store() -> None:
    """Issue a single round trip to the server; raises ``PyMongoError`` on failure."""

    if _client is None:
        raise RuntimeError("Document store has not been initialised.")
    await _client.admin.command("ping")


async def close_document_store() -> None:
    """Dispose the motor client."""

    global _client, _database, _initialized
    client = _client
    if client is not None:
        client.close()
    _client = None
    _database = None
    _initialized = False


__all__ = [
    "close_document_store",
    "init_document_store",
    "is_document_store_ready",
    "ping_document_store",
    "set_document_client",
]
