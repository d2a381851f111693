"""Structured JSON logging for the task assignment service.

Records are rendered as one JSON object per line. Structured ``extra`` values
(``admin_id``, ``user_id``, ``task_id`` ...) become top-level keys, except for
credential-bearing keys, whose values are replaced before anything is written.
"""

from __future__ import annotations

import json
import logging
import logging.config
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from .config import Settings
from .context import get_request_id

REDACTED = "[redacted]"

# ``input`` is the raw request body echoed back by pydantic validation errors.
SENSITIVE_KEYS = frozenset(
    {"password", "hashed_password", "hashedPassword", "token", "authorization", "input"}
)

_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "request_id", "taskName"}

# Third-party loggers that stay quiet below WARNING; pymongo command logs carry
# whole documents, stored password hashes included.
_QUIET_LOGGERS = ("pymongo", "passlib")


def redact(value: Any) -> Any:
    """Return ``value`` with every sensitive mapping key masked, recursively."""

    if isinstance(value, Mapping):
        return {
            key: REDACTED if key in SENSITIVE_KEYS else redact(item)
            for key, item in value.items()
        }
    if isinstance(value, (list, tuple)):
        return [redact(item) for item in value]
    return value


def _json_safe(value: Any) -> Any:
    try:
        json.dumps(value)
    except (TypeError, ValueError):
        return str(value)
    return value


class JsonLogFormatter(logging.Formatter):
    """Render log records as redacted JSON objects."""

    def __init__(self, *, defaults: dict[str, Any] | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self._defaults = dict(defaults or {})

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: dict[str, Any] = {
            **self._defaults,
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "request_id": getattr(record, "request_id", "-"),
        }
        extras = {
            key: value
            for key, value in record.__dict__.items()
            if key not in _STANDARD_RECORD_ATTRS and key not in payload
        }
        payload.update({key: _json_safe(value) for key, value in redact(extras).items()})

        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        if record.stack_info:
            payload["stack"] = self.formatStack(record.stack_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


class RequestContextFilter(logging.Filter):
    """Stamp each record with the request id bound by ``CorrelationIdMiddleware``."""

    def filter(self, record: logging.LogRecord) -> bool:  # type: ignore[override]
        record.request_id = get_request_id()
        return True


def _routed(level: int) -> dict[str, Any]:
    return {"handlers": ["default"], "level": level, "propagate": False}


def build_logging_config(settings: Settings) -> dict[str, Any]:
    """Return the ``dictConfig`` mapping for ``settings``."""

    level = logging.getLevelName(settings.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    quiet_level = max(level, logging.WARNING)

    loggers: dict[str, Any] = {
        "": {"handlers": ["default"], "level": level},
        "uvicorn": _routed(level),
        "uvicorn.error": _routed(level),
        "uvicorn.access": _routed(level),
    }
    loggers.update({name: {"level": quiet_level} for name in _QUIET_LOGGERS})

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "json": {
                "()": f"{__name__}.JsonLogFormatter",
                "defaults": {
                    "service": settings.project_name,
                    "environment": settings.environment,
                },
            }
        },
        "filters": {"request_context": {"()": RequestContextFilter}},
        "handlers": {
            "default": {
                "class": "logging.StreamHandler",
                "stream": "ext://sys.stdout",
                "formatter": "json",
                "level": level,
                "filters": ["request_context"],
            }
        },
        "loggers": loggers,
    }


def configure_logging(settings: Settings) -> None:
    """Install the JSON logging configuration for ``settings``."""

    logging.captureWarnings(True)
    logging.config.dictConfig(build_logging_config(settings))


__all__ = [
    "JsonLogFormatter",
    "REDACTED",
    "RequestContextFilter",
    "SENSITIVE_KEYS",
    "build_logging_config",
    "configure_logging",
    "redact",
]
