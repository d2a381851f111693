"""Application settings powered by ``pydantic-settings``."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal, Sequence

from pydantic import AliasChoices, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ... import __version__ as package_version


def _resolve_project_dir() -> Path:
    """Locate the repository root holding ``pyproject.toml``."""

    current = Path(__file__).resolve()
    for parent in current.parents:
        if (parent / "pyproject.toml").exists():
            return parent
    return Path.cwd()


PROJECT_DIR = _resolve_project_dir()

EnvironmentName = Literal["development", "test", "ci"]

_ENVIRONMENT_ALIASES: dict[str, EnvironmentName] = {
    "development": "development",
    "dev": "development",
    "test": "test",
    "testing": "test",
    "ci": "ci",
}

_ENVIRONMENT_PROFILES: dict[EnvironmentName, dict[str, Any]] = {
    "development": {
        "log_level": "DEBUG",
        "reload": True,
    },
    "test": {
        "log_level": "WARNING",
        "reload": False,
    },
    "ci": {
        "log_level": "INFO",
        "reload": False,
    },
}


class Settings(BaseSettings):
    """Runtime configuration for the task assignment service."""

    model_config = SettingsConfigDict(
        env_prefix="TASKASSIGN_",
        env_file=(PROJECT_DIR / ".env",),
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )

    project_name: str = "Task Assignment Service"
    environment: EnvironmentName = Field(default="development", alias="ENVIRONMENT")
    api_prefix: str = Field(default="", alias="API_PREFIX")
    version: str = Field(default=package_version, alias="VERSION")

    mongo_url: str = Field(
        default="mongodb://localhost:27017",
        validation_alias=AliasChoices("mongo_url", "MONGO_URL", "URL"),
    )
    mongo_database: str = Field(default="task_assignment", alias="MONGO_DATABASE")
    mongo_connect_timeout_ms: int = Field(default=5000, alias="MONGO_CONNECT_TIMEOUT_MS")

    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"], alias="ALLOWED_ORIGINS")
    cors_allow_credentials: bool = Field(default=False, alias="ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(default_factory=lambda: ["*"], alias="ALLOW_METHODS")
    cors_allow_headers: list[str] = Field(default_factory=lambda: ["*"], alias="ALLOW_HEADERS")

    app_host: str = Field(default="0.0.0.0", alias="APP_HOST")
    app_port: int = Field(
        default=5002,
        validation_alias=AliasChoices("app_port", "APP_PORT", "PORT"),
    )
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    reload: bool = Field(default=True, alias="RELOAD")

    jwt_secret_key: str = Field(
        default="change-me",
        validation_alias=AliasChoices("jwt_secret_key", "JWT_SECRET_KEY", "JWT_SECRET"),
    )
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    token_expire_days: int = Field(default=365, alias="TOKEN_EXPIRE_DAYS")
    password_hash_rounds: int = Field(default=10, alias="PASSWORD_HASH_ROUNDS")

    @field_validator("environment", mode="before")
    @classmethod
    def _normalise_environment(cls, value: object) -> EnvironmentName:
        if isinstance(value, str):
            normalized = value.strip().lower()
        else:
            normalized = ""
        return _ENVIRONMENT_ALIASES.get(normalized or "development", "development")

    @field_validator(
        "cors_allow_origins",
        "cors_allow_methods",
        "cors_allow_headers",
        mode="before",
    )
    @classmethod
    def _coerce_comma_separated(cls, value: object) -> list[str]:
        """Allow comma separated strings for CORS configuration."""

        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        if isinstance(value, Sequence):
            return [str(item) for item in value if str(item).strip()]
        return []

    @field_validator("token_expire_days", mode="before")
    @classmethod
    def _ensure_positive_expiry(cls, value: object) -> int:
        try:
            days = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 365
        return max(days, 1)

    @field_validator("password_hash_rounds", mode="before")
    @classmethod
    def _clamp_hash_rounds(cls, value: object) -> int:
        # bcrypt accepts log rounds in the 4..31 range
        try:
            rounds = int(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return 10
        return min(max(rounds, 4), 31)

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalise_log_level(cls, value: object) -> str:
        if not isinstance(value, str):
            return "INFO"
        return value.upper()

    @model_validator(mode="after")
    def _apply_environment_profile(self) -> "Settings":
        profile = _ENVIRONMENT_PROFILES[self.environment]
        fields_set = set(getattr(self, "model_fields_set", set()))
        for field_name, value in profile.items():
            if field_name not in fields_set:
                setattr(self, field_name, value)
        return self


@lru_cache()
def get_settings() -> Settings:
    """Return a cached ``Settings`` instance."""

    return Settings()


__all__ = ["EnvironmentName", "Settings", "get_settings"]
