from __future__ import annotations

from taskassign.app.core.config import Settings


def test_environment_profiles_apply_defaults() -> None:
    dev = Settings(environment="development")
    assert dev.environment == "development"
    assert dev.log_level == "DEBUG"
    assert dev.reload is True

    test_profile = Settings(environment="test")
    assert test_profile.environment == "test"
    assert test_profile.log_level == "WARNING"
    assert test_profile.reload is False

    ci_profile = Settings(environment="ci")
    assert ci_profile.environment == "ci"
    assert ci_profile.log_level == "INFO"
    assert ci_profile.reload is False


def test_environment_aliases_are_normalised() -> None:
    alias = Settings(environment="DEV")
    assert alias.environment == "development"


def test_environment_profile_respects_explicit_overrides(monkeypatch) -> None:
    monkeypatch.setenv("LOG_LEVEL", "error")
    overridden = Settings(environment="test")
    assert overridden.log_level == "ERROR"


def test_service_variable_names_are_accepted(monkeypatch) -> None:
    monkeypatch.setenv("URL", "mongodb://db.internal:27017")
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("PORT", "6001")

    settings = Settings()

    assert settings.mongo_url == "mongodb://db.internal:27017"
    assert settings.jwt_secret_key == "from-env"
    assert settings.app_port == 6001


def test_defaults() -> None:
    settings = Settings(environment="test")

    assert settings.app_port == 5002
    assert settings.token_expire_days == 365
    assert settings.jwt_algorithm == "HS256"


def test_hash_rounds_are_clamped() -> None:
    assert Settings(password_hash_rounds=1).password_hash_rounds == 4
    assert Settings(password_hash_rounds=99).password_hash_rounds == 31
