from __future__ import annotations

import pytest

from auth_backend.shared.config import AppConfig, JwtConfig, SecurityConfig


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in (
        "APP_ENV",
        "JWT_SECRET",
        "JWT_EXPIRES_IN",
        "JWT_REVOCATION_CHECK",
        "ALLOWED_ORIGINS",
        "ENABLE_HSTS",
        "DATABASE_URL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_defaults() -> None:
    config = AppConfig()

    assert config.jwt.expires_in == 3600
    assert config.jwt.revocation_check is False
    assert config.database.url == "sqlite:///app.db"
    assert config.security.allowed_origins == ["*"]
    assert not config.is_production()


def test_environment_overrides(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("JWT_SECRET", "from-env")
    monkeypatch.setenv("JWT_EXPIRES_IN", "900")
    monkeypatch.setenv("JWT_REVOCATION_CHECK", "yes")
    monkeypatch.setenv("ALLOWED_ORIGINS", "https://a.example, https://b.example,")
    monkeypatch.setenv("ENABLE_HSTS", "1")

    config = AppConfig()

    assert config.jwt.secret == "from-env"
    assert config.jwt.expires_in == 900
    assert config.jwt.revocation_check is True
    assert config.security.allowed_origins == ["https://a.example", "https://b.example"]
    assert config.security.enable_hsts is True


def test_empty_secret_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtConfig(secret="")


def test_non_positive_lifetime_is_rejected() -> None:
    with pytest.raises(ValueError):
        JwtConfig(secret="x", expires_in=0)


def test_production_refuses_default_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")

    with pytest.raises(SystemExit):
        AppConfig()


def test_production_with_strong_secret(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("APP_ENV", "production")
    monkeypatch.setenv("JWT_SECRET", "Zq3v0Y8dS1m5rT7uW2xB4nK6pL9cH0fJ")

    config = AppConfig(security=SecurityConfig(allowed_origins=["https://app.example"]))

    assert config.is_production()
