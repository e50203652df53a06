from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

import pytest

from auth_backend.infrastructure.container import Container
from auth_backend.shared.config import AppConfig, DatabaseConfig, JwtConfig

TEST_SECRET = "test-secret-key-for-unit-tests"


@pytest.fixture(autouse=True)
def isolated_log_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("LOG_FILE", str(tmp_path / "app.log"))


def make_config(*, revocation_check: bool = False) -> AppConfig:
    return AppConfig(
        app_env="test",
        database=DatabaseConfig(url="sqlite://"),
        jwt=JwtConfig(secret=TEST_SECRET, expires_in=3600, revocation_check=revocation_check),
    )


@pytest.fixture()
def container() -> Iterator[Container]:
    c = Container(make_config())
    yield c
    c.shutdown()


@pytest.fixture()
def revoking_container() -> Iterator[Container]:
    c = Container(make_config(revocation_check=True))
    yield c
    c.shutdown()
