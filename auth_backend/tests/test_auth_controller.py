from __future__ import annotations

from datetime import UTC, datetime
from typing import cast
from unittest.mock import MagicMock

import pytest
from flask import Flask

from auth_backend.application.use_cases.users.authorize_request import AuthorizeRequestUseCase
from auth_backend.application.use_cases.users.logout_user import LogoutUserUseCase
from auth_backend.application.use_cases.users.register_user import RegisterUserUseCase
from auth_backend.domain.users.entities import Identity, LoginResult, PublicUser
from auth_backend.domain.users.exceptions import (InvalidCredentialsError,
                                                  LogoutForbiddenError,
                                                  MissingTokenError)
from auth_backend.interfaces.http.controllers.auth_controller import AuthController
from auth_backend.shared.errors import ValidationError
from auth_backend.shared.middleware.error_handler import configure_error_handling

ALICE = Identity(user_id="user-1", email="alice@example.com")


class StubAuthorize:
    def execute(self, header: str | None) -> Identity:
        if header != "Bearer good-token":
            raise MissingTokenError()
        return ALICE


@pytest.fixture()
def flask_app() -> Flask:
    app = Flask(__name__)
    configure_error_handling(app, debug_mode=False)
    return app


def _register_controller(app: Flask, **overrides) -> AuthController:
    deps = {
        "register_use_case": MagicMock(),
        "login_use_case": MagicMock(),
        "logout_use_case": MagicMock(),
        "authorize_use_case": cast(AuthorizeRequestUseCase, StubAuthorize()),
        "audit": MagicMock(),
    }
    deps.update(overrides)
    controller = AuthController(**deps)
    app.register_blueprint(controller.as_blueprint())
    return controller


def test_register_returns_public_user(flask_app: Flask) -> None:
    register_called: dict[str, tuple[str, str]] = {}

    class StubRegister:
        def execute(self, email: str, password: str) -> PublicUser:
            register_called["args"] = (email, password)
            return PublicUser(
                id="user-1",
                email=email.lower(),
                created_at=datetime(2025, 5, 1, 12, 0, tzinfo=UTC),
            )

    _register_controller(flask_app, register_use_case=cast(RegisterUserUseCase, StubRegister()))

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/register", json={"email": "Alice@Example.com", "password": "secret12"}
        )

    assert response.status_code == 201
    assert register_called["args"] == ("Alice@Example.com", "secret12")
    payload = response.get_json()
    assert payload["id"] == "user-1"
    assert payload["email"] == "alice@example.com"
    assert payload["createdAt"].startswith("2025-05-01T12:00:00")
    assert "password_hash" not in payload


def test_register_validation_error_returns_400(flask_app: Flask) -> None:
    register = MagicMock()
    register.execute.side_effect = ValidationError("password_too_short", "too short")
    _register_controller(flask_app, register_use_case=register)

    with flask_app.test_client() as client:
        response = client.post("/auth/register", json={"email": "a@b.co", "password": "1"})

    assert response.status_code == 400
    assert response.get_json()["error"] == "password_too_short"


def test_login_invalid_payload_returns_400(flask_app: Flask) -> None:
    login = MagicMock()
    _register_controller(flask_app, login_use_case=login)

    with flask_app.test_client() as client:
        response = client.post("/auth/login", json={"email": "alice@example.com"})

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["error"] == "invalid_request_body"
    assert payload["context"]["fields"] == ["password"]
    login.authenticate.assert_not_called()


def test_login_returns_access_token(flask_app: Flask) -> None:
    login = MagicMock()
    login.authenticate.return_value = LoginResult(user_id="user-1", access_token="signed.jwt.value")
    audit = MagicMock()
    _register_controller(flask_app, login_use_case=login, audit=audit)

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "secret12"}
        )

    assert response.status_code == 200
    assert response.get_json() == {"access_token": "signed.jwt.value"}
    assert audit.log.call_args.kwargs["success"] is True
    assert audit.log.call_args.kwargs["user_id"] == "user-1"


def test_login_failure_returns_401_and_audits(flask_app: Flask) -> None:
    login = MagicMock()
    login.authenticate.side_effect = InvalidCredentialsError()
    audit = MagicMock()
    _register_controller(flask_app, login_use_case=login, audit=audit)

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/login", json={"email": "alice@example.com", "password": "wrong-one"}
        )

    assert response.status_code == 401
    assert response.get_json() == {
        "error": "invalid_credentials",
        "message": "Invalid email or password",
    }
    assert audit.log.call_args.kwargs["success"] is False


def test_profile_requires_bearer_token(flask_app: Flask) -> None:
    _register_controller(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/auth/profile")

    assert response.status_code == 401
    assert response.get_json()["error"] == "missing_token"


def test_profile_returns_identity(flask_app: Flask) -> None:
    _register_controller(flask_app)

    with flask_app.test_client() as client:
        response = client.post("/auth/profile", headers={"Authorization": "Bearer good-token"})

    assert response.status_code == 200
    assert response.get_json() == {"userId": "user-1", "email": "alice@example.com"}


def test_logout_passes_identity_and_email(flask_app: Flask) -> None:
    logout = MagicMock()
    logout.execute.return_value = True
    _register_controller(flask_app, logout_use_case=logout)

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/logout",
            json={"email": "alice@example.com"},
            headers={"Authorization": "Bearer good-token"},
        )

    assert response.status_code == 200
    assert response.get_json() == {"message": "Logged out successfully"}
    logout.execute.assert_called_once_with(ALICE, "alice@example.com")


def test_logout_of_other_account_returns_403(flask_app: Flask) -> None:
    logout = MagicMock()
    logout.execute.side_effect = LogoutForbiddenError()
    _register_controller(flask_app, logout_use_case=cast(LogoutUserUseCase, logout))

    with flask_app.test_client() as client:
        response = client.post(
            "/auth/logout",
            json={"email": "bob@example.com"},
            headers={"Authorization": "Bearer good-token"},
        )

    assert response.status_code == 403
    assert response.get_json()["error"] == "logout_forbidden"


def test_guard_exposes_only_identity(flask_app: Flask) -> None:
    from flask import g, jsonify

    from auth_backend.interfaces.http.guards import bearer_guard

    @flask_app.route("/guarded", methods=["POST"])
    @bearer_guard(cast(AuthorizeRequestUseCase, StubAuthorize()))
    def guarded():
        return jsonify({"user": g.identity.user_id, "token_kept": "access_token" in g})

    with flask_app.test_client() as client:
        response = client.post("/guarded", headers={"Authorization": "Bearer good-token"})

    assert response.get_json() == {"user": "user-1", "token_kept": False}
