# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from auth_backend.application.use_cases.users.authorize_request import \
    AuthorizeRequestUseCase
from auth_backend.application.use_cases.users.login_user import LoginUserUseCase
from auth_backend.application.use_cases.users.logout_user import LogoutUserUseCase
from auth_backend.application.use_cases.users.register_user import \
    RegisterUserUseCase
from auth_backend.infrastructure.audit import AuditAction, AuditLogger
from auth_backend.interfaces.http.dto.auth import (AccessTokenDTO, LoginRequestDTO,
                                                   LogoutRequestDTO, MessageDTO,
                                                   ProfileDTO, PublicUserDTO,
                                                   RegisterRequestDTO)
from auth_backend.interfaces.http.guards import bearer_guard, current_identity
from auth_backend.shared.errors import AppError
from auth_backend.shared.errors.validation import raise_validation_error
from auth_backend.shared.logging import logger


def _get_client_ip() -> str | None:
    ip_address = request.headers.get("X-Forwarded-For", request.remote_addr)
    if ip_address and "," in ip_address:
        ip_address = ip_address.split(",")[0].strip()
    return ip_address


def _json_body() -> dict:
    body = request.get_json(silent=True)
    return body if isinstance(body, dict) else {}


class AuthController:
    def __init__(
        self,
        *,
        register_use_case: RegisterUserUseCase,
        login_use_case: LoginUserUseCase,
        logout_use_case: LogoutUserUseCase,
        authorize_use_case: AuthorizeRequestUseCase,
        audit: AuditLogger | None = None,
    ) -> None:
        self._register_use_case = register_use_case
        self._login_use_case = login_use_case
        self._logout_use_case = logout_use_case
        self._authorize_use_case = authorize_use_case
        self._audit = audit or AuditLogger()

    def register(self) -> tuple[Response, int]:
        try:
            dto = RegisterRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        user = self._register_use_case.execute(dto.email, dto.password)

        self._audit.log(
            AuditAction.REGISTER,
            user_id=user.id,
            ip_address=_get_client_ip(),
            details={"email": user.email},
            success=True,
        )
        logger.info(f"auth.register: ok user_id={user.id}")
        payload = PublicUserDTO.from_domain(user).model_dump(mode="json", by_alias=True)
        return jsonify(payload), HTTPStatus.CREATED

    def login(self) -> tuple[Response, int]:
        try:
            dto = LoginRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        ip_address = _get_client_ip()

        try:
            result = self._login_use_case.authenticate(dto.email, dto.password)
        except AppError as exc:
            self._audit.log(
                AuditAction.LOGIN_FAILED,
                ip_address=ip_address,
                details={"email": dto.email.lower(), "error": exc.code},
                success=False,
            )
            raise

        self._audit.log(
            AuditAction.LOGIN_SUCCESS,
            user_id=result.user_id,
            ip_address=ip_address,
            details={"email": dto.email.lower()},
            success=True,
        )
        return jsonify(AccessTokenDTO(access_token=result.access_token).model_dump()), HTTPStatus.OK

    def profile(self) -> tuple[Response, int]:
        identity = current_identity()
        payload = ProfileDTO.from_identity(identity).model_dump(mode="json", by_alias=True)
        return jsonify(payload), HTTPStatus.OK

    def logout(self) -> tuple[Response, int]:
        try:
            dto = LogoutRequestDTO.model_validate(_json_body())
        except ValidationError as exc:
            raise_validation_error(exc)

        identity = current_identity()
        self._logout_use_case.execute(identity, dto.email)

        self._audit.log(
            AuditAction.LOGOUT,
            user_id=identity.user_id,
            ip_address=_get_client_ip(),
            details={"email": identity.email},
            success=True,
        )
        payload = MessageDTO(message="Logged out successfully").model_dump()
        return jsonify(payload), HTTPStatus.OK

    def as_blueprint(self) -> Blueprint:
        guard = bearer_guard(self._authorize_use_case)
        bp = Blueprint("auth", __name__, url_prefix="/auth")
        bp.add_url_rule("/register", view_func=self.register, methods=["POST"])
        bp.add_url_rule("/login", view_func=self.login, methods=["POST"])
        bp.add_url_rule("/profile", view_func=guard(self.profile), methods=["POST"])
        bp.add_url_rule("/logout", view_func=guard(self.logout), methods=["POST"])
        return bp
