# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from auth_backend.application.services.password_hashing import BcryptPasswordHasher
from auth_backend.application.use_cases.users.authorize_request import \
    AuthorizeRequestUseCase
from auth_backend.application.use_cases.users.login_user import LoginUserUseCase
from auth_backend.application.use_cases.users.logout_user import LogoutUserUseCase
from auth_backend.application.use_cases.users.register_user import \
    RegisterUserUseCase
from auth_backend.domain.users.repositories import PasswordHasher
from auth_backend.infrastructure.audit import AuditLogger
from auth_backend.infrastructure.auth.jwt_codec import JwtTokenCodec
from auth_backend.infrastructure.db.session import create_db_engine, create_session_factory
from auth_backend.infrastructure.repositories.users.sqlalchemy_user_repository import \
    SqlAlchemyUserRepository
from auth_backend.interfaces.http.controllers.auth_controller import AuthController
from auth_backend.interfaces.http.controllers.misc_controller import MiscController
from auth_backend.shared.config import AppConfig, load_config
from auth_backend.shared.logging import logger


class Container:
    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        password_hasher: PasswordHasher | None = None,
    ) -> None:
        self._config_override = config
        self._password_hasher_override = password_hasher

    @cached_property
    def config(self) -> AppConfig:
        return self._config_override or load_config()

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config.database)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> PasswordHasher:
        return self._password_hasher_override or BcryptPasswordHasher()

    @cached_property
    def token_codec(self) -> JwtTokenCodec:
        return JwtTokenCodec(
            secret_key=self.config.jwt.secret,
            expires_in=timedelta(seconds=self.config.jwt.expires_in),
        )

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(self.session_factory)

    @cached_property
    def audit_logger(self) -> AuditLogger:
        return AuditLogger(self.session_factory)

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(
            users=self.user_repository,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            tokens=self.token_codec,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def authorize_request_use_case(self) -> AuthorizeRequestUseCase:
        return AuthorizeRequestUseCase(
            tokens=self.token_codec,
            users=self.user_repository,
            revocation_check=self.config.jwt.revocation_check,
        )

    @cached_property
    def logout_user_use_case(self) -> LogoutUserUseCase:
        return LogoutUserUseCase(users=self.user_repository)

    @cached_property
    def auth_controller(self) -> AuthController:
        return AuthController(
            register_use_case=self.register_user_use_case,
            login_use_case=self.login_user_use_case,
            logout_use_case=self.logout_user_use_case,
            authorize_use_case=self.authorize_request_use_case,
            audit=self.audit_logger,
        )

    @cached_property
    def misc_controller(self) -> MiscController:
        return MiscController(self.engine)

    def shutdown(self) -> None:
        if "engine" in self.__dict__:
            self.engine.dispose()
            logger.info("Database engine disposed")
