# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from auth_backend.domain.users.entities import LoginResult, User
from auth_backend.domain.users.exceptions import InvalidCredentialsError, SessionPersistError
from auth_backend.domain.users.repositories import PasswordHasher, TokenCodec, UserRepository
from auth_backend.shared.errors import AppError
from auth_backend.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        tokens: TokenCodec,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._tokens = tokens
        self._password_hasher = password_hasher

    def validate_user(self, email: str, password: str) -> User | None:
        user = self._users.find_by_email(email.lower())
        if user is None:
            return None
        if not self._password_hasher.verify(password, user.password_hash):
            return None
        return user

    def authenticate(self, email: str, password: str) -> LoginResult:
        """Check credentials, then issue and store a fresh session token."""
        user = self.validate_user(email, password)
        if user is None:
            raise InvalidCredentialsError()

        token = self._tokens.issue(user.id, user.email)

        # A failed write fails the whole login.
        try:
            self._users.set_session_token(user.id, token)
        except AppError:
            raise
        except Exception as exc:
            logger.error(f"auth.login: storing session token failed for user_id={user.id}")
            raise SessionPersistError() from exc

        logger.info(f"auth.login: issued token for user_id={user.id}")
        return LoginResult(user_id=user.id, access_token=token)

    def execute(self, email: str, password: str) -> str:
        return self.authenticate(email, password).access_token
