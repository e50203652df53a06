# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import re
import uuid
from datetime import UTC, datetime

from auth_backend.application.services.password_hashing import BCRYPT_MAX_PASSWORD_BYTES
from auth_backend.domain.users.entities import PublicUser, User
from auth_backend.domain.users.exceptions import UserAlreadyExistsError
from auth_backend.domain.users.repositories import PasswordHasher, UserRepository
from auth_backend.shared.errors import ValidationError
from auth_backend.shared.logging import logger

MIN_PASSWORD_LENGTH = 6
MAX_EMAIL_LENGTH = 320
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_registration(email: str | None, password: str | None) -> None:
    if not email or not password:
        raise ValidationError(
            "email_and_password_required", "Email and password are required"
        )

    if len(password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(
            "password_too_short",
            f"Password must be at least {MIN_PASSWORD_LENGTH} characters",
            context={"min_length": MIN_PASSWORD_LENGTH},
        )

    if not EMAIL_PATTERN.fullmatch(email):
        raise ValidationError("invalid_email", "Invalid email format")

    if len(email) > MAX_EMAIL_LENGTH:
        raise ValidationError(
            "email_too_long",
            f"Email must be at most {MAX_EMAIL_LENGTH} characters",
            context={"max_length": MAX_EMAIL_LENGTH},
        )

    if len(password.encode("utf-8")) > BCRYPT_MAX_PASSWORD_BYTES:
        raise ValidationError(
            "password_too_long",
            f"Password must be at most {BCRYPT_MAX_PASSWORD_BYTES} bytes",
            context={"max_bytes": BCRYPT_MAX_PASSWORD_BYTES},
        )


class RegisterUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._password_hasher = password_hasher

    def execute(self, email: str | None, password: str | None) -> PublicUser:
        validate_registration(email, password)
        assert email is not None and password is not None

        normalized = email.lower()
        if self._users.find_by_email(normalized):
            raise UserAlreadyExistsError()

        user = User(
            id=str(uuid.uuid4()),
            email=normalized,
            password_hash=self._password_hasher.hash(password),
            created_at=datetime.now(UTC),
        )
        # add() also raises UserAlreadyExistsError when a concurrent insert wins
        persisted = self._users.add(user)
        logger.info(f"auth.register: created user_id={persisted.id}")
        return persisted.to_public()
