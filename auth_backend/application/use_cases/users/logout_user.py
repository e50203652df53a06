"""Use-case for clearing a user's tracked session token."""

from __future__ import annotations

from datetime import UTC, datetime

from auth_backend.domain.users.entities import Identity
from auth_backend.domain.users.exceptions import LogoutForbiddenError
from auth_backend.domain.users.repositories import UserRepository
from auth_backend.shared.errors import ValidationError
from auth_backend.shared.logging import logger


class LogoutUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, identity: Identity, email: str | None) -> bool:
        if not email:
            raise ValidationError("email_required", "Email is required")

        normalized = email.lower()
        user = self._users.find_by_email(normalized)
        if user is None:
            raise ValidationError("invalid_email", "Enter a valid email.")

        if normalized != identity.email.lower():
            raise LogoutForbiddenError()

        self._users.set_session_token(user.id, None)
        logger.info(f"auth.logout: {normalized} logged out at {datetime.now(UTC).isoformat()}")
        return True
