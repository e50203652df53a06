# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

"""Bearer-token authorization for protected routes."""

from __future__ import annotations

from auth_backend.domain.users.entities import Identity
from auth_backend.domain.users.exceptions import MissingTokenError, TokenRevokedError
from auth_backend.domain.users.repositories import TokenCodec, UserRepository
from auth_backend.shared.logging import logger


def extract_bearer_token(header: str | None) -> str:
    """Return the token from an ``Authorization: Bearer <token>`` value."""
    if not header:
        raise MissingTokenError()
    parts = header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise MissingTokenError()
    return parts[1]


class AuthorizeRequestUseCase:
    """Resolve the caller identity from a bearer token.

    With ``revocation_check`` off this is a pure signature and expiry check,
    so a token issued before logout keeps working until it expires. With it
    on, the token must also equal the user's stored session token, which
    costs one store read per request.
    """

    def __init__(
        self,
        *,
        tokens: TokenCodec,
        users: UserRepository,
        revocation_check: bool = False,
    ) -> None:
        self._tokens = tokens
        self._users = users
        self._revocation_check = revocation_check

    def execute(self, authorization_header: str | None) -> Identity:
        token = extract_bearer_token(authorization_header)
        claims = self._tokens.verify(token)

        if self._revocation_check:
            user = self._users.find_by_id(claims.user_id)
            if user is None or user.current_session_token != token:
                logger.warning(f"auth.authorize: revoked token for user_id={claims.user_id}")
                raise TokenRevokedError()

        return Identity(user_id=claims.user_id, email=claims.email)
