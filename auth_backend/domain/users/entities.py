# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(slots=True, frozen=True)
class User:

    id: str
    email: str
    password_hash: str
    created_at: datetime
    current_session_token: str | None = None

    def to_public(self) -> PublicUser:
        return PublicUser(id=self.id, email=self.email, created_at=self.created_at)


@dataclass(slots=True, frozen=True)
class PublicUser:
    """User fields that may leave the core."""

    id: str
    email: str
    created_at: datetime


@dataclass(slots=True, frozen=True)
class TokenClaims:

    user_id: str
    email: str
    issued_at: datetime
    expires_at: datetime


@dataclass(slots=True, frozen=True)
class Identity:
    """Caller identity resolved from a verified bearer token."""

    user_id: str
    email: str


@dataclass(slots=True, frozen=True)
class LoginResult:
    user_id: str
    access_token: str
