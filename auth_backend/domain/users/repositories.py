# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from datetime import timedelta
from typing import Protocol

from .entities import TokenClaims, User


class UserRepository(Protocol):
    def find_by_email(self, email: str) -> User | None: ...
    def find_by_id(self, user_id: str) -> User | None: ...
    def add(self, user: User) -> User: ...
    def set_session_token(self, user_id: str, token: str | None) -> None: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class TokenCodec(Protocol):
    def issue(
        self, subject: str, email: str, *, expires_in: timedelta | None = None
    ) -> str: ...
    def verify(self, token: str) -> TokenClaims: ...
