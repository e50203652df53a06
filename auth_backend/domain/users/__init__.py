# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .entities import Identity, LoginResult, PublicUser, TokenClaims, User
from .repositories import PasswordHasher, TokenCodec, UserRepository

__all__ = [
    "Identity",
    "LoginResult",
    "PasswordHasher",
    "PublicUser",
    "TokenClaims",
    "TokenCodec",
    "User",
    "UserRepository",
]
