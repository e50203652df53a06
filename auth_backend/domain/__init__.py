# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users import Identity, LoginResult, PublicUser, TokenClaims, User

__all__ = ["Identity", "LoginResult", "PublicUser", "TokenClaims", "User"]
