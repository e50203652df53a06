# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .use_cases.users import (
    AuthorizeRequestUseCase,
    LoginUserUseCase,
    LogoutUserUseCase,
    RegisterUserUseCase,
)

__all__ = [
    "AuthorizeRequestUseCase",
    "LoginUserUseCase",
    "LogoutUserUseCase",
    "RegisterUserUseCase",
]
