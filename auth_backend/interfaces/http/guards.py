# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable
from functools import wraps
from typing import Any, TypeVar, cast

from flask import g, request

from auth_backend.application.use_cases.users.authorize_request import \
    AuthorizeRequestUseCase
from auth_backend.domain.users.entities import Identity
from auth_backend.shared.errors import AppError
from auth_backend.shared.logging import logger

F = TypeVar("F", bound=Callable[..., Any])


def bearer_guard(authorize: AuthorizeRequestUseCase) -> Callable[[F], F]:
    """Build a decorator that rejects requests without a valid bearer token."""

    def decorator(f: F) -> F:
        @wraps(f)
        def inner(*args: Any, **kwargs: Any) -> Any:
            header = request.headers.get("Authorization")
            try:
                identity = authorize.execute(header)
            except AppError:
                logger.warning(f"Auth failed on {request.method} {request.path}")
                raise

            g.identity = identity
            logger.debug(f"Auth OK: user={identity.user_id} {request.method} {request.path}")
            return f(*args, **kwargs)

        return cast(F, inner)

    return decorator


def current_identity() -> Identity:
    """Return the identity stored by :func:`bearer_guard`."""
    return cast(Identity, g.identity)
