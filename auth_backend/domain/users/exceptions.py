# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from auth_backend.shared.errors.base import DomainError, ErrorKind


class UserAlreadyExistsError(DomainError):
    kind = ErrorKind.CONFLICT
    code = "email_already_registered"
    message = "Email is already registered. Please use a different email."


class InvalidCredentialsError(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    code = "invalid_credentials"
    message = "Invalid email or password"


class MissingTokenError(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    code = "missing_token"
    message = "Missing or malformed bearer token"


class InvalidTokenError(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    code = "invalid_token"
    message = "Invalid or expired token"


class TokenRevokedError(DomainError):
    kind = ErrorKind.UNAUTHORIZED
    code = "token_revoked"
    message = "Token is no longer active"


class LogoutForbiddenError(DomainError):
    kind = ErrorKind.FORBIDDEN
    code = "logout_forbidden"
    message = "You can only logout your own account."


class SessionPersistError(DomainError):
    kind = ErrorKind.INTERNAL
    code = "session_persist_failed"
