# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from http import HTTPStatus
from typing import Any, cast


class ErrorKind(str, Enum):
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    INTERNAL = "internal"


_STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.VALIDATION: HTTPStatus.BAD_REQUEST,
    ErrorKind.CONFLICT: HTTPStatus.CONFLICT,
    ErrorKind.UNAUTHORIZED: HTTPStatus.UNAUTHORIZED,
    ErrorKind.FORBIDDEN: HTTPStatus.FORBIDDEN,
    ErrorKind.INTERNAL: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def status_for(kind: ErrorKind) -> HTTPStatus:
    return _STATUS_BY_KIND.get(kind, HTTPStatus.INTERNAL_SERVER_ERROR)


@dataclass(eq=False)
class AppError(Exception):
    kind: ErrorKind
    code: str
    message: str | None = None
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.message or self.code)

    @property
    def status(self) -> HTTPStatus:
        return status_for(self.kind)

    def to_dict(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"error": self.code}
        if self.message:
            payload["message"] = self.message
        # Internal failures never leak store or signing details.
        if self.context and self.kind is not ErrorKind.INTERNAL:
            payload["context"] = dict(self.context)
        return payload


class DomainError(AppError):
    def __init__(
        self,
        *,
        code: str | None = None,
        kind: ErrorKind | None = None,
        message: str | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_code = code or cast(str, getattr(self, "code", "domain_error"))
        resolved_kind = kind or cast(
            ErrorKind, getattr(self, "kind", ErrorKind.VALIDATION)
        )
        resolved_message = message or cast("str | None", getattr(self, "message", None))
        super().__init__(
            kind=resolved_kind,
            code=resolved_code,
            message=resolved_message,
            context=context,
        )


class ValidationError(AppError):
    def __init__(
        self,
        code: str = "validation_error",
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            kind=ErrorKind.VALIDATION, code=code, message=message, context=context
        )


class ConflictError(AppError):
    def __init__(
        self,
        code: str = "conflict",
        message: str | None = None,
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(
            kind=ErrorKind.CONFLICT, code=code, message=message, context=context
        )


class UnauthorizedError(AppError):
    def __init__(self, code: str = "unauthorized", message: str | None = None) -> None:
        super().__init__(kind=ErrorKind.UNAUTHORIZED, code=code, message=message)


class ForbiddenError(AppError):
    def __init__(self, code: str = "forbidden", message: str | None = None) -> None:
        super().__init__(kind=ErrorKind.FORBIDDEN, code=code, message=message)


class InternalError(AppError):
    def __init__(
        self,
        code: str = "internal_error",
        *,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        super().__init__(kind=ErrorKind.INTERNAL, code=code, context=context)
