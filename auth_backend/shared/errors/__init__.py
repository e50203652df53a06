from .base import (
    AppError,
    ConflictError,
    DomainError,
    ErrorKind,
    ForbiddenError,
    InternalError,
    UnauthorizedError,
    ValidationError,
    status_for,
)
from .http import handle_app_error, register_error_handler

__all__ = [
    "AppError",
    "ConflictError",
    "DomainError",
    "ErrorKind",
    "ForbiddenError",
    "InternalError",
    "UnauthorizedError",
    "ValidationError",
    "handle_app_error",
    "register_error_handler",
    "status_for",
]
