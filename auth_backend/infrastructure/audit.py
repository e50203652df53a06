# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import json
from datetime import UTC, datetime
from enum import Enum
from typing import Any

from sqlalchemy.exc import SQLAlchemyError

from auth_backend.infrastructure.db.models import AuditLog
from auth_backend.infrastructure.db.session import SessionFactory, session_scope
from auth_backend.shared.logging import logger


class AuditAction(str, Enum):
    REGISTER = "register"
    LOGIN_SUCCESS = "login_success"
    LOGIN_FAILED = "login_failed"
    LOGOUT = "logout"


_SENSITIVE_KEYS = {"password", "token", "secret", "hash"}


def _sanitize_details(details: dict[str, Any]) -> dict[str, Any]:
    sanitized = {}
    for key, value in details.items():
        key_lower = key.lower()

        if any(sensitive in key_lower for sensitive in _SENSITIVE_KEYS):
            sanitized[key] = "***REDACTED***"
        else:
            sanitized[key] = value

    return sanitized


class AuditLogger:
    """Writes audit events to the log and, best effort, to ``audit_logs``."""

    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self._session_factory = session_factory

    def log(
        self,
        action: AuditAction,
        user_id: str | None = None,
        ip_address: str | None = None,
        details: dict[str, Any] | None = None,
        success: bool = True,
    ) -> None:
        timestamp = datetime.now(UTC)
        safe_details = _sanitize_details(details) if details else {}

        log_message = (
            f"AUDIT: {action.value} | "
            f"user_id={user_id} | "
            f"ip={ip_address} | "
            f"success={success} | "
            f"at={timestamp.isoformat()}"
        )
        if safe_details:
            log_message += f" | details={safe_details}"

        if success:
            logger.info(log_message)
        else:
            logger.warning(log_message)

        if self._session_factory is not None:
            self._store(timestamp, action, user_id, ip_address, success, safe_details)

    def _store(
        self,
        timestamp: datetime,
        action: AuditAction,
        user_id: str | None,
        ip_address: str | None,
        success: bool,
        details: dict[str, Any],
    ) -> None:
        assert self._session_factory is not None
        try:
            with session_scope(self._session_factory) as session:
                session.add(
                    AuditLog(
                        timestamp=timestamp,
                        action=action.value,
                        user_id=user_id,
                        ip_address=ip_address,
                        success=success,
                        details_json=json.dumps(details, default=str) if details else None,
                    )
                )
        except SQLAlchemyError as db_error:
            # Audit rows are observability only; the request outcome stands.
            logger.warning(f"Failed to store audit log in database: {db_error}")


__all__ = ["AuditAction", "AuditLogger"]
