"""Loguru setup for the auth service.

Every record carries ``extra["correlation_id"]``, taken from the request
context when one is active and ``-`` otherwise. Both sinks run records
through :func:`sanitize_record` so tokens and passwords never reach disk.
"""

from __future__ import annotations

import logging
import os
import sys
from contextvars import ContextVar
from pathlib import Path
from typing import Any

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

NO_CORRELATION_ID = "-"

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>req={extra[correlation_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default=NO_CORRELATION_ID)

# Chatty third-party loggers routed through loguru.
_QUIET_LOGGERS = {"werkzeug": logging.INFO, "sqlalchemy.engine": logging.WARNING}


def _log_file_path() -> Path:
    override = os.getenv("LOG_FILE")
    return Path(override) if override else Path("instance") / "app.log"


class _InterceptHandler(logging.Handler):
    """Forward stdlib ``logging`` records (Flask, werkzeug, SQLAlchemy) to loguru."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level: str | int = _logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        _logger.bind(correlation_id=_correlation_id.get()).opt(
            depth=6, exception=record.exc_info
        ).log(level, record.getMessage())


class ContextualLogger:
    """Loguru proxy that binds the current correlation id on every call."""

    def __getattr__(self, name: str) -> Any:
        return getattr(_logger.bind(correlation_id=_correlation_id.get()), name)


def set_correlation_id(value: str | None) -> None:
    _correlation_id.set(value or NO_CORRELATION_ID)


def get_correlation_id() -> str:
    return _correlation_id.get()


def clear_correlation_id() -> None:
    _correlation_id.set(NO_CORRELATION_ID)


def setup_logging(level: str | None = None) -> None:
    """(Re)configure sinks. Safe to call once per app instance."""
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    log_file = _log_file_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)

    common: dict[str, Any] = {
        "level": level,
        "format": LOG_FORMAT,
        "backtrace": False,
        "diagnose": False,
        "filter": sanitize_record,
    }

    _logger.remove()
    _logger.configure(extra={"correlation_id": NO_CORRELATION_ID})
    _logger.add(sys.stderr, colorize=True, **common)
    _logger.add(
        str(log_file),
        colorize=False,
        enqueue=True,
        encoding="utf-8",
        rotation="10 MB",
        retention=5,
        **common,
    )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    for name, quiet_level in _QUIET_LOGGERS.items():
        logging.getLogger(name).setLevel(quiet_level)


logger = ContextualLogger()

__all__ = [
    "LOG_FORMAT",
    "clear_correlation_id",
    "get_correlation_id",
    "logger",
    "set_correlation_id",
    "setup_logging",
]
