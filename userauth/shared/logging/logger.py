"""Structured logging utilities."""

from __future__ import annotations

import logging
import sys
from contextvars import ContextVar
from pathlib import Path

from loguru import logger as _logger

from .sensitive_filter import sanitize_record

_FMT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
    "<lvl>{level:<8}</lvl> | "
    "<magenta>{extra[request_id]}</magenta> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
    "<lvl>{message}</lvl>"
)

_REQUEST_ID: ContextVar[str] = ContextVar("request_id", default="-")

_logger.configure(extra={"request_id": "-"})


class _InterceptHandler(logging.Handler):
    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = _logger.level(record.levelname).name
        except ValueError:
            level = str(record.levelno)
        _logger.opt(depth=6, exception=record.exc_info).log(
            level,
            record.getMessage(),
            request_id=_REQUEST_ID.get(),
        )


class ContextualLogger:
    """Proxy for loguru that injects the current request id via ContextVar."""

    def __getattr__(self, name):  # pragma: no cover
        bound = _logger.bind(request_id=_REQUEST_ID.get())
        return getattr(bound, name)


def set_request_id(value: str | None) -> None:
    _REQUEST_ID.set(value or "-")


def clear_request_id() -> None:
    _REQUEST_ID.set("-")


def setup_logging(level: str = "INFO", log_file: Path | str | None = None) -> None:
    level = level.upper()

    _logger.remove()
    _logger.add(
        sys.stderr,
        level=level,
        format=_FMT,
        filter=sanitize_record,
        colorize=True,
        backtrace=False,
        diagnose=False,
    )
    if log_file:
        path = Path(log_file)
        path.parent.mkdir(parents=True, exist_ok=True)
        _logger.add(
            path,
            level=level,
            format=_FMT,
            filter=sanitize_record,
            colorize=False,
            backtrace=False,
            diagnose=False,
            enqueue=True,
            encoding="utf-8",
        )

    logging.basicConfig(handlers=[_InterceptHandler()], level=0, force=True)
    logging.getLogger("werkzeug").setLevel(logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


logger = ContextualLogger()

__all__ = [
    "logger",
    "setup_logging",
    "set_request_id",
    "clear_request_id",
]
