# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import time
from http import HTTPStatus

from flask import Flask, Response, g, request

from userauth.shared.logging import logger


def _get_client_ip() -> str:
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        return forwarded.split(",")[0].strip()

    return request.remote_addr or "unknown"


def _level_for(status_code: int) -> str:
    if status_code >= 500:
        return "ERROR"
    if status_code >= 400:
        return "WARNING"
    return "INFO"


def _reason(status_code: int) -> str:
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def configure_request_logging(app: Flask) -> None:
    @app.before_request
    def _log_request_start() -> None:
        g.request_start_time = time.perf_counter()
        logger.info(f"started {request.method} {request.full_path.rstrip('?')} from {_get_client_ip()}")

    @app.after_request
    def _log_request_end(response: Response) -> Response:
        start_time = g.get("request_start_time", time.perf_counter())
        duration_ms = (time.perf_counter() - start_time) * 1000.0
        status = response.status_code
        logger.log(
            _level_for(status),
            f"completed with {status} {_reason(status)} in {duration_ms:.1f} ms",
        )
        return response

    @app.teardown_request
    def _log_request_error(exc: BaseException | None) -> None:
        if exc is not None:
            logger.error(
                f"Request error: {type(exc).__name__} on {request.method} {request.path}"
            )


__all__ = ["configure_request_logging"]
