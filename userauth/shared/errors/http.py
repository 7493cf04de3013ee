# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from http import HTTPStatus

from flask import Flask, Response, jsonify, request
from werkzeug.exceptions import HTTPException

from userauth.shared.logging import logger

from .base import AppError, ErrorKind
from .catalog import ErrorCatalog


def handle_app_error(error: AppError, catalog: ErrorCatalog) -> tuple[Response, HTTPStatus]:
    entry = catalog.lookup(error.kind)
    return jsonify(entry.to_dict()), entry.status


def register_error_handler(app: Flask, catalog: ErrorCatalog) -> None:
    @app.errorhandler(AppError)
    def _handle_app_error(exc: AppError):
        if exc.kind is ErrorKind.INTERNAL:
            logger.opt(exception=exc.__cause__ or exc).error(
                f"{type(exc).__name__} on {request.method} {request.path} context={exc.context}"
            )
        else:
            logger.info(
                f"{type(exc).__name__} ({exc.kind}) on {request.method} {request.path} "
                f"context={exc.context}"
            )
        return handle_app_error(exc, catalog)

    @app.errorhandler(HTTPException)
    def _handle_http(exc: HTTPException):
        return exc

    @app.errorhandler(Exception)
    def _handle_unexpected(exc: Exception):
        logger.exception(f"Unhandled exception: {request.method} {request.path}")
        entry = catalog.lookup(ErrorKind.INTERNAL)
        return jsonify(entry.to_dict()), entry.status
