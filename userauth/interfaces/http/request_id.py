# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

import uuid

from flask import Flask, Response, g

from userauth.interfaces.http.context import RequestContext, bind_request_context
from userauth.shared.logging import clear_request_id, set_request_id

REQUEST_ID_HEADER = "X-Request-ID"


def configure_request_id(app: Flask) -> None:
    @app.before_request
    def _assign_request_id() -> None:
        ctx = bind_request_context(str(uuid.uuid4()))
        set_request_id(ctx.request_id)

    @app.after_request
    def _echo_request_id(response: Response) -> Response:
        ctx = g.get("request_context")
        if isinstance(ctx, RequestContext):
            response.headers[REQUEST_ID_HEADER] = ctx.request_id
        return response

    @app.teardown_request
    def _clear_request_id(_exc: BaseException | None) -> None:
        clear_request_id()


__all__ = ["REQUEST_ID_HEADER", "configure_request_id"]
