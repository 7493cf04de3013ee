# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import request

from userauth.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from userauth.interfaces.http.context import get_request_context
from userauth.shared.logging import logger


class SessionAuthenticator:
    """``before_request`` hook that attaches the session's user to the request.

    Raises ``NotAuthenticatedError`` (401) for a missing, tampered or expired
    cookie and for a user that can no longer be loaded; failures while reading
    the cookie itself surface as ``InternalError`` (500).
    """

    def __init__(self, *, authenticate_use_case: AuthenticateUserUseCase, cookie_name: str) -> None:
        self._authenticate_use_case = authenticate_use_case
        self._cookie_name = cookie_name

    def __call__(self) -> None:
        token = request.cookies.get(self._cookie_name)
        if not token:
            logger.warning(f"No session cookie on {request.method} {request.path}")

        user = self._authenticate_use_case.execute(token)

        get_request_context().user = user
        logger.debug(f"Auth OK: user={user.id} {request.method} {request.path}")
        return None
