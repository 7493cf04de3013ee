# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Any

from itsdangerous import BadData, URLSafeTimedSerializer
from itsdangerous.encoding import base64_decode, base64_encode

from userauth.domain.users.exceptions import NotAuthenticatedError
from userauth.domain.users.repositories import SessionManager
from userauth.shared.errors.base import InternalError
from userauth.shared.logging import logger

SESSION_SALT = "userauth.session"
USER_ID_FIELD = "user_id"


def _has_canonical_signature(token: str) -> bool:
    # base64 ignores the spare bits of the final character, so two encodings
    # can decode to the same signature
    _, sep, signature = token.rpartition(".")
    if not sep or not signature:
        return False
    try:
        return base64_encode(base64_decode(signature)).decode("ascii") == signature
    except BadData:
        return False


class SignedCookieSessionManager(SessionManager):
    """Stateless sessions carried entirely in a signed cookie value.

    The token is ``URLSafeTimedSerializer`` output over ``{"user_id": <int>}``.
    Tampering breaks the HMAC and tokens older than ``max_age`` seconds are
    rejected; there is no server-side record, so a token cannot be revoked
    before it expires.
    """

    def __init__(self, secret_key: str, *, max_age: int, salt: str = SESSION_SALT) -> None:
        if not secret_key:
            raise ValueError("session secret key must not be empty")
        self._serializer = URLSafeTimedSerializer(secret_key, salt=salt)
        self._max_age = max_age

    @property
    def max_age(self) -> int:
        return self._max_age

    def issue(self, user_id: int) -> str:
        try:
            token = self._serializer.dumps({USER_ID_FIELD: int(user_id)})
        except (TypeError, ValueError) as exc:
            raise InternalError(context={"stage": "session_issue"}) from exc
        return str(token)

    def resolve(self, token: str | None) -> int:
        if not token:
            raise NotAuthenticatedError(context={"reason": "missing_session"})
        if not _has_canonical_signature(token):
            raise NotAuthenticatedError(context={"reason": "invalid_session"})

        try:
            payload: Any = self._serializer.loads(token, max_age=self._max_age)
        except BadData as exc:
            logger.debug(f"session.resolve: rejected token ({type(exc).__name__})")
            raise NotAuthenticatedError(context={"reason": "invalid_session"}) from exc
        except Exception as exc:
            raise InternalError(context={"stage": "session_read"}) from exc

        if not isinstance(payload, dict):
            raise NotAuthenticatedError(context={"reason": "malformed_session"})
        user_id = payload.get(USER_ID_FIELD)
        if isinstance(user_id, bool) or not isinstance(user_id, int):
            raise NotAuthenticatedError(context={"reason": "malformed_session"})
        return user_id


__all__ = ["SESSION_SALT", "SignedCookieSessionManager"]
