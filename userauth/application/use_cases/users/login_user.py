# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userauth.domain.users.exceptions import InvalidCredentialsError, NotFoundError
from userauth.domain.users.repositories import PasswordHasher, SessionManager, UserRepository
from userauth.shared.logging import logger


class LoginUserUseCase:
    def __init__(
        self,
        *,
        users: UserRepository,
        sessions: SessionManager,
        password_hasher: PasswordHasher,
    ) -> None:
        self._users = users
        self._sessions = sessions
        self._password_hasher = password_hasher

    def execute(self, email: str, password: str) -> str:
        try:
            user = self._users.find_by_email(email)
        except NotFoundError as exc:
            raise InvalidCredentialsError(context={"reason": "unknown_email"}) from exc

        if user.id is None or not user.compare_passwords(password, self._password_hasher):
            raise InvalidCredentialsError(context={"reason": "password_mismatch"})

        token = self._sessions.issue(user.id)
        logger.info(f"auth.login: session issued user_id={user.id}")
        return token
