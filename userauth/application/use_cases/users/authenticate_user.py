"""Resolve a session token into the user it was issued for."""

from __future__ import annotations

from userauth.domain.users.entities import User
from userauth.domain.users.exceptions import NotAuthenticatedError, NotFoundError
from userauth.domain.users.repositories import SessionManager, UserRepository
from userauth.shared.errors.base import StoreError
from userauth.shared.logging import logger


class AuthenticateUserUseCase:
    def __init__(self, *, users: UserRepository, sessions: SessionManager) -> None:
        self._users = users
        self._sessions = sessions

    def execute(self, token: str | None) -> User:
        user_id = self._sessions.resolve(token)

        try:
            return self._users.find_by_id(user_id)
        except (NotFoundError, StoreError) as exc:
            logger.warning(
                f"auth.session: lookup failed for user_id={user_id} ({type(exc).__name__})"
            )
            raise NotAuthenticatedError(context={"reason": "user_lookup_failed"}) from exc
