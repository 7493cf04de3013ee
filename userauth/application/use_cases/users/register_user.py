# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from userauth.domain.users.entities import User
from userauth.domain.users.repositories import UserRepository


class RegisterUserUseCase:
    def __init__(self, *, users: UserRepository) -> None:
        self._users = users

    def execute(self, email: str, password: str) -> User:
        user = User(email=email, password=password)
        try:
            persisted = self._users.create(user)
        finally:
            user.sanitize()
        persisted.sanitize()
        return persisted
