# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from typing import Protocol

from .entities import User


class UserRepository(Protocol):
    def create(self, user: User) -> User: ...
    def find_by_id(self, user_id: int) -> User: ...
    def find_by_email(self, email: str) -> User: ...


class PasswordHasher(Protocol):
    def hash(self, password: str) -> str: ...
    def verify(self, password: str, hashed: str) -> bool: ...


class SessionManager(Protocol):
    def issue(self, user_id: int) -> str: ...
    def resolve(self, token: str | None) -> int: ...
