# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from email_validator import EmailNotValidError, validate_email

from userauth.shared.errors.base import InternalError

from .exceptions import UserValidationError

if TYPE_CHECKING:
    from .repositories import PasswordHasher

MIN_PASSWORD_LENGTH = 6


def check_email(value: str) -> None:
    """Syntax only; reserved test domains such as ``example.test`` pass."""
    try:
        validate_email(value, check_deliverability=False, test_environment=True)
    except EmailNotValidError as exc:
        raise UserValidationError("email", str(exc)) from exc


@dataclass(slots=True)
class User:
    """A registered account.

    ``password`` is write-only plaintext used between request parsing and
    :meth:`before_create`; it is never persisted and :meth:`sanitize` clears it
    before the user is serialized. ``encrypted_password`` is what the store
    keeps.
    """

    email: str = ""
    password: str = ""
    encrypted_password: str = ""
    id: int | None = None

    def validate(self) -> None:
        if not self.email:
            raise UserValidationError("email", "required")
        check_email(self.email)

        if self.encrypted_password:
            return
        if not self.password:
            raise UserValidationError("password", "required")
        if len(self.password) < MIN_PASSWORD_LENGTH:
            raise UserValidationError(
                "password", f"must be at least {MIN_PASSWORD_LENGTH} characters"
            )

    def before_create(self, hasher: PasswordHasher) -> None:
        if not self.password:
            return
        try:
            self.encrypted_password = hasher.hash(self.password)
        except (OSError, NotImplementedError, ValueError) as exc:
            raise InternalError(context={"stage": "password_hash"}) from exc

    def sanitize(self) -> None:
        self.password = ""

    def compare_passwords(self, candidate: str, hasher: PasswordHasher) -> bool:
        if not self.encrypted_password:
            return False
        return hasher.verify(candidate, self.encrypted_password)
