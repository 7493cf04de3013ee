# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from userauth.shared.errors.base import DomainError, ErrorKind, ValidationError


class UserValidationError(ValidationError):
    def __init__(self, field: str, reason: str) -> None:
        super().__init__(context={"field": field, "reason": reason})
        self.field = field
        self.reason = reason

    def __str__(self) -> str:
        return f"{self.field}: {self.reason}"


class ConflictError(DomainError):
    default_kind = ErrorKind.BAD_REQUEST


class EmailAlreadyExistsError(ConflictError):
    def __init__(self, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(context=context)


class NotFoundError(DomainError):
    """Callers translate a miss into the error their endpoint reports."""

    default_kind = ErrorKind.BAD_REQUEST


class UserNotFoundError(NotFoundError):
    def __init__(self, **lookup: Any) -> None:
        super().__init__(context=lookup or None)


class InvalidCredentialsError(DomainError):
    default_kind = ErrorKind.INCORRECT_CREDENTIALS


class NotAuthenticatedError(DomainError):
    default_kind = ErrorKind.NOT_AUTHENTICATED
