# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .users.entities import User
from .users.exceptions import (
    ConflictError,
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    NotFoundError,
    UserNotFoundError,
    UserValidationError,
)
from .users.repositories import PasswordHasher, SessionManager, UserRepository

__all__ = [
    "ConflictError",
    "EmailAlreadyExistsError",
    "InvalidCredentialsError",
    "NotAuthenticatedError",
    "NotFoundError",
    "PasswordHasher",
    "SessionManager",
    "User",
    "UserNotFoundError",
    "UserRepository",
    "UserValidationError",
]
