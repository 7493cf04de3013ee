# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import StrEnum
from typing import Any, cast


class ErrorKind(StrEnum):
    BAD_REQUEST = "bad_request"
    INCORRECT_CREDENTIALS = "incorrect_credentials"
    NOT_AUTHENTICATED = "not_authenticated"
    INTERNAL = "internal"


@dataclass(slots=True)
class AppError(Exception):
    kind: ErrorKind
    context: Mapping[str, Any] | None = None

    def __post_init__(self) -> None:
        Exception.__init__(self, self.kind.value)


class DomainError(AppError):
    def __init__(
        self,
        *,
        kind: ErrorKind | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        resolved_kind = kind or cast(
            ErrorKind, getattr(type(self), "default_kind", ErrorKind.BAD_REQUEST)
        )
        super().__init__(kind=resolved_kind, context=context)


class InfrastructureError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(kind=ErrorKind.INTERNAL, context=context)


class ValidationError(AppError):
    def __init__(self, *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(kind=ErrorKind.BAD_REQUEST, context=context)


class StoreError(InfrastructureError):
    """The relational store failed for a reason other than a constraint."""


class InternalError(InfrastructureError):
    """Hashing or cookie cryptography failed."""
