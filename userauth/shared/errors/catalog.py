# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from http import HTTPStatus
from types import MappingProxyType

from .base import ErrorKind


@dataclass(slots=True, frozen=True)
class ErrorResponse:
    status: HTTPStatus
    message: str

    def to_dict(self) -> dict[str, str]:
        return {"error": self.message}


def _default_entries() -> Mapping[ErrorKind, ErrorResponse]:
    return MappingProxyType(
        {
            ErrorKind.BAD_REQUEST: ErrorResponse(HTTPStatus.BAD_REQUEST, "bad request"),
            ErrorKind.INCORRECT_CREDENTIALS: ErrorResponse(
                HTTPStatus.UNAUTHORIZED, "incorrect email or password"
            ),
            ErrorKind.NOT_AUTHENTICATED: ErrorResponse(
                HTTPStatus.UNAUTHORIZED, "not authenticated"
            ),
            ErrorKind.INTERNAL: ErrorResponse(
                HTTPStatus.INTERNAL_SERVER_ERROR, "internal server error"
            ),
        }
    )


@dataclass(slots=True, frozen=True)
class ErrorCatalog:
    """User-facing status and message for every error kind."""

    entries: Mapping[ErrorKind, ErrorResponse] = field(default_factory=_default_entries)

    def __post_init__(self) -> None:
        missing = set(ErrorKind) - set(self.entries)
        if missing:
            names = ", ".join(sorted(kind.name for kind in missing))
            raise ValueError(f"error catalog is missing entries for: {names}")

    def lookup(self, kind: ErrorKind) -> ErrorResponse:
        return self.entries[kind]


__all__ = ["ErrorCatalog", "ErrorResponse"]
