from __future__ import annotations

from http import HTTPStatus
from types import MappingProxyType

import pytest

from userauth.domain import (
    EmailAlreadyExistsError,
    InvalidCredentialsError,
    NotAuthenticatedError,
    UserNotFoundError,
    UserValidationError,
)
from userauth.shared.errors import ErrorCatalog, ErrorKind, ErrorResponse, InternalError, StoreError
from userauth.shared.logging import sanitize_message


@pytest.mark.parametrize(
    ("error", "kind"),
    [
        (UserValidationError("email", "required"), ErrorKind.BAD_REQUEST),
        (EmailAlreadyExistsError(), ErrorKind.BAD_REQUEST),
        (UserNotFoundError(user_id=1), ErrorKind.BAD_REQUEST),
        (InvalidCredentialsError(), ErrorKind.INCORRECT_CREDENTIALS),
        (NotAuthenticatedError(), ErrorKind.NOT_AUTHENTICATED),
        (StoreError(), ErrorKind.INTERNAL),
        (InternalError(), ErrorKind.INTERNAL),
    ],
)
def test_error_kinds(error, kind: ErrorKind) -> None:
    assert error.kind is kind


def test_default_catalog_messages() -> None:
    catalog = ErrorCatalog()

    assert catalog.lookup(ErrorKind.BAD_REQUEST).to_dict() == {"error": "bad request"}
    assert catalog.lookup(ErrorKind.INCORRECT_CREDENTIALS) == ErrorResponse(
        HTTPStatus.UNAUTHORIZED, "incorrect email or password"
    )
    assert catalog.lookup(ErrorKind.NOT_AUTHENTICATED).message == "not authenticated"
    assert catalog.lookup(ErrorKind.INTERNAL).status == HTTPStatus.INTERNAL_SERVER_ERROR


def test_default_catalog_covers_exactly_the_user_facing_kinds() -> None:
    catalog = ErrorCatalog()

    assert set(catalog.entries) == set(ErrorKind)
    assert {response.status for response in catalog.entries.values()} == {
        HTTPStatus.BAD_REQUEST,
        HTTPStatus.UNAUTHORIZED,
        HTTPStatus.INTERNAL_SERVER_ERROR,
    }


def test_incomplete_catalog_is_refused() -> None:
    with pytest.raises(ValueError, match="INTERNAL"):
        ErrorCatalog(
            MappingProxyType({ErrorKind.BAD_REQUEST: ErrorResponse(HTTPStatus.BAD_REQUEST, "x")})
        )


@pytest.mark.parametrize(
    ("message", "leaked"),
    [
        ("password=hunter22", "hunter22"),
        ("encrypted_password='pbkdf2:sha256:1000$abc$def'", "abc$def"),
        ("postgres://app:s3cret@db/app", "s3cret"),
        ("login for alice@example.test", "alice"),
    ],
)
def test_sanitize_message_redacts(message: str, leaked: str) -> None:
    assert leaked not in sanitize_message(message)
