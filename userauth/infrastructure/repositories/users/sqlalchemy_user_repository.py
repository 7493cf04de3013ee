# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from collections.abc import Callable

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from userauth.domain.users.entities import User as DomainUser
from userauth.domain.users.exceptions import (
    EmailAlreadyExistsError,
    UserNotFoundError,
    UserValidationError,
)
from userauth.domain.users.repositories import PasswordHasher, UserRepository
from userauth.infrastructure.db.models import User
from userauth.infrastructure.unit_of_work import unit_of_work_scope
from userauth.shared.errors.base import StoreError
from userauth.shared.logging import logger


def _to_domain(row: User) -> DomainUser:
    return DomainUser(
        id=row.id,
        email=row.email,
        encrypted_password=row.encrypted_password,
    )


class SqlAlchemyUserRepository(UserRepository):
    def __init__(
        self,
        session_factory: Callable[[], Session],
        *,
        password_hasher: PasswordHasher,
    ) -> None:
        self._session_factory = session_factory
        self._password_hasher = password_hasher

    def create(self, user: DomainUser) -> DomainUser:
        user.validate()
        user.before_create(self._password_hasher)
        if not user.encrypted_password:
            raise UserValidationError("encrypted_password", "required")

        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = User(email=user.email, encrypted_password=user.encrypted_password)
                session.add(row)
                session.flush()
                new_id = row.id
        except IntegrityError as exc:
            logger.info("users.create: email already registered")
            raise EmailAlreadyExistsError(context={"field": "email"}) from exc
        except SQLAlchemyError as exc:
            raise StoreError(context={"operation": "users.create"}) from exc

        user.id = new_id
        logger.info(f"users.create: ok user_id={new_id}")
        return user

    def find_by_id(self, user_id: int) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.get(User, user_id)
                found = _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreError(context={"operation": "users.find_by_id"}) from exc

        if found is None:
            raise UserNotFoundError(user_id=user_id)
        return found

    def find_by_email(self, email: str) -> DomainUser:
        try:
            with unit_of_work_scope(self._session_factory) as session:
                row = session.scalars(select(User).where(User.email == email)).first()
                found = _to_domain(row) if row else None
        except SQLAlchemyError as exc:
            raise StoreError(context={"operation": "users.find_by_email"}) from exc

        if found is None:
            raise UserNotFoundError()
        return found
