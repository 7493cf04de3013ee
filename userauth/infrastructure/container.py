# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from functools import cached_property

from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from userauth.application.services.password_hashing import WerkzeugPasswordHasher
from userauth.application.use_cases.users.authenticate_user import AuthenticateUserUseCase
from userauth.application.use_cases.users.login_user import LoginUserUseCase
from userauth.application.use_cases.users.register_user import RegisterUserUseCase
from userauth.infrastructure.db import create_db_engine, create_session_factory
from userauth.infrastructure.repositories.users.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from userauth.infrastructure.sessions.signed_cookie import SignedCookieSessionManager
from userauth.interfaces.http.auth import SessionAuthenticator
from userauth.interfaces.http.controllers.private_controller import PrivateController
from userauth.interfaces.http.controllers.sessions_controller import SessionsController
from userauth.interfaces.http.controllers.users_controller import UsersController
from userauth.shared.config import AppConfig


class Container:
    def __init__(self, config: AppConfig) -> None:
        self.config = config

    @cached_property
    def engine(self) -> Engine:
        return create_db_engine(self.config)

    @cached_property
    def session_factory(self) -> sessionmaker[Session]:
        return create_session_factory(self.engine)

    @cached_property
    def password_hasher(self) -> WerkzeugPasswordHasher:
        return WerkzeugPasswordHasher(method=self.config.session.password_hash_method)

    @cached_property
    def user_repository(self) -> SqlAlchemyUserRepository:
        return SqlAlchemyUserRepository(
            self.session_factory, password_hasher=self.password_hasher
        )

    @cached_property
    def session_manager(self) -> SignedCookieSessionManager:
        return SignedCookieSessionManager(
            self.config.session_key,
            max_age=self.config.session.lifetime_seconds,
        )

    @cached_property
    def register_user_use_case(self) -> RegisterUserUseCase:
        return RegisterUserUseCase(users=self.user_repository)

    @cached_property
    def login_user_use_case(self) -> LoginUserUseCase:
        return LoginUserUseCase(
            users=self.user_repository,
            sessions=self.session_manager,
            password_hasher=self.password_hasher,
        )

    @cached_property
    def authenticate_user_use_case(self) -> AuthenticateUserUseCase:
        return AuthenticateUserUseCase(users=self.user_repository, sessions=self.session_manager)

    @cached_property
    def session_authenticator(self) -> SessionAuthenticator:
        return SessionAuthenticator(
            authenticate_use_case=self.authenticate_user_use_case,
            cookie_name=self.config.session.cookie_name,
        )

    @cached_property
    def users_controller(self) -> UsersController:
        return UsersController(register_use_case=self.register_user_use_case)

    @cached_property
    def sessions_controller(self) -> SessionsController:
        return SessionsController(
            login_use_case=self.login_user_use_case,
            session_config=self.config.session,
        )

    @cached_property
    def private_controller(self) -> PrivateController:
        return PrivateController(authenticator=self.session_authenticator)
