# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify, request
from pydantic import ValidationError

from userauth.application.use_cases.users.register_user import RegisterUserUseCase
from userauth.interfaces.http.dto.users import CredentialsRequestDTO, UserCreatedDTO
from userauth.shared.errors import DomainError, ErrorKind, StoreError
from userauth.shared.errors.validation import raise_validation_error
from userauth.shared.logging import logger


class UsersController:
    def __init__(self, *, register_use_case: RegisterUserUseCase) -> None:
        self._register_use_case = register_use_case

    def create(self) -> tuple[Response, int]:
        payload = request.get_json(force=True, silent=True) or {}
        try:
            dto = CredentialsRequestDTO.model_validate(payload)
        except ValidationError as exc:
            raise_validation_error(exc)

        try:
            user = self._register_use_case.execute(dto.email, dto.password)
        except StoreError as exc:
            # hashing failures stay INTERNAL; a failed insert is reported as 400
            logger.warning(f"users.create: store rejected insert context={exc.context}")
            raise DomainError(kind=ErrorKind.BAD_REQUEST, context=exc.context) from exc

        logger.info(f"users.create: registered user_id={user.id}")
        return jsonify(UserCreatedDTO.from_user(user).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("users", __name__)
        bp.add_url_rule("/users", view_func=self.create, methods=["POST"])
        return bp
