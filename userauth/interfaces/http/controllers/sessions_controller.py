# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, request
from pydantic import ValidationError

from userauth.application.use_cases.users.login_user import LoginUserUseCase
from userauth.domain.users.exceptions import InvalidCredentialsError
from userauth.interfaces.http.dto.users import CredentialsRequestDTO
from userauth.shared.config import SessionConfig


class SessionsController:
    def __init__(
        self,
        *,
        login_use_case: LoginUserUseCase,
        session_config: SessionConfig,
    ) -> None:
        self._login_use_case = login_use_case
        self._session_config = session_config

    def create(self) -> tuple[Response, int]:
        payload = request.get_json(force=True, silent=True) or {}
        try:
            dto = CredentialsRequestDTO.model_validate(payload)
        except ValidationError as exc:
            raise InvalidCredentialsError(context={"reason": "malformed_body"}) from exc

        token = self._login_use_case.execute(dto.email, dto.password)

        config = self._session_config
        response = Response(status=200)
        response.set_cookie(
            config.cookie_name,
            token,
            max_age=config.lifetime_seconds,
            path="/",
            httponly=True,
            secure=config.cookie_secure,
            samesite=config.cookie_samesite,
        )
        return response, 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("sessions", __name__)
        bp.add_url_rule("/sessions", view_func=self.create, methods=["POST"])
        return bp
