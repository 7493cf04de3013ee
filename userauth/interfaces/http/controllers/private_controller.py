# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Blueprint, Response, jsonify

from userauth.interfaces.http.auth import SessionAuthenticator
from userauth.interfaces.http.context import current_user
from userauth.interfaces.http.dto.users import UserProfileDTO


class PrivateController:
    """Routes under ``/private``; every one of them requires a session."""

    def __init__(self, *, authenticator: SessionAuthenticator) -> None:
        self._authenticator = authenticator

    def whoami(self) -> tuple[Response, int]:
        return jsonify(UserProfileDTO.from_user(current_user()).model_dump()), 200

    def as_blueprint(self) -> Blueprint:
        bp = Blueprint("private", __name__, url_prefix="/private")
        bp.before_request(self._authenticator)
        bp.add_url_rule("/whoami", view_func=self.whoami, methods=["GET"])
        return bp
