# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask
from flask_cors import CORS

from userauth.infrastructure.container import Container
from userauth.infrastructure.db import init_db
from userauth.interfaces.http.request_id import REQUEST_ID_HEADER, configure_request_id
from userauth.shared.config import AppConfig, load_config
from userauth.shared.errors import ErrorCatalog
from userauth.shared.logging import logger, setup_logging
from userauth.shared.middleware.error_handler import configure_error_handling
from userauth.shared.middleware.request_logger import configure_request_logging

EXTENSION_KEY = "userauth"


def create_app(config: AppConfig | None = None) -> Flask:
    config = config or load_config()
    setup_logging(config.log_level, config.log_file)

    container = Container(config)
    init_db(container.engine)

    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = container

    configure_request_id(app)
    configure_request_logging(app)
    configure_error_handling(app, ErrorCatalog())

    CORS(
        app,
        origins=config.security.allowed_origins,
        supports_credentials=True,
        expose_headers=[REQUEST_ID_HEADER],
    )

    app.register_blueprint(container.users_controller.as_blueprint())
    app.register_blueprint(container.sessions_controller.as_blueprint())
    app.register_blueprint(container.private_controller.as_blueprint())

    logger.info(f"Flask app initialized env={config.app_env}")
    return app


def get_container(app: Flask) -> Container:
    return app.extensions[EXTENSION_KEY]
