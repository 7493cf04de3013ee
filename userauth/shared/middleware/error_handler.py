# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from __future__ import annotations

from flask import Flask

from userauth.shared.errors import ErrorCatalog, register_error_handler


def configure_error_handling(app: Flask, catalog: ErrorCatalog | None = None) -> ErrorCatalog:
    catalog = catalog or ErrorCatalog()
    register_error_handler(app, catalog)
    return catalog
