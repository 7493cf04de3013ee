from __future__ import annotations

from collections.abc import Iterator

import pytest
from flask import Flask
from flask.testing import FlaskClient

from userauth.app import create_app
from userauth.tests.helpers import make_config


@pytest.fixture()
def app() -> Flask:
    return create_app(make_config())


@pytest.fixture()
def client(app: Flask) -> Iterator[FlaskClient]:
    with app.test_client() as test_client:
        yield test_client
