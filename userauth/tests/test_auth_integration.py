from __future__ import annotations

import json
import uuid

import pytest
from flask import Flask
from flask.testing import FlaskClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from userauth.app import create_app, get_container
from userauth.infrastructure.db.models import User

CREDENTIALS = {"email": "user@example.test", "password": "password"}


def _register_and_login(client: FlaskClient) -> None:
    assert client.post("/users", json=CREDENTIALS).status_code == 200
    assert client.post("/sessions", json=CREDENTIALS).status_code == 200


def test_register_login_whoami_flow(app: Flask, client: FlaskClient) -> None:
    register = client.post("/users", json=CREDENTIALS)
    assert register.status_code == 200
    body = register.get_json()
    assert body["email"] == "user@example.test"
    assert body["encrypted_password"]
    assert "password" not in body

    login = client.post("/sessions", json=CREDENTIALS)
    assert login.status_code == 200
    assert login.data == b""
    assert login.headers.get("Set-Cookie", "").startswith("session=")

    whoami = client.get("/private/whoami")
    assert whoami.status_code == 200
    profile = whoami.get_json()
    assert profile["email"] == "user@example.test"
    assert isinstance(profile["id"], int)
    assert "password" not in profile

    session_factory = get_container(app).session_factory
    with session_factory() as session:
        assert session.query(User).count() == 1


@pytest.mark.parametrize("password", ["", "1", "12345"])
def test_short_password_is_rejected(client: FlaskClient, password: str) -> None:
    response = client.post("/users", json={"email": "user@example.test", "password": password})

    assert response.status_code == 400
    assert response.get_json() == {"error": "bad request"}


@pytest.mark.parametrize("email", ["", "user", "user@", "user example@test.io"])
def test_invalid_email_is_rejected(client: FlaskClient, email: str) -> None:
    response = client.post("/users", json={"email": email, "password": "password"})

    assert response.status_code == 400


def test_duplicate_registration_is_rejected(client: FlaskClient) -> None:
    first = client.post("/users", json=CREDENTIALS)
    second = client.post("/users", json={**CREDENTIALS, "password": "different"})

    assert first.status_code == 200
    assert second.status_code == 400
    assert second.get_json() == {"error": "bad request"}


def test_wrong_password_is_rejected(client: FlaskClient) -> None:
    client.post("/users", json=CREDENTIALS)

    response = client.post("/sessions", json={**CREDENTIALS, "password": "passwordx"})

    assert response.status_code == 401
    assert response.get_json() == {"error": "incorrect email or password"}
    assert "Set-Cookie" not in response.headers


def test_unknown_email_is_rejected(client: FlaskClient) -> None:
    response = client.post("/sessions", json=CREDENTIALS)

    assert response.status_code == 401
    assert response.get_json() == {"error": "incorrect email or password"}


def test_whoami_without_cookie_is_rejected(client: FlaskClient) -> None:
    response = client.get("/private/whoami")

    assert response.status_code == 401
    assert response.get_json() == {"error": "not authenticated"}


def test_tampered_cookie_is_rejected(client: FlaskClient) -> None:
    _register_and_login(client)
    cookie = client.get_cookie("session")
    assert cookie is not None

    token = cookie.value
    for index in (5, len(token) // 2, len(token) - 1):
        replacement = "A" if token[index] != "A" else "B"
        client.set_cookie("session", token[:index] + replacement + token[index + 1 :])

        response = client.get("/private/whoami")
        assert response.status_code == 401
        assert response.get_json() == {"error": "not authenticated"}


def test_cookie_from_other_deployment_is_rejected(client: FlaskClient) -> None:
    _register_and_login(client)
    from userauth.tests.helpers import make_config

    other = create_app(make_config(SESSION_KEY="another-key"))
    with other.test_client() as other_client:
        other_client.post("/users", json=CREDENTIALS)
        other_client.post("/sessions", json=CREDENTIALS)
        foreign = other_client.get_cookie("session")
    assert foreign is not None

    client.set_cookie("session", foreign.value)
    assert client.get("/private/whoami").status_code == 401


def test_session_for_deleted_user_is_rejected(app: Flask, client: FlaskClient) -> None:
    _register_and_login(client)

    with get_container(app).session_factory() as session:
        session.query(User).delete()
        session.commit()

    response = client.get("/private/whoami")
    assert response.status_code == 401
    assert response.get_json() == {"error": "not authenticated"}


def test_every_response_has_request_id(client: FlaskClient) -> None:
    responses = [
        client.post("/users", json=CREDENTIALS),
        client.post("/users", json=CREDENTIALS),
        client.get("/private/whoami"),
        client.get("/does-not-exist"),
    ]

    ids = [response.headers["X-Request-ID"] for response in responses]
    for request_id in ids:
        uuid.UUID(request_id)
    assert len(set(ids)) == len(ids)


def test_cors_allows_only_configured_origins(client: FlaskClient) -> None:
    allowed = client.post(
        "/users", json=CREDENTIALS, headers={"Origin": "http://moonshard.io"}
    )
    denied = client.post(
        "/users",
        json={**CREDENTIALS, "email": "other@example.test"},
        headers={"Origin": "http://evil.example"},
    )

    assert allowed.headers.get("Access-Control-Allow-Origin") == "http://moonshard.io"
    assert allowed.headers.get("Access-Control-Allow-Credentials") == "true"
    assert "Access-Control-Allow-Origin" not in denied.headers


def test_json_body_is_read_without_content_type(client: FlaskClient) -> None:
    body = json.dumps(CREDENTIALS)

    register = client.post("/users", data=body)
    assert register.status_code == 200
    assert register.get_json()["email"] == "user@example.test"

    login = client.post("/sessions", data=body, content_type="text/plain")
    assert login.status_code == 200
    assert client.get("/private/whoami").status_code == 200


def test_store_failure_on_registration_returns_400(
    client: FlaskClient, monkeypatch: pytest.MonkeyPatch
) -> None:
    def failing_flush(self, objects=None):
        raise OperationalError("INSERT INTO users", {}, Exception("disk I/O error"))

    monkeypatch.setattr(Session, "flush", failing_flush)

    response = client.post("/users", json=CREDENTIALS)

    assert response.status_code == 400
    assert response.get_json() == {"error": "bad request"}
