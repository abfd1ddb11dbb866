"""Tests for the app factory, token issuance route and ambient middleware."""

import asyncio
import dataclasses
from unittest.mock import MagicMock

import pytest

from diagnostic_center.api.health import HEALTH_MESSAGE
from diagnostic_center.main import lifespan


def test_health(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.text == HEALTH_MESSAGE


def test_issue_token_route(client, tokens):
    response = client.post("/jwt", json={"email": "a@x.com"})

    assert response.status_code == 200
    assert tokens.verify(response.json()["token"]) == {"email": "a@x.com"}


def test_token_with_audience_opens_authenticated_routes(client, db):
    db.users.insert_one({"email": "a@x.com", "role": "user"})
    token = client.post("/jwt", json={"email": "a@x.com", "aud": "diagnostic-web"}).json()["token"]

    response = client.get("/users/email/a@x.com", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 200
    assert response.json()["email"] == "a@x.com"


def test_request_id_is_generated(client):
    response = client.get("/")

    assert response.headers["X-Request-ID"]


def test_request_id_is_echoed(client):
    response = client.get("/", headers={"X-Request-ID": "trace-123"})

    assert response.headers["X-Request-ID"] == "trace-123"


def test_error_envelope_carries_request_id(client):
    response = client.get("/users", headers={"X-Request-ID": "trace-456"})

    body = response.json()
    assert body["success"] is False
    assert body["error"]["request_id"] == "trace-456"
    assert "timestamp" in body


def test_startup_creates_email_indexes(client, db):
    assert "users_email_idx" in db.users.index_information()
    assert "reservations_email_idx" in db.reservations.index_information()


def test_cors_allows_frontend_origin(client):
    response = client.options(
        "/tests",
        headers={
            "Origin": "http://localhost:5173",
            "Access-Control-Request-Method": "GET",
        },
    )

    assert response.headers["access-control-allow-origin"] == "http://localhost:5173"
    assert response.headers["access-control-allow-credentials"] == "true"


def test_shutdown_closes_mongo_client(app):
    mongo_client = MagicMock()
    app.state.context = dataclasses.replace(app.state.context, client=mongo_client)

    async def serve_and_fail():
        async with lifespan(app):
            raise RuntimeError("server crashed")

    with pytest.raises(RuntimeError):
        asyncio.run(serve_and_fail())

    mongo_client.close.assert_called_once_with()
