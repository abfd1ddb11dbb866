"""Tests for the authenticated and administrator gates."""

from datetime import timedelta

from fastapi import Depends, Request

from diagnostic_center.middleware.auth import extract_bearer_token, require_authenticated
from diagnostic_center.middleware.rbac import GateTier, gate


def test_gate_stage_counts():
    assert gate(GateTier.OPEN) == []
    assert len(gate(GateTier.AUTHENTICATED)) == 1
    assert len(gate(GateTier.ADMIN)) == 2


def test_extract_bearer_token():
    assert extract_bearer_token("Bearer abc") == "abc"
    assert extract_bearer_token("bearer abc") == "abc"
    assert extract_bearer_token("Basic abc") is None
    assert extract_bearer_token("Bearer ") is None
    assert extract_bearer_token(None) is None


def test_missing_header_is_unauthenticated(client):
    response = client.get("/users")

    assert response.status_code == 401
    assert response.headers["www-authenticate"] == "Bearer"
    assert response.json()["error"]["code"] == "UNAUTHENTICATED"


def test_non_bearer_scheme_is_unauthenticated(client):
    response = client.get("/users", headers={"Authorization": "Basic dXNlcjpwYXNz"})

    assert response.status_code == 401


def test_garbage_token_is_unauthenticated(client):
    response = client.get("/users", headers={"Authorization": "Bearer nope"})

    assert response.status_code == 401


def test_expired_token_is_unauthenticated(client, db, tokens):
    db.users.insert_one({"email": "old@diag.test", "role": "admin"})
    token = tokens.issue({"email": "old@diag.test"}, expires_delta=timedelta(minutes=-5))

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 401
    assert response.json()["error"]["message"] == "Token has expired"


def test_unknown_user_is_forbidden(client, auth_headers):
    response = client.get("/users", headers=auth_headers("ghost@diag.test"))

    assert response.status_code == 403
    assert response.json()["error"]["code"] == "FORBIDDEN"


def test_ordinary_user_is_forbidden(client, user_headers):
    response = client.get("/users", headers=user_headers)

    assert response.status_code == 403


def test_token_without_email_is_forbidden(client, tokens):
    token = tokens.issue({"name": "no email"})

    response = client.get("/users", headers={"Authorization": f"Bearer {token}"})

    assert response.status_code == 403


def test_admin_passes(client, admin_headers):
    response = client.get("/users", headers=admin_headers)

    assert response.status_code == 200


def test_authenticated_tier_accepts_any_valid_token(client, auth_headers):
    # No user record is needed below the admin tier
    response = client.get("/reservations/ghost@diag.test", headers=auth_headers("ghost@diag.test"))

    assert response.status_code == 200
    assert response.json() == []


def test_claims_are_attached_to_request(app, client, auth_headers):
    @app.get("/_claims")
    def read_claims(request: Request, _claims: dict = Depends(require_authenticated)):
        return request.state.claims

    response = client.get("/_claims", headers=auth_headers("a@x.com"))

    assert response.status_code == 200
    assert response.json() == {"email": "a@x.com"}


def test_open_routes_need_no_token(client):
    assert client.get("/").status_code == 200
    assert client.get("/tests").status_code == 200
    assert client.get("/doctors").status_code == 200
    assert client.get("/banners").status_code == 200
