"""Shared fixtures: an app built by the factory over an in-memory MongoDB."""

import mongomock
import pytest
from fastapi.testclient import TestClient

from diagnostic_center.config import Settings
from diagnostic_center.main import create_app

ADMIN_EMAIL = "admin@diag.test"
USER_EMAIL = "patient@diag.test"


@pytest.fixture
def settings():
    return Settings(
        _env_file=None,
        ENV="test",
        ACCESS_TOKEN_SECRET="test-secret",
        MONGODB_URI="mongodb://localhost:27017",
        MONGODB_DB_NAME="diagnosticCenterDb",
    )


@pytest.fixture
def db():
    return mongomock.MongoClient()["diagnosticCenterDb"]


@pytest.fixture
def app(settings, db):
    return create_app(settings=settings, db=db)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def tokens(app):
    return app.state.context.tokens


@pytest.fixture
def auth_headers(tokens):
    """Build an Authorization header carrying a token for ``email``."""

    def _headers(email):
        return {"Authorization": f"Bearer {tokens.issue({'email': email})}"}

    return _headers


@pytest.fixture
def admin_headers(db, auth_headers):
    db.users.insert_one({"email": ADMIN_EMAIL, "role": "admin"})
    return auth_headers(ADMIN_EMAIL)


@pytest.fixture
def user_headers(db, auth_headers):
    db.users.insert_one({"email": USER_EMAIL, "role": "user"})
    return auth_headers(USER_EMAIL)
