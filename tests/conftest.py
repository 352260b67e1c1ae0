"""Shared pytest configuration: environment, database and HTTP client."""

from __future__ import annotations

import os
import sys
import tempfile
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

TEST_DB_PATH = Path(tempfile.gettempdir()) / "consumed_api_tests.db"
os.environ["DATABASE_URL"] = f"sqlite:///{TEST_DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["ACCESS_TOKEN_EXPIRE_MINUTES"] = "30"
os.environ["APP_TIMEZONE"] = "UTC"

from consumed.config import reset_settings_cache  # noqa: E402

reset_settings_cache()


@pytest.fixture()
def database():
    """Provide an empty schema for the duration of a test."""

    from consumed.infrastructure.database import Base, engine, initialize_database

    Base.metadata.drop_all(bind=engine)
    initialize_database()
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture()
def client(database):
    """Return a test client bound to a fresh application instance."""

    from fastapi.testclient import TestClient

    from main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture()
def register(client):
    """Create an account through the API and return its auth headers."""

    def _register(username: str, *, display_name: str | None = None) -> dict:
        password = "Sup3rSecret!"
        email = f"{username}@example.com"
        response = client.post(
            "/users/",
            json={
                "username": username,
                "email": email,
                "password": password,
                "display_name": display_name,
            },
        )
        assert response.status_code == 201, response.text
        token_response = client.post(
            "/auth/token",
            data={"username": email, "password": password},
        )
        assert token_response.status_code == 200, token_response.text
        token = token_response.json()["access_token"]
        return {
            "id": response.json()["id"],
            "headers": {"Authorization": f"Bearer {token}"},
        }

    return _register
