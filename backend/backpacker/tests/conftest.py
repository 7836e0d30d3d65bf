"""
Shared fixtures: an app on a fresh in-memory SQLite database per test.
"""
import os

# The module-level app in backpacker.main is built on import; keep it off MySQL
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from backpacker.core.config import Settings
from backpacker.main import create_app


@pytest.fixture
def settings():
    return Settings(
        DATABASE_URL="sqlite://",
        SECRET_KEY="test-secret",
        BCRYPT_ROUNDS=4,
        CREATE_TABLES_ON_STARTUP=True,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def register_user(client):
    """Register a user and log in; returns (user dict, auth headers)."""
    def _register(username="backpacker", email=None, password="secret123"):
        email = email or f"{username}@example.com"
        response = client.post(
            "/api/users/register",
            json={"username": username, "email": email, "password": password}
        )
        assert response.status_code == 201, response.text
        login = client.post(
            "/api/users/login",
            json={"username": username, "password": password}
        )
        assert login.status_code == 200, login.text
        token = login.json()["accessToken"]
        return login.json()["user"], {"Authorization": f"Bearer {token}"}

    return _register
