"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from backend.api.dependencies import get_user_store
from backend.main import app
from backend.services.user_store import UserStore


class AuthHeaders(dict):
    """Dict subclass that also stores the signed-up user's details."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


@pytest.fixture(scope="function")
def store():
    """Fresh, empty user store for each test."""
    return UserStore()


@pytest.fixture(scope="function")
def client(store):
    """Create a test client with the user store override."""
    app.dependency_overrides[get_user_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers(client):
    """Sign up a user and return bearer auth headers with user info."""
    response = client.post(
        "/api/signup",
        json={"name": "Test User", "email": "test@example.com", "password": "testpass123"},
    )
    assert response.status_code == 201
    data = response.json()

    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=data["user"]["email"],
    )
