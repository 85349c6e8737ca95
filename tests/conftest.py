import itertools

import pytest
from fastapi.testclient import TestClient

from bliss_api.app.core.store import DataStore
from bliss_api.app.main import create_app
from bliss_api.app.services.user_service import UserService


@pytest.fixture
def store():
    return DataStore()


@pytest.fixture
def users(store):
    return UserService(store)


@pytest.fixture
def make_user(users):
    """Create an account directly in the store (password is not hashed)."""
    counter = itertools.count(1)

    def _make(**overrides):
        n = next(counter)
        data = {
            "username": f"user{n}",
            "password": "not-a-hash",
            "name": f"User {n}",
            "age": 25,
            "gender": "female",
            "looking_for": "all",
        }
        data.update(overrides)
        return users.create_user(data)

    return _make


@pytest.fixture
def client(store):
    return TestClient(create_app(store))


@pytest.fixture
def register(client):
    """Register through the API; returns (user json, auth headers)."""
    counter = itertools.count(1)

    def _register(**overrides):
        n = next(counter)
        body = {
            "username": f"member{n}",
            "password": "password123",
            "name": f"Member {n}",
            "age": 27,
            "gender": "female",
            "lookingFor": "all",
        }
        body.update(overrides)
        response = client.post("/api/auth/register", json=body)
        assert response.status_code == 201, response.text
        data = response.json()
        return data["user"], {"Authorization": f"Bearer {data['accessToken']}"}

    return _register
