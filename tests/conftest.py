"""
pytest configuration and fixtures.
"""

from collections.abc import Iterator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from usersapi.config import Settings
from usersapi.main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Per-test SQLite database, schema created at startup."""
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'users.db'}",
        create_tables=True,
    )


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    return create_app(settings)


@pytest.fixture
def client(app: FastAPI) -> Iterator[TestClient]:
    """Test client with lifespan (database created and disposed)."""
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def make_user(client: TestClient):
    """Create a user through the API and return its JSON record."""

    def _make_user(name: str = "Alice", email: str = "alice@example.com") -> dict:
        response = client.post("/users", json={"name": name, "email": email})
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _make_user
