"""
Tests for the error envelope and the application lifecycle.
"""

import json

import pytest
from fastapi.testclient import TestClient

from usersapi.config import Settings
from usersapi.core.error_codes import ErrorCode
from usersapi.core.exception_handlers import error_response
from usersapi.core.exceptions import (
    BusinessError,
    FieldViolation,
    TechnicalError,
    ValidationFailedError,
)
from usersapi.main import create_app
from usersapi.modules.user.exceptions import DuplicateEmailError, UserNotFoundError


def body_of(response) -> dict:
    return json.loads(response.body)


class TestErrorResponse:
    def test_validation_failure(self):
        error = ValidationFailedError((FieldViolation("email", "Field required"),))
        response = error_response(error)
        assert response.status_code == 400
        assert body_of(response) == {
            "error": {
                "code": "VALIDATION_FAILED",
                "message": "Invalid input",
                "details": [{"field": "email", "message": "Field required"}],
            }
        }

    @pytest.mark.parametrize(
        "error, status_code, code",
        [
            (UserNotFoundError(1), 404, "USER_NOT_FOUND"),
            (DuplicateEmailError("a@b.com"), 409, "DUPLICATE_EMAIL"),
            (BusinessError(422, ErrorCode.BAD_REQUEST, "nope"), 422, "BAD_REQUEST"),
        ],
    )
    def test_business_failure_uses_declared_status(self, error, status_code, code):
        response = error_response(error)
        assert response.status_code == status_code
        body = body_of(response)
        assert body["error"]["code"] == code
        assert "details" not in body["error"]

    def test_technical_failure_hides_message(self):
        response = error_response(TechnicalError("connection refused to 10.0.0.5"))
        assert response.status_code == 500
        assert body_of(response) == {
            "error": {
                "code": "INTERNAL_SERVER_ERROR",
                "message": "An unexpected error occurred",
            }
        }


class TestErrorRoutes:
    @pytest.fixture
    def app(self, settings):
        app = create_app(settings)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("secret internals")

        @app.get("/technical")
        async def technical():
            raise TechnicalError("pool exhausted")

        return app

    def test_unmatched_route(self, client):
        response = client.get("/nope")
        assert response.status_code == 404
        assert response.json()["error"]["code"] == "NOT_FOUND"

    def test_method_not_allowed(self, client):
        response = client.patch("/users/1", json={"name": "Al"})
        assert response.status_code == 405
        assert response.json()["error"]["code"] == "METHOD_NOT_ALLOWED"

    def test_unexpected_exception(self, client):
        response = client.get("/boom")
        assert response.status_code == 500
        assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"
        assert "secret" not in response.text

    def test_technical_error(self, client):
        response = client.get("/technical")
        assert response.status_code == 500
        assert "pool exhausted" not in response.text

    def test_request_id_header(self, client):
        response = client.get("/health", headers={"X-Request-ID": "abc123"})
        assert response.headers["X-Request-ID"] == "abc123"
        assert "X-Process-Time" in response.headers


class TestLifecycle:
    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}

    def test_starts_without_reachable_database(self, tmp_path):
        settings = Settings(
            database_url=f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'users.db'}"
        )
        with TestClient(create_app(settings), raise_server_exceptions=False) as client:
            assert client.get("/health").status_code == 200
            response = client.get("/users")
            assert response.status_code == 500
            assert response.json()["error"]["code"] == "INTERNAL_SERVER_ERROR"

    def test_database_attached_to_app_state(self, app, client):
        assert app.state.database.url.startswith("sqlite+aiosqlite://")
