"""
Tests for the centralized error handlers.

Mounts throw-away routes that raise each error type on a bare
FastAPI app and checks the resulting status code and body.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from app.domain.persons.errors import (
    InvalidImportFileError,
    InvalidPageError,
    NoPersonsWithColorError,
    PersonAlreadyExistsError,
    PersonDomainError,
    PersonNotFoundError,
)
from app.shared.errors.handlers import register_error_handlers

ERRORS = {
    "not-found": PersonNotFoundError(7),
    "no-color": NoPersonsWithColorError("gelb"),
    "exists": PersonAlreadyExistsError("hans|müller|ort"),
    "bad-file": InvalidImportFileError("file is not valid UTF-8 text"),
    "bad-page": InvalidPageError(-1, 20, 100),
    "domain": PersonDomainError("storage unavailable"),
    "unexpected": RuntimeError("connection string postgres://secret"),
}


def _build_app() -> FastAPI:
    app = FastAPI()
    register_error_handlers(app)

    @app.get("/raise/{name}")
    def _raise(name: str) -> None:
        raise ERRORS[name]

    return app


@pytest.fixture(scope="module")
def client() -> TestClient:
    return TestClient(_build_app(), raise_server_exceptions=False)


class TestDomainErrorMapping:
    """Each domain error maps to exactly one status code."""

    @pytest.mark.parametrize(
        "name, status_code, error",
        [
            ("not-found", 404, "Person not found"),
            ("no-color", 404, "No persons found"),
            ("exists", 409, "Person already exists"),
            ("bad-file", 400, "Invalid import file"),
            ("bad-page", 400, "Invalid request"),
            ("domain", 500, "Internal server error"),
        ],
    )
    def test_status_and_error(self, client, name, status_code, error) -> None:
        response = client.get(f"/raise/{name}")
        assert response.status_code == status_code
        assert response.json()["error"] == error

    def test_conflict_does_not_leak_key(self, client) -> None:
        assert client.get("/raise/exists").json() == {"error": "Person already exists"}


class TestUnexpectedErrors:
    """Unexpected exceptions never expose internals."""

    def test_generic_500_body(self, client) -> None:
        response = client.get("/raise/unexpected")
        assert response.status_code == 500
        assert response.json() == {"error": "Internal server error"}
        assert "secret" not in response.text


class TestFrameworkHTTPErrors:
    """Starlette HTTP errors are rendered as ErrorResponse bodies."""

    def test_not_found_route(self, client) -> None:
        response = client.get("/nowhere")
        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    def test_method_not_allowed_keeps_allow_header(self, client) -> None:
        response = client.post("/raise/not-found")
        assert response.status_code == 405
        assert response.json() == {"error": "Method Not Allowed"}
        assert "GET" in response.headers["Allow"]


# ═══════════════════════════════════════════════════════════════════
# Rate limiting
# ═══════════════════════════════════════════════════════════════════


def _limited_app() -> FastAPI:
    app = FastAPI()
    app.state.limiter = Limiter(key_func=get_remote_address, default_limits=["2/minute"])
    app.add_middleware(SlowAPIMiddleware)
    register_error_handlers(app)

    @app.get("/ping")
    def _ping() -> dict:
        return {"pong": True}

    return app


class TestDefaultRateLimit:
    """The default limit is enforced on undecorated routes."""

    def test_third_request_is_rejected(self) -> None:
        limited = TestClient(_limited_app())
        assert limited.get("/ping").status_code == 200
        assert limited.get("/ping").status_code == 200

        response = limited.get("/ping")
        assert response.status_code == 429
        assert response.json()["error"].startswith("Rate limit exceeded")
