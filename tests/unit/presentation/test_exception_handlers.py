"""Unit tests for mapping exceptions to HTTP responses."""

import pytest
from fastapi import FastAPI, status
from fastapi.testclient import TestClient
from pydantic import BaseModel
from sqlalchemy.exc import OperationalError

from booklists.domain.lists import AlreadyLikedError, ListNotFoundError
from booklists.domain.shared.exceptions import (
    BusinessRuleViolation,
    ConflictError,
    DomainException,
    EntityNotFoundError,
    ErrorCode,
    ForbiddenError,
    InvalidIdentifierError,
    StoreUnavailableError,
    ValidationError,
)
from booklists.domain.user import EmailAlreadyExistsError
from booklists.presentation.api.exception_handlers import (
    ERROR_CODE_TO_STATUS,
    _get_status_for_exception,
    setup_exception_handlers,
)
from booklists_auth import (
    AccountLockedError,
    InvalidCredentialsError,
    InvalidTokenError,
    MissingCredentialError,
    WeakPasswordError,
)


class TestStatusMapping:
    @pytest.mark.parametrize(
        ("exc", "expected"),
        [
            (ValidationError("bad"), 400),
            (InvalidIdentifierError("bad id"), 404),
            (ListNotFoundError("x"), 404),
            (ForbiddenError(), 403),
            (AlreadyLikedError("l", "u"), 400),
            (EmailAlreadyExistsError("a@b.test"), 409),
            (StoreUnavailableError(), 503),
        ],
    )
    def test_known_codes(self, exc, expected):
        assert _get_status_for_exception(exc) == expected

    def test_every_error_code_is_mapped(self):
        assert set(ERROR_CODE_TO_STATUS) == set(ErrorCode)

    def test_fallback_uses_exception_type(self, monkeypatch):
        monkeypatch.setattr(
            "booklists.presentation.api.exception_handlers.ERROR_CODE_TO_STATUS",
            {},
        )
        assert _get_status_for_exception(EntityNotFoundError("x")) == 404
        assert _get_status_for_exception(ConflictError("x")) == 409
        assert _get_status_for_exception(BusinessRuleViolation("x")) == 400
        assert _get_status_for_exception(DomainException("x")) == 400


class _Body(BaseModel):
    name: str


@pytest.fixture
def client() -> TestClient:
    """A bare app whose routes raise the exception named in the path."""
    app = FastAPI()
    setup_exception_handlers(app)

    errors = {
        "not-found": ListNotFoundError("abc"),
        "missing-credential": MissingCredentialError(),
        "invalid-token": InvalidTokenError(),
        "bad-login": InvalidCredentialsError(),
        "locked": AccountLockedError(locked_until="2030-01-01T00:00:00+00:00"),
        "weak-password": WeakPasswordError("Password must be at least 6 characters"),
        "database-down": OperationalError("SELECT 1", {}, Exception("refused")),
        "boom": RuntimeError("secret internals"),
    }

    @app.get("/raise/{name}")
    async def raise_error(name: str):
        raise errors[name]

    @app.post("/validate")
    async def validate(body: _Body):
        return body

    return TestClient(app, raise_server_exceptions=False)


class TestHandlers:
    def test_domain_error_body(self, client):
        response = client.get("/raise/not-found")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"detail": "List not found", "code": "LIST_NOT_FOUND"}

    @pytest.mark.parametrize(
        "name",
        ["missing-credential", "invalid-token", "bad-login"],
    )
    def test_auth_errors_are_401_with_challenge(self, client, name):
        response = client.get(f"/raise/{name}")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json()["code"] == "AUTHENTICATION_FAILED"
        assert response.headers["www-authenticate"] == "Bearer"

    def test_locked_account_is_423(self, client):
        response = client.get("/raise/locked")

        assert response.status_code == status.HTTP_423_LOCKED
        assert response.json()["code"] == "ACCOUNT_LOCKED"
        assert "2030-01-01" in response.json()["detail"]

    def test_weak_password_is_400(self, client):
        response = client.get("/raise/weak-password")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["code"] == "WEAK_PASSWORD"

    def test_request_validation_is_400(self, client):
        response = client.post("/validate", json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        body = response.json()
        assert body["code"] == "VALIDATION_ERROR"
        assert "name" in body["detail"]

    def test_database_connectivity_is_503(self, client):
        response = client.get("/raise/database-down")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE
        assert response.json()["code"] == "STORE_UNAVAILABLE"

    def test_unexpected_error_is_opaque_500(self, client):
        response = client.get("/raise/boom")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "detail": "An internal error occurred",
            "code": "INTERNAL_ERROR",
        }
