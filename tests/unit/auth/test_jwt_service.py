"""Unit tests for JWTService."""

from datetime import timedelta
from uuid import uuid4

import jwt
import pytest

from booklists_auth import InvalidTokenError, JWTService

SECRET = "test-secret-key"


@pytest.fixture
def service() -> JWTService:
    return JWTService(secret_key=SECRET)


def test_empty_secret_is_rejected():
    with pytest.raises(ValueError, match="cannot be empty"):
        JWTService(secret_key="")


def test_access_token_round_trip(service):
    user_id = uuid4()

    payload = service.verify_token(
        service.create_access_token(user_id, "alice@example.com"),
    )

    assert payload.user_id == user_id
    assert payload.email == "alice@example.com"
    assert payload.is_access_token()
    assert not payload.is_refresh_token()


def test_refresh_token_type(service):
    payload = service.verify_token(
        service.create_refresh_token(uuid4(), "alice@example.com"),
    )
    assert payload.is_refresh_token()


def test_expired_token(service):
    token = service.create_access_token(
        uuid4(),
        "alice@example.com",
        expires_delta=timedelta(seconds=-1),
    )

    with pytest.raises(InvalidTokenError, match="expired"):
        service.verify_token(token)


def test_token_signed_with_other_secret(service):
    other = JWTService(secret_key="another-secret")
    token = other.create_access_token(uuid4(), "alice@example.com")

    with pytest.raises(InvalidTokenError, match="Invalid token"):
        service.verify_token(token)


def test_garbage_token(service):
    with pytest.raises(InvalidTokenError):
        service.verify_token("not.a.token")


def test_missing_claims(service):
    token = jwt.encode({"exp": 9999999999}, SECRET, algorithm=JWTService.ALGORITHM)

    with pytest.raises(InvalidTokenError, match="Malformed"):
        service.verify_token(token)


def test_access_token_lifetime():
    service = JWTService(secret_key=SECRET, access_token_expire_hours=3)
    assert service.access_token_lifetime == timedelta(hours=3)


def test_unknown_token_type(service):
    claims = {
        "sub": str(uuid4()),
        "email": "a@b.test",
        "type": "api-key",
        "exp": 9999999999,
    }
    token = jwt.encode(claims, SECRET, algorithm=JWTService.ALGORITHM)

    with pytest.raises(InvalidTokenError, match="Malformed"):
        service.verify_token(token)


def test_subject_must_be_a_uuid(service):
    claims = {"sub": "alice", "email": "a@b.test", "type": "access", "exp": 9999999999}
    token = jwt.encode(claims, SECRET, algorithm=JWTService.ALGORITHM)

    with pytest.raises(InvalidTokenError, match="Malformed"):
        service.verify_token(token)
