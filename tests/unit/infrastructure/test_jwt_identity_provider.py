"""Unit tests for JWTIdentityProvider."""

from unittest.mock import AsyncMock

import pytest

from booklists.application.ports.identity import Actor
from booklists.domain.user import User, UserRepository
from booklists.infrastructure.adapters.identity import JWTIdentityProvider
from booklists_auth import InvalidTokenError, JWTService, MissingCredentialError


@pytest.fixture
def jwt_service() -> JWTService:
    return JWTService(secret_key="test-secret")


@pytest.fixture
def user() -> User:
    return User.create(username="alice", email="alice@example.com")


@pytest.fixture
def user_repo(user) -> AsyncMock:
    repo = AsyncMock(spec=UserRepository)
    repo.find_by_id.return_value = user
    return repo


@pytest.mark.asyncio
async def test_access_token_resolves_to_actor(jwt_service, user_repo, user):
    provider = JWTIdentityProvider(jwt_service, user_repo)
    token = jwt_service.create_access_token(user.id, user.email)

    actor = await provider.verify(token)

    assert actor == Actor(user_id=user.id, display_name="alice")
    user_repo.find_by_id.assert_awaited_once_with(user.id)


@pytest.mark.asyncio
@pytest.mark.parametrize("credential", [None, ""])
async def test_missing_credential(jwt_service, user_repo, credential):
    provider = JWTIdentityProvider(jwt_service, user_repo)

    with pytest.raises(MissingCredentialError):
        await provider.verify(credential)


@pytest.mark.asyncio
async def test_refresh_token_is_rejected(jwt_service, user_repo, user):
    provider = JWTIdentityProvider(jwt_service, user_repo)
    token = jwt_service.create_refresh_token(user.id, user.email)

    with pytest.raises(InvalidTokenError, match="Invalid token type"):
        await provider.verify(token)

    user_repo.find_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_token_for_deleted_user(jwt_service, user_repo, user):
    user_repo.find_by_id.return_value = None
    provider = JWTIdentityProvider(jwt_service, user_repo)

    with pytest.raises(InvalidTokenError, match="User not found"):
        await provider.verify(jwt_service.create_access_token(user.id, user.email))


@pytest.mark.asyncio
async def test_invalid_token(jwt_service, user_repo):
    provider = JWTIdentityProvider(jwt_service, user_repo)

    with pytest.raises(InvalidTokenError):
        await provider.verify("garbage")
