"""Users router for profiles and account management."""

import logging

from fastapi import APIRouter

from booklists.application.commands import (
    AddAboutEntryCommand,
    DeleteAccountCommand,
    RemoveAboutEntryCommand,
)
from booklists.application.queries import (
    GetCurrentUserQuery,
    GetUserQuery,
    ListUsersQuery,
)
from booklists.presentation.api.dependencies import CurrentActor, RepoFactory
from booklists.presentation.api.schemas.common import error_responses
from booklists.presentation.api.schemas.users import (
    AboutRequest,
    AccountDeletedResponse,
    UserResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("", summary="List users", responses=error_responses(503))
async def list_users(factory: RepoFactory) -> list[UserResponse]:
    query = ListUsersQuery.from_factory(factory)
    return [UserResponse.from_domain(user) for user in await query.execute()]


@router.get("/me", summary="Get current user", responses=error_responses(401))
async def get_me(actor: CurrentActor, factory: RepoFactory) -> UserResponse:
    """Get the authenticated caller's profile."""
    query = GetCurrentUserQuery.from_factory(factory)
    return UserResponse.from_domain(await query.execute(actor), include_email=True)


@router.put(
    "/me/about",
    summary="Add about entry",
    responses=error_responses(400, 401),
)
async def add_about_entry(
    request: AboutRequest,
    actor: CurrentActor,
    factory: RepoFactory,
) -> UserResponse:
    """Add an "about me" entry to the top of the caller's profile."""
    command = AddAboutEntryCommand.from_factory(factory)
    user = await command.execute(actor, request.about)
    await factory.session.commit()
    return UserResponse.from_domain(user, include_email=True)


@router.delete(
    "/me/about/{entry_id}",
    summary="Remove about entry",
    responses=error_responses(401, 404),
)
async def remove_about_entry(
    entry_id: str,
    actor: CurrentActor,
    factory: RepoFactory,
) -> UserResponse:
    command = RemoveAboutEntryCommand.from_factory(factory)
    user = await command.execute(actor, entry_id)
    await factory.session.commit()
    return UserResponse.from_domain(user, include_email=True)


@router.delete(
    "/me",
    summary="Delete account",
    responses=error_responses(401, 503),
)
async def delete_account(
    actor: CurrentActor,
    factory: RepoFactory,
) -> AccountDeletedResponse:
    """
    Delete the caller's account and every list it owns.

    Books, likes and comments left on other users' lists remain.
    """
    command = DeleteAccountCommand.from_factory(factory)
    deleted_lists = await command.execute(actor)
    await factory.session.commit()
    logger.info("Account %s deleted", actor.user_id)
    return AccountDeletedResponse(deleted_lists=deleted_lists)


@router.get(
    "/{user_id}",
    summary="Get user",
    responses=error_responses(404),
)
async def get_user(user_id: str, factory: RepoFactory) -> UserResponse:
    query = GetUserQuery.from_factory(factory)
    return UserResponse.from_domain(await query.execute(user_id))
