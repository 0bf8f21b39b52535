"""Authorization policy for list mutations.

Every mutating list command asks this module before touching the store,
so ownership and authorship rules live in exactly one place.
"""

from __future__ import annotations

import logging
from typing import Optional

from booklists.application.ports.identity import Actor
from booklists.domain.lists import BookList, Comment, ListAction
from booklists.domain.shared.exceptions import ForbiddenError

logger = logging.getLogger(__name__)

# Mutations any authenticated actor may perform on any list
_OPEN_ACTIONS = frozenset(
    {
        ListAction.ADD_BOOK,
        ListAction.LIKE,
        ListAction.UNLIKE,
        ListAction.ADD_COMMENT,
    },
)


def can_mutate(
    actor: Actor,
    aggregate: BookList,
    action: ListAction,
    target: Optional[Comment] = None,
) -> bool:
    """Decide whether ``actor`` may perform ``action`` on ``aggregate``.

    Parameters
    ----------
    actor
        The authenticated caller
    aggregate
        Current snapshot of the list
    action
        The intended mutation
    target
        The comment being acted on, required for DELETE_COMMENT

    Returns
    -------
    True if allowed
    """
    if action in _OPEN_ACTIONS:
        return True
    if action is ListAction.DELETE_LIST:
        return aggregate.is_owned_by(actor.user_id)
    if action is ListAction.DELETE_COMMENT:
        if target is None:
            msg = "DELETE_COMMENT requires the target comment"
            raise ValueError(msg)
        return target.is_authored_by(actor.user_id)
    return False


def ensure_can_mutate(
    actor: Actor,
    aggregate: BookList,
    action: ListAction,
    target: Optional[Comment] = None,
) -> None:
    """Raise ForbiddenError unless ``can_mutate`` allows the action."""
    if not can_mutate(actor, aggregate, action, target):
        logger.warning(
            "Denied %s on list %s for user %s",
            action.value,
            aggregate.id,
            actor.user_id,
        )
        raise ForbiddenError(
            "User not authorized",
            details={"list_id": str(aggregate.id), "action": action.value},
        )
