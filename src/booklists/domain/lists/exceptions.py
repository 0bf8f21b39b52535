"""Exceptions raised by the lists domain."""

from booklists.domain.shared.exceptions import (
    BusinessRuleViolation,
    EntityNotFoundError,
    ErrorCode,
)


class ListNotFoundError(EntityNotFoundError):
    """Raised when no list exists for a well-formed id."""

    def __init__(self, list_id: object):
        super().__init__(
            message="List not found",
            code=ErrorCode.LIST_NOT_FOUND,
            details={"list_id": str(list_id)},
        )
        self.list_id = list_id


class CommentNotFoundError(EntityNotFoundError):
    def __init__(self, list_id: object, comment_id: object):
        super().__init__(
            message="Comment does not exist",
            code=ErrorCode.COMMENT_NOT_FOUND,
            details={"list_id": str(list_id), "comment_id": str(comment_id)},
        )
        self.list_id = list_id
        self.comment_id = comment_id


class AlreadyLikedError(BusinessRuleViolation):
    """Raised when the actor already has a like on the list."""

    def __init__(self, list_id: object, user_id: object):
        super().__init__(
            message="List already liked",
            code=ErrorCode.LIST_ALREADY_LIKED,
            details={"list_id": str(list_id), "user_id": str(user_id)},
        )


class NotLikedError(BusinessRuleViolation):
    """Raised when unliking a list the actor has not liked."""

    def __init__(self, list_id: object, user_id: object):
        super().__init__(
            message="List has not yet been liked",
            code=ErrorCode.LIST_NOT_LIKED,
            details={"list_id": str(list_id), "user_id": str(user_id)},
        )
