"""Schemas for user profiles."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from booklists.domain.user import User


class AboutRequest(BaseModel):
    """Request schema for adding an "about me" entry."""

    about: str = Field(..., max_length=2000, description="About text")

    model_config = ConfigDict(
        json_schema_extra={"example": {"about": "Reads mostly science fiction."}},
    )


class AboutEntryResponse(BaseModel):
    id: UUID
    text: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class UserResponse(BaseModel):
    """User profile.

    The email address is only included when users look at themselves.
    """

    id: UUID
    username: str
    email: str | None = Field(None, description="Only set for the caller")
    about: list[AboutEntryResponse] = Field(
        default_factory=list,
        description="About entries, newest first",
    )
    created_at: datetime

    @classmethod
    def from_domain(cls, user: User, include_email: bool = False) -> "UserResponse":
        return cls(
            id=user.id,
            username=user.username,
            email=user.email if include_email else None,
            about=[AboutEntryResponse.model_validate(e) for e in user.about],
            created_at=user.created_at,
        )


class AccountDeletedResponse(BaseModel):
    deleted_lists: int = Field(..., description="Lists removed with the account")
