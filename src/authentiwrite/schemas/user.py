"""User-related Pydantic schemas.

Government IDs never leave the service; email is only returned to its owner.
"""

from __future__ import annotations

from pydantic import Field, field_validator

from .common import ApiModel, RecordModel


class RegisterRequest(ApiModel):
    """Schema for registering a new writer."""

    gov_id: str = Field(..., min_length=1, description="Government ID, e.g. GOV123456")
    email: str = Field(..., min_length=1, description="Contact email address")
    name: str = Field(..., min_length=1, max_length=100, description="Display name")

    @field_validator("gov_id", "email", "name")
    @classmethod
    def _strip(cls, v: str) -> str:
        return v.strip()


class LoginRequest(ApiModel):
    """Schema for login submissions."""

    gov_id: str = Field(..., min_length=1)
    email: str = Field(..., min_length=1)


class CommenterCard(RecordModel):
    """Minimal author details attached to comments."""

    id: str
    name: str
    avatar: str | None = None


class AuthorCard(CommenterCard):
    """Author details attached to writings."""

    verified: bool


class UserPublic(RecordModel):
    """Public profile of a user."""

    id: str
    name: str
    bio: str | None = None
    avatar: str | None = None
    verified: bool


class UserPrivate(UserPublic):
    """Profile returned to the user it belongs to."""

    email: str


class UserProfile(UserPublic):
    """Profile with follower and following counts."""

    followers: int
    following: int


class UserPrivateProfile(UserProfile):
    """Own profile with counts and email."""

    email: str


class AuthResponse(ApiModel):
    """Response returned after registration or login."""

    success: bool = True
    token: str
    user: UserPrivate


class MeResponse(ApiModel):
    """Response for the current-user endpoint."""

    success: bool = True
    user: UserPrivateProfile
