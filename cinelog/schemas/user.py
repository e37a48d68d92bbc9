"""Pydantic schemas for users and profiles."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, StringConstraints

from cinelog.schemas.base import BaseResponse

# Fields safe to show to anyone browsing the community page
PUBLIC_PROFILE_FIELDS = ["id", "username", "bio", "profile_picture", "created_at"]


class PublicProfile(BaseResponse):
    """Schema for a user's public profile."""

    id: UUID
    username: str
    bio: str = ""
    profile_picture: str | None = None
    created_at: datetime


class OwnProfile(PublicProfile):
    """Profile as seen by its owner."""

    email: str


class ProfileUpdate(BaseModel):
    """Schema for editing one's own profile."""

    bio: Annotated[str, StringConstraints(strip_whitespace=True, max_length=500)] | None = None
    profile_picture: (
        Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=512)] | None
    ) = None
