"""Pydantic schemas package."""

from cinelog.schemas.auth import AuthSuccess, LoginRequest, RegisterRequest
from cinelog.schemas.movie import MovieResponse, MovieSummary
from cinelog.schemas.review import FilmSnapshot, ReviewCreate, ReviewPage, ReviewResponse
from cinelog.schemas.user import (
    PUBLIC_PROFILE_FIELDS,
    OwnProfile,
    ProfileUpdate,
    PublicProfile,
)

__all__ = [
    "PUBLIC_PROFILE_FIELDS",
    "AuthSuccess",
    "FilmSnapshot",
    "LoginRequest",
    "MovieResponse",
    "MovieSummary",
    "OwnProfile",
    "ProfileUpdate",
    "PublicProfile",
    "RegisterRequest",
    "ReviewCreate",
    "ReviewPage",
    "ReviewResponse",
]
