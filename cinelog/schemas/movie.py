"""Pydantic schemas for cached catalog movies."""

from uuid import UUID

from cinelog.schemas.base import BaseResponse


class MovieSummary(BaseResponse):
    """Minimal fields used by search-as-you-type."""

    id: UUID
    tmdb_id: int
    title: str
    poster_path: str | None = None


class MovieResponse(MovieSummary):
    """Schema for a catalog movie."""

    overview: str | None = None
    release_date: str | None = None
    backdrop_path: str | None = None
    rating: float | None = None
    genres: list[str] = []
