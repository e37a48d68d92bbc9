"""Catalog browsing API router."""

from fastapi import APIRouter, Query

from cinelog.config import settings
from cinelog.deps import DbSession
from cinelog.schemas import MovieResponse, MovieSummary
from cinelog.services import catalog_service

router = APIRouter(prefix="/movies", tags=["movies"])


@router.get("", response_model=list[MovieResponse])
async def list_movies(
    db: DbSession,
    genre: str | None = Query(None, description="Only movies tagged with this genre"),
) -> list[MovieResponse]:
    movies = await catalog_service.list_movies(db, genre=genre)
    return [MovieResponse.model_validate(movie) for movie in movies]


@router.get("/genres", response_model=list[str])
async def list_genres(db: DbSession) -> list[str]:
    return await catalog_service.list_genres(db)


@router.get("/search", response_model=list[MovieSummary])
async def search_movies(db: DbSession, q: str = Query("", max_length=200)) -> list[MovieSummary]:
    """Title search used by the review editor's film picker."""
    movies = await catalog_service.search_movies(db, q, limit=settings.movie_search_limit)
    return [MovieSummary.model_validate(movie) for movie in movies]
