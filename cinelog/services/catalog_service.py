"""Read-only queries over the cached movie catalog."""

import json

from sqlalchemy import String, cast, select
from sqlalchemy.ext.asyncio import AsyncSession

from cinelog.models import Movie


def _escape_like(term: str) -> str:
    return term.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


async def list_movies(db: AsyncSession, genre: str | None = None) -> list[Movie]:
    """All cached movies ordered by title, optionally limited to one genre.

    ``genres`` is a JSON list. The database narrows rows by matching the
    quoted genre inside the serialized list, which works on SQLite and
    Postgres alike; the exact, case-insensitive element match is confirmed
    on that reduced set.
    """
    query = select(Movie).order_by(Movie.title)
    if genre:
        needle = _escape_like(json.dumps(genre))
        query = query.where(cast(Movie.genres, String).ilike(f"%{needle}%", escape="\\"))

    result = await db.execute(query)
    movies = list(result.scalars().all())
    if genre:
        wanted = genre.casefold()
        movies = [movie for movie in movies if any(g.casefold() == wanted for g in movie.genres or [])]
    return movies


async def list_genres(db: AsyncSession) -> list[str]:
    """Sorted, de-duplicated genre names across the catalog."""
    result = await db.execute(select(Movie.genres))
    genres = {genre for row in result.scalars().all() for genre in (row or [])}
    return sorted(genres)


async def search_movies(db: AsyncSession, q: str, limit: int = 10) -> list[Movie]:
    """Case-insensitive title substring search."""
    term = q.strip()
    if not term:
        return []

    escaped = _escape_like(term)
    result = await db.execute(
        select(Movie)
        .where(Movie.title.ilike(f"%{escaped}%", escape="\\"))
        .order_by(Movie.title)
        .limit(limit)
    )
    return list(result.scalars().all())
