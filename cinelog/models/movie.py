"""Cached catalog movie model."""

from sqlalchemy import JSON, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cinelog.database import Base
from cinelog.models.base import TimestampMixin, UUIDMixin


class Movie(Base, UUIDMixin, TimestampMixin):
    """Local copy of a third-party catalog entry (read-only for the API)."""

    __tablename__ = "movies"

    tmdb_id: Mapped[int] = mapped_column(Integer, unique=True, nullable=False)
    title: Mapped[str] = mapped_column(String(500), nullable=False, index=True)
    overview: Mapped[str | None] = mapped_column(Text, nullable=True)
    release_date: Mapped[str | None] = mapped_column(String(10), nullable=True)
    poster_path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    backdrop_path: Mapped[str | None] = mapped_column(String(255), nullable=True)
    rating: Mapped[float | None] = mapped_column(Float, nullable=True)
    genres: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
