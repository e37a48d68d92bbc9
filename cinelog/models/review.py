"""Review ("blog") model."""

from typing import Any
from uuid import UUID

from sqlalchemy import JSON, CheckConstraint, Float, ForeignKey, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from cinelog.database import Base
from cinelog.models.base import CreatedAtMixin, UUIDMixin


class Review(Base, UUIDMixin, CreatedAtMixin):
    """A user's rating and write-up of a film.

    ``film`` is a denormalized snapshot of the catalog entry at the time of
    writing, not a live reference to ``movies``.
    """

    __tablename__ = "reviews"
    __table_args__ = (
        CheckConstraint("rating >= 0 AND rating <= 5", name="ck_reviews_rating_range"),
    )

    author_id: Mapped[UUID] = mapped_column(
        Uuid(as_uuid=True),
        ForeignKey("users.id"),
        nullable=False,
        index=True,
    )
    film: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    rating: Mapped[float] = mapped_column(Float, nullable=False)
    title: Mapped[str] = mapped_column(String(200), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)

    def __repr__(self) -> str:
        return f"<Review(id={self.id}, author_id={self.author_id}, rating={self.rating})>"
