"""Pydantic schemas for reviews ("blogs")."""

from datetime import datetime
from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints

from cinelog.models import Review
from cinelog.schemas.base import BaseResponse


class FilmSnapshot(BaseModel):
    """Catalog entry copied into the review. Unknown keys are preserved."""

    model_config = ConfigDict(extra="allow")

    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]


class ReviewCreate(BaseModel):
    """Schema for creating a review.

    Any ``author`` key in the payload is ignored; the author always comes
    from the verified token.
    """

    film: FilmSnapshot
    rating: Annotated[float, Field(ge=0, le=5, strict=True, allow_inf_nan=False)]
    title: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=200)]
    body: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=10_000)]


class ReviewResponse(BaseResponse):
    """Schema for review response."""

    id: UUID
    author: UUID
    film: dict[str, Any]
    rating: float
    title: str
    body: str
    created_at: datetime

    @classmethod
    def from_model(cls, review: Review) -> "ReviewResponse":
        return cls(
            id=review.id,
            author=review.author_id,
            film=review.film,
            rating=review.rating,
            title=review.title,
            body=review.body,
            created_at=review.created_at,
        )


class ReviewPage(BaseModel):
    """One page of a user's reviews, newest first."""

    blogs: list[ReviewResponse]
    page: int
    limit: int
    total: int
    total_pages: int
