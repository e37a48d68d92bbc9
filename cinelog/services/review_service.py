"""Review ("blog") workflows."""

from math import ceil
from typing import Any
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cinelog.errors import AppError, InvalidInputShapeError, PersistenceFailure, ValidationError
from cinelog.logger import get_logger, log_exception
from cinelog.models import Review
from cinelog.result import Err, Ok, Result
from cinelog.schemas import ReviewCreate
from cinelog.validation import validate

logger = get_logger(__name__)


async def create_review(db: AsyncSession, author_id: UUID, raw: Any) -> Result[Review, AppError]:
    """Persist a review written by ``author_id``.

    ``author_id`` must come from a verified token. A client-supplied author
    in ``raw`` is never read.
    """
    try:
        data: ReviewCreate = validate("review", raw)
    except (ValidationError, InvalidInputShapeError) as exc:
        logger.info("Review rejected", reason=exc.kind, author_id=str(author_id))
        return Err(exc)

    review = Review(
        author_id=author_id,
        film=data.film.model_dump(),
        rating=data.rating,
        title=data.title,
        body=data.body,
    )
    db.add(review)
    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        log_exception(logger, exc, "Failed to persist review", author_id=str(author_id))
        return Err(PersistenceFailure("Could not create review"))

    logger.info("Review created", review_id=str(review.id), author_id=str(author_id))
    return Ok(review)


async def list_reviews_by_author(
    db: AsyncSession,
    author_id: UUID,
    page: int = 1,
    limit: int = 6,
) -> tuple[list[Review], int, int]:
    """Return one page of ``author_id``'s reviews, newest first.

    Returns:
        (reviews, total, total_pages)
    """
    base_query = select(Review).where(Review.author_id == author_id)

    count_query = select(func.count()).select_from(base_query.subquery())
    total = (await db.execute(count_query)).scalar() or 0

    query = (
        base_query.order_by(Review.created_at.desc(), Review.id)
        .limit(limit)
        .offset((page - 1) * limit)
    )
    result = await db.execute(query)
    reviews = list(result.scalars().all())

    return reviews, total, ceil(total / limit) if total else 0
