"""Review ("blog") API router."""

from uuid import UUID

from fastapi import APIRouter, Query, status

from cinelog.deps import CurrentUserId, DbSession, RawBody
from cinelog.result import Err, Ok
from cinelog.schemas import ReviewPage, ReviewResponse
from cinelog.services import review_service
from cinelog.utils.exceptions import raise_for_error

router = APIRouter(prefix="/blogs", tags=["blogs"])


@router.post("", response_model=ReviewResponse, status_code=status.HTTP_201_CREATED)
async def create_blog(raw: RawBody, user_id: CurrentUserId, db: DbSession) -> ReviewResponse:
    """Create a review authored by the logged-in user."""
    match await review_service.create_review(db, user_id, raw):
        case Ok(review):
            return ReviewResponse.from_model(review)
        case Err(error):
            raise_for_error(error)


@router.get("/user/{author_id}", response_model=ReviewPage)
async def list_user_blogs(
    author_id: UUID,
    db: DbSession,
    page: int = Query(1, ge=1, description="1-based page number"),
    limit: int = Query(6, ge=1, le=50, description="Reviews per page"),
) -> ReviewPage:
    """List a user's reviews, newest first."""
    reviews, total, total_pages = await review_service.list_reviews_by_author(
        db, author_id, page=page, limit=limit
    )
    return ReviewPage(
        blogs=[ReviewResponse.from_model(review) for review in reviews],
        page=page,
        limit=limit,
        total=total,
        total_pages=total_pages,
    )
