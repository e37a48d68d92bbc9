"""User directory and profile workflows."""

from typing import Any
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cinelog.errors import (
    AppError,
    InvalidInputShapeError,
    PersistenceFailure,
    ProfileNotFoundError,
    ValidationError,
)
from cinelog.logger import get_logger, log_exception
from cinelog.models import User
from cinelog.result import Err, Ok, Result
from cinelog.schemas import ProfileUpdate
from cinelog.validation import validate

logger = get_logger(__name__)


async def list_users(db: AsyncSession) -> list[User]:
    result = await db.execute(select(User).order_by(User.created_at.desc(), User.username))
    return list(result.scalars().all())


async def get_user(db: AsyncSession, user_id: UUID) -> Result[User, AppError]:
    result = await db.execute(select(User).where(User.id == user_id))
    user = result.scalar_one_or_none()
    if user is None:
        return Err(ProfileNotFoundError(f"User {user_id} not found"))
    return Ok(user)


async def update_profile(db: AsyncSession, user_id: UUID, raw: Any) -> Result[User, AppError]:
    """Apply bio / profile picture changes for the authenticated user."""
    try:
        data: ProfileUpdate = validate("profile", raw)
    except (ValidationError, InvalidInputShapeError) as exc:
        return Err(exc)

    found = await get_user(db, user_id)
    if isinstance(found, Err):
        return found
    user = found.value

    changes = data.model_dump(exclude_unset=True)
    if "bio" in changes and changes["bio"] is None:
        changes["bio"] = ""
    for field, value in changes.items():
        setattr(user, field, value)

    try:
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        log_exception(logger, exc, "Failed to update profile", user_id=str(user_id))
        return Err(PersistenceFailure("Could not update profile"))

    await db.refresh(user)
    logger.info("Profile updated", user_id=str(user_id))
    return Ok(user)
