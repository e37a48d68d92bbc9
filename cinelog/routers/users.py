"""User directory and profile API router."""

from typing import Any
from uuid import UUID

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from cinelog import responses
from cinelog.deps import CurrentUserId, DbSession, RawBody
from cinelog.models import User
from cinelog.result import Err, Ok
from cinelog.schemas import PUBLIC_PROFILE_FIELDS, OwnProfile
from cinelog.services import user_service
from cinelog.utils.exceptions import raise_for_error
from cinelog.utils.fields import filter_fields, project

router = APIRouter(prefix="/users", tags=["users"])


def _as_dict(user: User) -> dict[str, Any]:
    return OwnProfile.model_validate(user).model_dump()


@router.get("")
async def list_users(db: DbSession) -> JSONResponse:
    """Community page: every user's public profile."""
    users = await user_service.list_users(db)
    return responses.ok(
        [_as_dict(user) for user in users],
        pipe_callbacks=[project(PUBLIC_PROFILE_FIELDS)],
    )


@router.patch("/me")
async def update_me(raw: RawBody, user_id: CurrentUserId, db: DbSession) -> JSONResponse:
    """Edit the logged-in user's bio and profile picture."""
    match await user_service.update_profile(db, user_id, raw):
        case Ok(user):
            return responses.ok(OwnProfile.model_validate(user).model_dump())
        case Err(error):
            raise_for_error(error)


@router.get("/{user_id}")
async def get_user(user_id: UUID, db: DbSession) -> JSONResponse:
    """Public profile for one user."""
    match await user_service.get_user(db, user_id):
        case Ok(user):
            return responses.ok(
                _as_dict(user),
                pipe_callbacks=[lambda profile: filter_fields(PUBLIC_PROFILE_FIELDS, profile)],
            )
        case Err(error):
            raise_for_error(error)
