"""Authentication API router."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from cinelog import responses
from cinelog.deps import CurrentUserId, DbSession, Hasher, Issuer, RawBody
from cinelog.logger import get_logger
from cinelog.result import Err, Ok
from cinelog.schemas import AuthSuccess, OwnProfile
from cinelog.services import auth_service, user_service
from cinelog.utils.exceptions import raise_for_error

router = APIRouter(prefix="/auth", tags=["auth"])
logger = get_logger(__name__)


@router.post("/register", response_model=AuthSuccess)
async def register(raw: RawBody, db: DbSession, hasher: Hasher, issuer: Issuer) -> JSONResponse:
    """Register with username, email and password; sets the auth cookie."""
    match await auth_service.register_user(db, raw, hasher=hasher, issuer=issuer):
        case Ok(session):
            return responses.jwt(session.token)
        case Err(error):
            raise_for_error(error)


@router.post("/login", response_model=AuthSuccess)
async def login(raw: RawBody, db: DbSession, hasher: Hasher, issuer: Issuer) -> JSONResponse:
    """Login with email and password; sets the auth cookie."""
    match await auth_service.login_user(db, raw, hasher=hasher, issuer=issuer):
        case Ok(session):
            return responses.jwt(session.token)
        case Err(error):
            raise_for_error(error)


@router.get("/me", response_model=OwnProfile)
async def get_me(user_id: CurrentUserId, db: DbSession) -> OwnProfile:
    """Get current authenticated user."""
    match await user_service.get_user(db, user_id):
        case Ok(user):
            return OwnProfile.model_validate(user)
        case Err(error):
            raise_for_error(error)
