"""Authentication helpers for request-scoped user context."""

from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.ext.asyncio import AsyncSession

from cinelog.config import settings
from cinelog.database import get_db
from cinelog.logger import get_logger
from cinelog.result import Err, Ok
from cinelog.security import TokenIssuer, get_token_issuer
from cinelog.services import auth_service
from cinelog.utils.exceptions import raise_for_error

logger = get_logger(__name__)

# Bearer header is optional; the auth cookie is checked first
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/auth/login", auto_error=False)


def extract_token(request: Request, bearer: str | None) -> str | None:
    """Pick the presented token: auth cookie first, then Authorization header."""
    return request.cookies.get(settings.auth_cookie_name) or bearer


async def get_current_user_id(
    request: Request,
    bearer: str | None = Depends(oauth2_scheme),
    db: AsyncSession = Depends(get_db),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> UUID:
    """Resolve the current user ID from the session token."""
    match await auth_service.authenticate(db, extract_token(request, bearer), issuer=issuer):
        case Ok(user_id):
            return user_id
        case Err(error):
            logger.info("Request not authenticated", reason=getattr(error, "reason", error.kind))
            raise_for_error(error)
