"""Registration, login and token authentication workflows.

Each workflow returns ``Ok`` or ``Err``; none of them raises a domain error
to its caller. Step order is strict: hash before persist, persist before
issuing a token, verify the password before issuing a token.
"""

import asyncio
from dataclasses import dataclass
from typing import Any
from uuid import UUID

from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from cinelog.errors import (
    AppError,
    DuplicateUserError,
    HashFormatError,
    InvalidCredentialsError,
    InvalidInputShapeError,
    PersistenceFailure,
    TokenExpiredError,
    TokenInvalidError,
    UnauthenticatedError,
    UserNotFoundError,
    ValidationError,
)
from cinelog.logger import async_log_timing, get_logger, log_exception
from cinelog.models import User
from cinelog.result import Err, Ok, Result
from cinelog.schemas import LoginRequest, RegisterRequest
from cinelog.security import PasswordHasher, TokenIssuer
from cinelog.validation import validate

logger = get_logger(__name__)


@dataclass(frozen=True)
class AuthSession:
    """Outcome of a successful register or login."""

    user_id: UUID
    token: str


async def _find_conflicting_field(db: AsyncSession, username: str, email: str) -> str | None:
    result = await db.execute(
        select(User.username, User.email).where(or_(User.username == username, User.email == email))
    )
    for existing_username, existing_email in result.all():
        if existing_username == username:
            return "username"
        if existing_email == email:
            return "email"
    return None


async def register_user(
    db: AsyncSession,
    raw: Any,
    *,
    hasher: PasswordHasher,
    issuer: TokenIssuer,
) -> Result[AuthSession, AppError]:
    """Create an account and issue its first token."""
    try:
        data: RegisterRequest = validate("register", raw)
    except (ValidationError, InvalidInputShapeError) as exc:
        logger.info("Registration rejected", reason=exc.kind)
        return Err(exc)

    try:
        conflict = await _find_conflicting_field(db, data.username, data.email)
    except SQLAlchemyError as exc:
        log_exception(logger, exc, "Duplicate check failed during registration")
        return Err(PersistenceFailure("Could not read users"))
    if conflict:
        logger.info("Registration rejected", reason="duplicate_user", field=conflict)
        return Err(DuplicateUserError(conflict))

    async with async_log_timing("password_hash", logger=logger, level="debug"):
        password_hash = await asyncio.to_thread(hasher.hash, data.password)

    user = User(username=data.username, email=data.email, password_hash=password_hash)
    db.add(user)
    try:
        await db.commit()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same username/email
        await db.rollback()
        logger.info("Registration rejected", reason="duplicate_user", field=None)
        return Err(DuplicateUserError())
    except SQLAlchemyError as exc:
        await db.rollback()
        log_exception(logger, exc, "Failed to persist new user")
        return Err(PersistenceFailure("Could not create user"))

    token = issuer.issue(user.id)
    logger.info("User registered", user_id=str(user.id))
    return Ok(AuthSession(user_id=user.id, token=token))


async def login_user(
    db: AsyncSession,
    raw: Any,
    *,
    hasher: PasswordHasher,
    issuer: TokenIssuer,
) -> Result[AuthSession, AppError]:
    """Check credentials and issue a token.

    Unknown email and wrong password are different error kinds here; the
    transport layer renders both with the same message.
    """
    try:
        data: LoginRequest = validate("login", raw)
    except (ValidationError, InvalidInputShapeError) as exc:
        return Err(exc)

    try:
        result = await db.execute(select(User).where(User.email == data.email))
        user = result.scalar_one_or_none()
    except SQLAlchemyError as exc:
        log_exception(logger, exc, "User lookup failed during login")
        return Err(PersistenceFailure("Could not read users"))

    if user is None:
        logger.warning("Failed login attempt", reason="user_not_found")
        return Err(UserNotFoundError("No user with that email"))

    try:
        async with async_log_timing("password_verify", logger=logger, level="debug"):
            matches = await asyncio.to_thread(hasher.verify, data.password, user.password_hash)
    except HashFormatError as exc:
        log_exception(logger, exc, "Stored password digest is unreadable", user_id=str(user.id))
        return Err(PersistenceFailure("Stored credential is unreadable"))

    if not matches:
        logger.warning("Failed login attempt", reason="invalid_credentials", user_id=str(user.id))
        return Err(InvalidCredentialsError("Password does not match"))

    token = issuer.issue(user.id)
    logger.info("Successful login", user_id=str(user.id))
    return Ok(AuthSession(user_id=user.id, token=token))


async def authenticate(
    db: AsyncSession,
    token: str | None,
    *,
    issuer: TokenIssuer,
) -> Result[UUID, UnauthenticatedError | PersistenceFailure]:
    """Resolve a presented token to the id of an existing user."""
    if not token:
        return Err(UnauthenticatedError("missing"))

    try:
        subject = issuer.verify(token)
    except TokenExpiredError:
        return Err(UnauthenticatedError("expired"))
    except TokenInvalidError:
        return Err(UnauthenticatedError("invalid"))

    try:
        user_id = UUID(subject)
    except ValueError:
        logger.warning("Token subject is not a user id")
        return Err(UnauthenticatedError("invalid"))

    try:
        result = await db.execute(select(User.id).where(User.id == user_id))
    except SQLAlchemyError as exc:
        log_exception(logger, exc, "User lookup failed during authentication")
        return Err(PersistenceFailure("Could not read users"))
    if result.scalar_one_or_none() is None:
        return Err(UnauthenticatedError("unknown_user"))

    return Ok(user_id)
