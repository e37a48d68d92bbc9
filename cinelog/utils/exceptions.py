"""Common exception utilities for FastAPI routers."""

from typing import NoReturn

from fastapi import HTTPException, status

from cinelog.errors import (
    AppError,
    DuplicateUserError,
    InvalidCredentialsError,
    InvalidInputShapeError,
    ProfileNotFoundError,
    TokenExpiredError,
    TokenInvalidError,
    UnauthenticatedError,
    UserNotFoundError,
    ValidationError,
)

# Unknown email and wrong password must be indistinguishable to the client
INVALID_LOGIN_MESSAGE = "Incorrect email or password"
UNAUTHENTICATED_MESSAGE = "Not authenticated"
GENERIC_FAILURE_MESSAGE = "Something went wrong"


def raise_not_found(resource_name: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"{resource_name} not found",
    ) from cause


def raise_bad_request(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_400_BAD_REQUEST,
        detail=detail,
    ) from cause


def raise_unauthorized(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    ) from cause


def raise_conflict(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail=detail,
    ) from cause


def raise_internal_error(detail: str, *, cause: Exception | None = None) -> NoReturn:
    raise HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=detail,
    ) from cause


def raise_for_error(error: AppError) -> NoReturn:
    """Translate a workflow failure into its redacted HTTP response."""
    match error:
        case ValidationError() | InvalidInputShapeError():
            raise_bad_request(str(error), cause=error)
        case DuplicateUserError():
            raise_conflict(str(error), cause=error)
        case UserNotFoundError() | InvalidCredentialsError():
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=INVALID_LOGIN_MESSAGE,
            ) from error
        case UnauthenticatedError() | TokenExpiredError() | TokenInvalidError():
            raise_unauthorized(UNAUTHENTICATED_MESSAGE, cause=error)
        case ProfileNotFoundError():
            raise_not_found("User", cause=error)
        case _:
            raise_internal_error(GENERIC_FAILURE_MESSAGE, cause=error)
