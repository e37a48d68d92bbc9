"""Explicit success/failure values returned by workflows.

Usage:
    match await auth_service.login_user(db, raw, hasher=hasher, issuer=issuer):
        case Ok(session):
            ...
        case Err(error):
            raise_for_error(error)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

from cinelog.errors import AppError

T = TypeVar("T")
E = TypeVar("E", bound=AppError)


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E


Result: TypeAlias = Ok[T] | Err[E]
