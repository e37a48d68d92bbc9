"""Pydantic schemas for authentication."""

from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr, Field


def _alphanumeric(value: str) -> str:
    if not value.isascii() or not value.isalnum():
        raise ValueError("Only letters and numbers allowed")
    return value


def _lower(value: str) -> str:
    return value.lower()


def _no_whitespace(value: str) -> str:
    if any(char.isspace() for char in value):
        raise ValueError("Must not contain whitespace")
    return value


Username = Annotated[str, Field(min_length=4, max_length=20), AfterValidator(_alphanumeric)]
# Emails compare case-insensitively; store and look up the lower-cased form
Email = Annotated[EmailStr, AfterValidator(_lower)]
Password = Annotated[str, Field(min_length=4, max_length=30), AfterValidator(_no_whitespace)]


class RegisterRequest(BaseModel):
    """Schema for user registration."""

    username: Username
    email: Email
    password: Password


class LoginRequest(BaseModel):
    """Schema for user login."""

    email: Email
    password: Password


class AuthSuccess(BaseModel):
    """Body returned alongside the auth cookie."""

    success: bool = True
    status_code: int = 200
