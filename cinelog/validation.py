"""Named-schema validation of untrusted request payloads.

Every violation is reported at once: callers get one ValidationError whose
issues list each bad field as ``<field path>: <message>``.
"""

from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from cinelog.errors import InvalidInputShapeError, ValidationError
from cinelog.schemas import LoginRequest, ProfileUpdate, RegisterRequest, ReviewCreate

SCHEMAS: dict[str, type[BaseModel]] = {
    "register": RegisterRequest,
    "login": LoginRequest,
    "review": ReviewCreate,
    "profile": ProfileUpdate,
}


def _field_path(loc: tuple[int | str, ...]) -> str:
    return ".".join(str(part) for part in loc) or "body"


def format_issues(exc: PydanticValidationError) -> list[str]:
    """Flatten pydantic errors into ``<field path>: <message>`` strings."""
    return [f"{_field_path(error['loc'])}: {error['msg']}" for error in exc.errors()]


def validate(schema_name: str, raw: Any) -> BaseModel:
    """Validate ``raw`` against the schema registered as ``schema_name``.

    Raises:
        KeyError: ``schema_name`` is not registered.
        InvalidInputShapeError: ``raw`` is not a JSON object.
        ValidationError: one or more fields are invalid (all are reported).
    """
    schema = SCHEMAS[schema_name]

    if not isinstance(raw, dict):
        raise InvalidInputShapeError(type(raw).__name__ if raw is not None else "null")

    try:
        return schema.model_validate(raw)
    except PydanticValidationError as exc:
        raise ValidationError(format_issues(exc)) from exc
