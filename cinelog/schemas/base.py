"""Base schema classes and shared field helpers."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, field_validator


class BaseResponse(BaseModel):
    """Base for all response schemas with from_attributes config."""

    model_config = ConfigDict(from_attributes=True)

    @field_validator("created_at", "updated_at", mode="before", check_fields=False)
    @classmethod
    def ensure_timezone_aware(cls, v: datetime) -> datetime:
        """Ensure datetime fields are timezone-aware."""
        if isinstance(v, datetime) and v.tzinfo is None:
            return v.replace(tzinfo=UTC)
        return v
