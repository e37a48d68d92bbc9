"""Common FastAPI dependencies for consistent type annotations.

Usage:
    from cinelog.deps import CurrentUserId, DbSession, RawBody

    async def my_endpoint(db: DbSession, user_id: CurrentUserId, raw: RawBody):
        ...
"""

import json
from typing import Annotated, Any
from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinelog.auth import get_current_user_id
from cinelog.database import get_db
from cinelog.security import PasswordHasher, TokenIssuer, get_password_hasher, get_token_issuer


async def read_json_body(request: Request) -> Any:
    """Raw JSON body, or None when it is missing or unparseable.

    Shape and schema checks are left to ``cinelog.validation.validate``.
    """
    body = await request.body()
    if not body:
        return None
    try:
        return json.loads(body)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return None


DbSession = Annotated[AsyncSession, Depends(get_db)]
CurrentUserId = Annotated[UUID, Depends(get_current_user_id)]
Hasher = Annotated[PasswordHasher, Depends(get_password_hasher)]
Issuer = Annotated[TokenIssuer, Depends(get_token_issuer)]
RawBody = Annotated[Any, Depends(read_json_body)]

__all__ = ["CurrentUserId", "DbSession", "Hasher", "Issuer", "RawBody", "read_json_body"]
