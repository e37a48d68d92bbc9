"""Response helpers for routers that return the ``{success, data}`` envelope."""

from collections.abc import Callable, Sequence
from typing import Any

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from cinelog.config import settings
from cinelog.utils.pipe import Pipe


def _envelope(data: Any, status_code: int, success: bool) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder({"success": success, "data": data, "status_code": status_code}),
    )


def json(
    data: Any,
    *,
    status_code: int = status.HTTP_200_OK,
    success: bool = True,
    pipe_callbacks: Sequence[Callable[[Any], Any]] = (),
) -> JSONResponse:
    """Send ``data`` in the standard envelope.

    ``pipe_callbacks`` run in order over ``data`` before it is serialized,
    e.g. to strip fields that must not leave the server.
    """
    if pipe_callbacks:
        return Pipe(
            data,
            run_last=pipe_callbacks,
            callback=lambda piped: _envelope(piped, status_code, success),
        ).run()
    return _envelope(data, status_code, success)


def ok(data: Any, **kwargs: Any) -> JSONResponse:
    return json(data, status_code=status.HTTP_200_OK, **kwargs)


def jwt(token: str) -> JSONResponse:
    """Hand a freshly issued token to the client in an HTTP-only cookie.

    Only for endpoints that authenticate (login, register). The cookie's
    max age is a client-side hint; the token's own expiry decides validity.
    """
    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"success": True, "status_code": status.HTTP_200_OK},
    )
    response.set_cookie(
        key=settings.auth_cookie_name,
        value=token,
        max_age=settings.auth_cookie_max_age_seconds,
        httponly=True,
        secure=settings.auth_cookie_secure,
        samesite="strict",
    )
    return response
