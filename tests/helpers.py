"""Shared helpers for API tests."""

from httpx import AsyncClient, Response


def token_from_response(response: Response) -> str:
    """Pull the auth token out of the response's Set-Cookie header."""
    header = response.headers["set-cookie"]
    name, _, rest = header.partition("=")
    assert name == "token"
    return rest.split(";", 1)[0]


def bearer(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


async def register(
    client: AsyncClient,
    username: str,
    email: str | None = None,
    password: str = "secret123",
) -> str:
    """Register through the API and return the issued token."""
    response = await client.post(
        "/auth/register",
        json={
            "username": username,
            "email": email or f"{username}@example.com",
            "password": password,
        },
    )
    assert response.status_code == 200, response.text
    return token_from_response(response)


async def current_user_id(client: AsyncClient, token: str) -> str:
    response = await client.get("/auth/me", headers=bearer(token))
    assert response.status_code == 200, response.text
    return response.json()["id"]


def review_payload(**overrides) -> dict:
    payload = {
        "film": {"title": "The Matrix", "tmdb_id": 603, "poster_path": "/matrix.jpg"},
        "rating": 4.5,
        "title": "Still holds up",
        "body": "Bullet time never gets old.",
    }
    payload.update(overrides)
    return payload
