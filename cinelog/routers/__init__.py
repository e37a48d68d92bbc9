"""API routers package.

``ROUTERS`` is the static registration table read by the application at
startup; add a feature by adding its router here.
"""

from cinelog.routers import auth, blogs, movies, users

ROUTERS = (
    auth.router,
    blogs.router,
    movies.router,
    users.router,
)

__all__ = [
    "ROUTERS",
    "auth",
    "blogs",
    "movies",
    "users",
]
