"""SQLAlchemy models package."""

from cinelog.models.movie import Movie
from cinelog.models.review import Review
from cinelog.models.user import User

__all__ = [
    "Movie",
    "Review",
    "User",
]
