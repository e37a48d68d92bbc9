"""User model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from cinelog.database import Base
from cinelog.models.base import TimestampMixin, UUIDMixin


class User(Base, UUIDMixin, TimestampMixin):
    """Registered account.

    ``username`` and ``email`` are unique at the database level; concurrent
    registrations are arbitrated by those constraints. ``password_hash`` only
    ever holds a bcrypt digest.
    """

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(String(20), unique=True, nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    profile_picture: Mapped[str | None] = mapped_column(String(512), nullable=True)
    bio: Mapped[str] = mapped_column(Text, nullable=False, default="")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, username='{self.username}')>"
