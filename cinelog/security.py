"""Security utilities for JWT and password hashing."""

from collections.abc import Callable
from datetime import UTC, datetime, timedelta
from functools import lru_cache
from typing import Any
from uuid import UUID

import bcrypt
import jwt

from cinelog.config import Settings, settings
from cinelog.errors import HashFormatError, TokenExpiredError, TokenInvalidError
from cinelog.logger import get_logger

logger = get_logger(__name__)

# bcrypt only consumes the first 72 bytes of its input
BCRYPT_MAX_BYTES = 72


def _utcnow() -> datetime:
    return datetime.now(UTC)


class PasswordHasher:
    """Salted one-way hashing of plaintext passwords with bcrypt."""

    def __init__(self, rounds: int = 10) -> None:
        self.rounds = rounds

    @classmethod
    def from_settings(cls, config: Settings) -> "PasswordHasher":
        return cls(rounds=config.bcrypt_rounds)

    @staticmethod
    def _encode(plaintext: str) -> bytes:
        return plaintext.encode("utf-8")[:BCRYPT_MAX_BYTES]

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh random salt."""
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(self._encode(plaintext), salt).decode("utf-8")

    def verify(self, plaintext: str, digest: str) -> bool:
        """Verify a password against its digest.

        Returns False on mismatch. Raises HashFormatError when ``digest`` is
        not a bcrypt digest.
        """
        try:
            return bcrypt.checkpw(self._encode(plaintext), digest.encode("utf-8"))
        except (ValueError, TypeError) as exc:
            raise HashFormatError("Stored password digest is malformed") from exc


class TokenIssuer:
    """Issues and verifies short-lived HS256 session tokens.

    The payload carries only the subject id. Nothing that could go stale
    (roles, names) is ever embedded.
    """

    def __init__(
        self,
        secret: str,
        *,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(minutes=15),
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime
        self._clock = clock

    @classmethod
    def from_settings(cls, config: Settings) -> "TokenIssuer":
        return cls(
            config.secret_key.get_secret_value(),
            algorithm=config.jwt_algorithm,
            lifetime=timedelta(minutes=config.access_token_expire_minutes),
        )

    def __repr__(self) -> str:
        return f"TokenIssuer(algorithm={self.algorithm!r}, lifetime={self.lifetime!r})"

    def issue(self, subject_id: UUID | str) -> str:
        """Create a new signed token for ``subject_id``."""
        issued_at = int(self._clock().timestamp())
        payload: dict[str, Any] = {
            "sub": str(subject_id),
            "iat": issued_at,
            "exp": issued_at + int(self.lifetime.total_seconds()),
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> str:
        """Return the subject of a valid token.

        Raises:
            TokenExpiredError: the clock is at or past the token's expiry.
            TokenInvalidError: bad signature, malformed token or missing subject.
        """
        try:
            # Expiry is checked against the injected clock below
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"], "verify_exp": False, "verify_iat": False},
            )
        except jwt.PyJWTError as exc:
            logger.warning(
                "JWT decode failed",
                error=str(exc),
                error_type=type(exc).__name__,
            )
            raise TokenInvalidError("Token could not be decoded") from exc

        subject = payload.get("sub")
        expires_at = payload.get("exp")
        if not isinstance(subject, str) or not subject or not isinstance(expires_at, int | float):
            raise TokenInvalidError("Token payload is malformed")

        if self._clock().timestamp() >= expires_at:
            logger.debug("JWT token expired")
            raise TokenExpiredError("Token has expired")

        return subject


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Process-wide hasher built from settings."""
    return PasswordHasher.from_settings(settings)


@lru_cache
def get_token_issuer() -> TokenIssuer:
    """Process-wide token issuer built from settings."""
    return TokenIssuer.from_settings(settings)
