"""Domain error kinds.

Primitives (hasher, token issuer, validator) raise these. Workflows catch
them and hand them back inside ``Err`` so the transport layer can map each
kind to a status code and a redacted message.
"""


class AppError(Exception):
    """Base class for every classified failure."""

    kind: str = "app_error"


class ValidationError(AppError):
    """Input violated one or more schema rules. Carries every violation."""

    kind = "validation"

    def __init__(self, issues: list[str]) -> None:
        self.issues = list(issues)
        super().__init__(self.message)

    @property
    def message(self) -> str:
        return "; ".join(self.issues)


class InvalidInputShapeError(AppError):
    """Payload is not a JSON object at all."""

    kind = "invalid_input_shape"

    def __init__(self, received_type: str) -> None:
        self.received_type = received_type
        super().__init__(f"Expected a JSON object, got {received_type}")


class DuplicateUserError(AppError):
    """Username or email is already registered."""

    kind = "duplicate_user"

    def __init__(self, field: str | None = None) -> None:
        self.field = field
        if field == "username":
            message = "Username already taken"
        elif field == "email":
            message = "Email already registered"
        else:
            message = "Username or email already registered"
        super().__init__(message)


class UserNotFoundError(AppError):
    kind = "user_not_found"


class InvalidCredentialsError(AppError):
    kind = "invalid_credentials"


class HashFormatError(AppError):
    """Stored password digest could not be parsed."""

    kind = "hash_format"


class TokenExpiredError(AppError):
    kind = "token_expired"


class TokenInvalidError(AppError):
    kind = "token_invalid"


class UnauthenticatedError(AppError):
    """No usable token was presented to a protected operation.

    ``reason`` is for logs only: missing, expired, invalid or unknown_user.
    """

    kind = "unauthenticated"

    def __init__(self, reason: str) -> None:
        self.reason = reason
        super().__init__(f"Unauthenticated ({reason})")


class PersistenceFailure(AppError):
    """The store is unreachable or rejected the operation for an unknown reason."""

    kind = "persistence"


class ProfileNotFoundError(AppError):
    """Public profile lookup for an id that does not exist."""

    kind = "profile_not_found"
