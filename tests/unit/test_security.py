"""Unit tests for password hashing and token issuing."""

from datetime import UTC, datetime, timedelta
from uuid import uuid4

import jwt
import pytest

from cinelog.errors import HashFormatError, TokenExpiredError, TokenInvalidError
from cinelog.security import PasswordHasher, TokenIssuer

SECRET = "unit-test-secret-key-with-enough-bytes-for-hs256"


class FrozenClock:
    """Clock that only moves when told to."""

    def __init__(self, now: datetime) -> None:
        self.now = now

    def __call__(self) -> datetime:
        return self.now

    def advance(self, delta: timedelta) -> None:
        self.now += delta


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2026, 1, 1, 12, 0, tzinfo=UTC))


@pytest.fixture
def issuer(clock: FrozenClock) -> TokenIssuer:
    return TokenIssuer(SECRET, clock=clock)


class TestPasswordHasher:
    def test_hash_then_verify(self, hasher):
        digest = hasher.hash("secret123")

        assert digest != "secret123"
        assert hasher.verify("secret123", digest) is True
        assert hasher.verify("secret124", digest) is False

    def test_same_password_hashes_differently(self, hasher):
        """Each hash gets a fresh salt."""
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_digest_carries_configured_rounds(self, hasher):
        assert hasher.hash("secret123").startswith("$2b$04$")

    def test_malformed_digest_raises_hash_format_error(self, hasher):
        with pytest.raises(HashFormatError):
            hasher.verify("secret123", "not-a-bcrypt-digest")

    def test_long_passwords_are_truncated_consistently(self, hasher):
        long_password = "a" * 100
        digest = hasher.hash(long_password)

        assert hasher.verify(long_password, digest) is True

    def test_from_settings_reads_rounds(self):
        from cinelog.config import settings

        assert PasswordHasher.from_settings(settings).rounds == settings.bcrypt_rounds


class TestTokenIssuer:
    def test_issue_then_verify_returns_subject(self, issuer):
        user_id = uuid4()

        token = issuer.issue(user_id)

        assert issuer.verify(token) == str(user_id)

    def test_payload_has_only_subject_and_times(self, issuer, clock):
        token = issuer.issue("abc")

        payload = jwt.decode(token, SECRET, algorithms=["HS256"], options={"verify_exp": False})

        assert set(payload) == {"sub", "iat", "exp"}
        assert payload["exp"] - payload["iat"] == 15 * 60
        assert payload["iat"] == int(clock.now.timestamp())

    def test_token_valid_one_second_before_expiry(self, issuer, clock):
        token = issuer.issue("abc")

        clock.advance(timedelta(minutes=14, seconds=59))

        assert issuer.verify(token) == "abc"

    def test_token_expired_exactly_at_expiry(self, issuer, clock):
        token = issuer.issue("abc")

        clock.advance(timedelta(minutes=15))

        with pytest.raises(TokenExpiredError):
            issuer.verify(token)

    def test_wrong_secret_is_invalid(self, issuer, clock):
        other = TokenIssuer("a-completely-different-secret-of-decent-length", clock=clock)

        with pytest.raises(TokenInvalidError):
            issuer.verify(other.issue("abc"))

    def test_tampered_token_is_invalid(self, issuer):
        header, payload, signature = issuer.issue("abc").split(".")
        tampered = ".".join([header, payload, signature[:-2] + ("AA" if signature[-2:] != "AA" else "BB")])

        with pytest.raises(TokenInvalidError):
            issuer.verify(tampered)

    @pytest.mark.parametrize("token", ["", "garbage", "a.b.c"])
    def test_malformed_token_is_invalid(self, issuer, token):
        with pytest.raises(TokenInvalidError):
            issuer.verify(token)

    def test_token_without_subject_is_invalid(self, issuer, clock):
        token = jwt.encode(
            {"exp": int((clock.now + timedelta(minutes=5)).timestamp())},
            SECRET,
            algorithm="HS256",
        )

        with pytest.raises(TokenInvalidError):
            issuer.verify(token)

    def test_repr_hides_secret(self, issuer):
        assert SECRET not in repr(issuer)

    def test_expiry_is_exactly_the_lifetime_after_issue(self):
        """Fractional clock readings do not shorten or stretch the lifetime."""
        clock = FrozenClock(datetime(2026, 1, 1, 12, 0, 0, 600_000, tzinfo=UTC))
        issuer = TokenIssuer(SECRET, lifetime=timedelta(seconds=90.5), clock=clock)

        payload = jwt.decode(
            issuer.issue("abc"), SECRET, algorithms=["HS256"], options={"verify_exp": False}
        )

        assert payload["exp"] - payload["iat"] == 90

    def test_custom_lifetime(self, clock):
        issuer = TokenIssuer(SECRET, lifetime=timedelta(minutes=1), clock=clock)
        token = issuer.issue("abc")

        clock.advance(timedelta(seconds=60))

        with pytest.raises(TokenExpiredError):
            issuer.verify(token)
