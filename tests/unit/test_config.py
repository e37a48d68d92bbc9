"""Unit tests for settings loading."""

import pytest
from pydantic import ValidationError

from cinelog.config import Settings, parse_comma_list


def test_secret_key_is_required(monkeypatch):
    monkeypatch.delenv("SECRET_KEY", raising=False)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_defaults(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "x" * 40)
    monkeypatch.delenv("BCRYPT_ROUNDS", raising=False)

    config = Settings(_env_file=None)

    assert config.jwt_algorithm == "HS256"
    assert config.access_token_expire_minutes == 15
    assert config.bcrypt_rounds == 10
    assert config.auth_cookie_name == "token"
    assert config.auth_cookie_max_age_seconds == 3600
    assert config.auth_cookie_secure is True


def test_secret_is_not_exposed_in_repr(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "super-secret-value-1234567890")

    config = Settings(_env_file=None)

    assert "super-secret-value" not in repr(config)
    assert config.secret_key.get_secret_value() == "super-secret-value-1234567890"


@pytest.mark.parametrize("rounds", ["3", "32"])
def test_bcrypt_rounds_bounds(monkeypatch, rounds):
    monkeypatch.setenv("SECRET_KEY", "x" * 40)
    monkeypatch.setenv("BCRYPT_ROUNDS", rounds)

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_cors_origins_from_env(monkeypatch):
    monkeypatch.setenv("SECRET_KEY", "x" * 40)
    monkeypatch.setenv("CORS_ORIGINS", "https://a.example, https://b.example,")

    assert Settings(_env_file=None).cors_origins == ["https://a.example", "https://b.example"]


def test_parse_comma_list():
    assert parse_comma_list(None, ["d"]) == ["d"]
    assert parse_comma_list(["a"], ["d"]) == ["a"]
    assert parse_comma_list("a, b", ["d"]) == ["a", "b"]
