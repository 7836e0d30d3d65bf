"""
Tests for password hashing and token helpers.
"""
from datetime import timedelta

from backpacker.core.config import Settings
from backpacker.core.security import (
    create_access_token, decode_access_token, hash_secret, verify_secret,
)

settings = Settings(SECRET_KEY="unit-test-secret", DATABASE_URL="sqlite://")


def test_hash_is_salted_and_verifiable():
    first = hash_secret("secret123", rounds=4)
    second = hash_secret("secret123", rounds=4)

    assert first != second
    assert "secret123" not in first
    assert verify_secret("secret123", first)
    assert verify_secret("secret123", second)
    assert not verify_secret("secret124", first)


def test_long_secrets_are_not_truncated():
    base = "a" * 80
    hashed = hash_secret(base, rounds=4)
    assert not verify_secret(base[:72], hashed)


def test_verify_against_non_bcrypt_value():
    assert not verify_secret("secret123", "plain-text")


def test_token_round_trip():
    token = create_access_token({"sub": "user-1"}, settings)
    assert decode_access_token(token, settings)["sub"] == "user-1"


def test_expired_or_foreign_token_rejected():
    expired = create_access_token({"sub": "user-1"}, settings, expires_delta=timedelta(seconds=-1))
    assert decode_access_token(expired, settings) is None

    other = Settings(SECRET_KEY="another-secret", DATABASE_URL="sqlite://")
    foreign = create_access_token({"sub": "user-1"}, other)
    assert decode_access_token(foreign, settings) is None
