"""Tests for tokens, password hashing and settings validation."""

from datetime import timedelta

import pytest
from pydantic import ValidationError

from app.core.config import SUPPORTED_BACKENDS, Settings
from app.core.security import (
    create_access_token,
    decode_token,
    hash_password,
    verify_password,
    verify_token_type,
)
from app.repositories.base import CONFLICT_INSERTS


def test_access_token_carries_subject_and_type():
    token = create_access_token({"sub": "7", "role": "instructor"})

    payload = decode_token(token)

    assert payload["sub"] == "7"
    assert payload["role"] == "instructor"
    assert verify_token_type(payload, "access")
    assert not verify_token_type(payload, "refresh")


def test_expired_token_is_rejected():
    token = create_access_token({"sub": "7"}, expires_delta=timedelta(seconds=-1))

    assert decode_token(token) is None


def test_tampered_token_is_rejected():
    token = create_access_token({"sub": "7"})

    assert decode_token(token[:-2] + "xx") is None


def test_password_hash_round_trip():
    hashed = hash_password("password123")

    assert hashed != "password123"
    assert verify_password("password123", hashed)
    assert not verify_password("password124", hashed)


@pytest.mark.parametrize("environment", ["production", "staging"])
def test_dev_secret_refused_outside_development(environment):
    with pytest.raises(ValidationError):
        Settings(environment=environment, secret_key="userskillhub-secret-change-in-production")


def test_real_secret_accepted_in_production():
    settings = Settings(environment="production", secret_key="a-real-secret")

    assert settings.environment == "production"


def test_sqlite_detection():
    assert Settings(database_url="sqlite+aiosqlite:///./x.db").is_sqlite
    assert not Settings(database_url="postgresql+asyncpg://u:p@db/skillhub").is_sqlite


@pytest.mark.parametrize(
    "url",
    ["mysql+aiomysql://u:p@db/skillhub", "mssql+aioodbc://u:p@db/skillhub", "not a database url"],
)
def test_unsupported_database_refused_at_startup(url):
    with pytest.raises(ValidationError):
        Settings(database_url=url)


def test_every_supported_backend_has_an_insert_ignore():
    assert set(CONFLICT_INSERTS) == set(SUPPORTED_BACKENDS)
