"""Settings — env coercion and bounds."""

import pytest
from pydantic import ValidationError

from pokecatch.config import Settings


def test_postgres_url_rewritten_for_asyncpg():
    settings = Settings(database_url="postgresql://u:p@host:5432/db")
    assert settings.database_url == "postgresql+asyncpg://u:p@host:5432/db"


def test_sqlite_url_left_alone():
    settings = Settings(database_url="sqlite+aiosqlite:///x.db")
    assert settings.database_url == "sqlite+aiosqlite:///x.db"


def test_defaults():
    settings = Settings(_env_file=None, token_ttl_minutes=60)
    assert settings.token_ttl_minutes == 60
    assert settings.jwt_algorithm == "HS256"


@pytest.mark.parametrize("rounds", [3, 32])
def test_bcrypt_rounds_bounded(rounds):
    with pytest.raises(ValidationError):
        Settings(bcrypt_rounds=rounds)


def test_jwt_secret_not_exposed_in_repr(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "super-secret-value-for-repr-check")
    settings = Settings()
    assert "super-secret-value-for-repr-check" not in repr(settings)
    assert settings.jwt_secret.get_secret_value() == "super-secret-value-for-repr-check"
