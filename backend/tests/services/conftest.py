"""Service test fixtures — hasher, token service, fake lookup and seeded users.

Invariants:
    - Services are built directly around the test AsyncSession (no HTTP)
    - Seeded users carry a dummy hash; auth tests register through AuthService
"""

from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from pokecatch.core.domain_types import AuthenticatedSubject, UserId
from pokecatch.core.passwords import PasswordHasher
from pokecatch.core.tokens import TokenService
from pokecatch.models.user import User
from tests.fakes import FakeCreatureLookup

TEST_SECRET = "service-test-secret-with-enough-length"


@pytest.fixture
def hasher():
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service():
    return TokenService(secret=TEST_SECRET)


@pytest.fixture
def fake_lookup():
    return FakeCreatureLookup()


async def _make_user(db: AsyncSession, email: str) -> AuthenticatedSubject:
    user = User(email=email, hashed_password="not-a-real-hash")
    db.add(user)
    await db.commit()
    return AuthenticatedSubject(
        user_id=UserId(user.id),
        expires_at=datetime.now(timezone.utc) + timedelta(hours=1),
    )


@pytest.fixture
async def ash(test_db):
    return await _make_user(test_db, "ash@example.com")


@pytest.fixture
async def misty(test_db):
    return await _make_user(test_db, "misty@example.com")
