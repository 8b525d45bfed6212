"""API test fixtures — FastAPI test client with DB and PokeAPI overridden.

Invariants:
    - get_db dependency overridden to use the in-memory test database
    - get_pokeapi_client and get_creature_lookup overridden with FakeCreatureLookup
      (no network)
    - Lifespan does not run under ASGITransport; nothing here depends on it
"""

import pytest
from httpx import ASGITransport, AsyncClient

from pokecatch.api.dependencies import get_creature_lookup, get_pokeapi_client
from pokecatch.infrastructure.database import get_db
from pokecatch.main import app
from tests.fakes import FakeCreatureLookup


@pytest.fixture
def fake_pokeapi():
    return FakeCreatureLookup()


@pytest.fixture
async def client(test_session_factory, fake_pokeapi):
    """FastAPI test client with DB and catalog dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_pokeapi_client] = lambda: fake_pokeapi
    app.dependency_overrides[get_creature_lookup] = lambda: fake_pokeapi

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


async def register_and_login(
    client: AsyncClient, email: str, password: str,
) -> dict[str, str]:
    """Register a user and return bearer auth headers."""
    res = await client.post(
        "/api/v1/auth/register", json={"email": email, "password": password},
    )
    assert res.status_code == 201, res.text
    res = await client.post(
        "/api/v1/auth/login", json={"email": email, "password": password},
    )
    assert res.status_code == 200, res.text
    return {"Authorization": f"Bearer {res.json()['token']}"}


@pytest.fixture
async def ash_headers(client):
    return await register_and_login(client, "ash@example.com", "pikachu1")


@pytest.fixture
async def misty_headers(client):
    return await register_and_login(client, "misty@example.com", "starmie2")
