"""Pokemon Lookup Route — public proxy to the creature catalog.

Invariants:
    - Known creature → 200 with payload under data
    - Unknown creature → 404 CREATURE_NOT_FOUND
    - Lookup failure → 502 CATALOG_LOOKUP_FAILED without upstream detail
"""

from pokecatch.core.errors import CatalogLookupError


async def test_lookup_known_creature(client):
    res = await client.get("/api/v1/pokemon/pikachu")

    assert res.status_code == 200
    assert res.json()["data"]["name"] == "pikachu"


async def test_lookup_unknown_creature(client):
    res = await client.get("/api/v1/pokemon/missingno")

    assert res.status_code == 404
    assert res.json()["error"]["message"] == "Your Pokémon was not found!"


async def test_lookup_failure_returns_502(client, fake_pokeapi, monkeypatch):
    async def broken(name):
        raise CatalogLookupError("Upstream returned 503 from 10.0.0.7", "server_error")

    monkeypatch.setattr(fake_pokeapi, "get_creature", broken)

    res = await client.get("/api/v1/pokemon/pikachu")

    assert res.status_code == 502
    assert res.json()["error"]["code"] == "CATALOG_LOOKUP_FAILED"
    assert "10.0.0.7" not in res.text
