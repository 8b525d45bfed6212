"""API Dependencies — creature lookup wiring.

Invariants:
    - With creature verification off, catch needs no PokeAPI client
    - With verification on, a missing client is a startup error
"""

import pytest

import pokecatch.api.dependencies as dependencies
import pokecatch.infrastructure.pokeapi_client as pokeapi
from pokecatch.config import Settings
from pokecatch.infrastructure.pokeapi_client import PokeApiClient


@pytest.fixture
def no_client(monkeypatch):
    monkeypatch.setattr(pokeapi, "pokeapi_client", None)


def _use_settings(monkeypatch, **overrides):
    settings = Settings(**overrides)
    monkeypatch.setattr(dependencies, "get_settings", lambda: settings)


def test_lookup_disabled_does_not_need_client(monkeypatch, no_client):
    _use_settings(monkeypatch, verify_creatures_on_catch=False)

    assert dependencies.get_creature_lookup() is None


def test_lookup_enabled_without_client_raises(monkeypatch, no_client):
    _use_settings(monkeypatch, verify_creatures_on_catch=True)

    with pytest.raises(RuntimeError):
        dependencies.get_creature_lookup()


async def test_lookup_enabled_returns_initialized_client(monkeypatch):
    client = PokeApiClient()
    monkeypatch.setattr(pokeapi, "pokeapi_client", client)
    _use_settings(monkeypatch, verify_creatures_on_catch=True)

    assert dependencies.get_creature_lookup() is client
    await client.close()
