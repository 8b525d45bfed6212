"""Pokemon Lookup Route — public proxy to the external creature catalog.

Invariants:
    - Unknown creature → 404 CREATURE_NOT_FOUND
    - Upstream failure → 502 CATALOG_LOOKUP_FAILED (no upstream detail leaked)
"""

from fastapi import APIRouter, Depends

from pokecatch.api.dependencies import get_pokeapi_client
from pokecatch.infrastructure.pokeapi_client import PokeApiClient

router = APIRouter(prefix="/api/v1/pokemon", tags=["pokemon"])


@router.get("/{name}")
async def get_pokemon(
    name: str, client: PokeApiClient = Depends(get_pokeapi_client),
):
    """Fetch creature metadata by name."""
    return {"data": await client.get_creature(name)}
