"""API Dependencies — service wiring and the auth gate for protected routes.

Invariants:
    - Every ownership route depends on get_current_subject (the auth gate)
    - The gate rejects missing/invalid/expired tokens with UnauthorizedError before
      any handler or service code runs
    - Password hasher and token service are built once from settings (process-wide)

Design Decisions:
    - HTTPBearer(auto_error=False): the gate owns the 401 shape instead of FastAPI's 403
    - Singletons read through the module (not from-imported) so lifespan init is seen
    - Services constructed per request around the request's AsyncSession
"""

from functools import lru_cache
from datetime import timedelta

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import AsyncSession

import pokecatch.infrastructure.pokeapi_client as pokeapi
from pokecatch.config import PLACEHOLDER_JWT_SECRET, get_settings
from pokecatch.core.domain_types import AuthenticatedSubject
from pokecatch.core.errors import (
    TokenExpiredError, TokenInvalidError, UnauthorizedError,
)
from pokecatch.core.passwords import PasswordHasher
from pokecatch.core.repository_protocols import CreatureLookup
from pokecatch.core.tokens import TokenService
from pokecatch.infrastructure.database import get_db
from pokecatch.infrastructure.pokeapi_client import PokeApiClient
from pokecatch.services.auth_service import AuthService
from pokecatch.services.catalog_registry import CatalogRegistry
from pokecatch.services.ownership_ledger import OwnershipLedger

bearer_scheme = HTTPBearer(auto_error=False)


# ─── Process-wide components ────────────────────────────────────

@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=get_settings().bcrypt_rounds)


@lru_cache
def get_token_service() -> TokenService:
    settings = get_settings()
    return TokenService(
        secret=settings.jwt_secret.get_secret_value(),
        algorithm=settings.jwt_algorithm,
        ttl=timedelta(minutes=settings.token_ttl_minutes),
    )


def get_pokeapi_client() -> PokeApiClient:
    if not pokeapi.pokeapi_client:
        raise RuntimeError("PokeAPI client not initialized")
    return pokeapi.pokeapi_client


def get_creature_lookup() -> CreatureLookup | None:
    """Lookup used to confirm new names on catch (None disables the check)."""
    if not get_settings().verify_creatures_on_catch:
        return None
    return get_pokeapi_client()


def jwt_secret_is_placeholder() -> bool:
    return get_settings().jwt_secret.get_secret_value() == PLACEHOLDER_JWT_SECRET


# ─── Per-request services ───────────────────────────────────────

def get_auth_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, hasher, tokens)


def get_catalog_registry(
    db: AsyncSession = Depends(get_db),
    lookup: CreatureLookup | None = Depends(get_creature_lookup),
) -> CatalogRegistry:
    return CatalogRegistry(db, lookup)


def get_ownership_ledger(
    db: AsyncSession = Depends(get_db),
    registry: CatalogRegistry = Depends(get_catalog_registry),
) -> OwnershipLedger:
    return OwnershipLedger(db, registry)


# ─── Auth gate ──────────────────────────────────────────────────

def get_current_subject(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    tokens: TokenService = Depends(get_token_service),
) -> AuthenticatedSubject:
    """Verify the bearer token and return the caller's identity."""
    if credentials is None:
        raise UnauthorizedError()
    try:
        return tokens.authenticate(credentials.credentials)
    except TokenExpiredError:
        raise UnauthorizedError("Token has expired")
    except TokenInvalidError:
        raise UnauthorizedError("Invalid token")
