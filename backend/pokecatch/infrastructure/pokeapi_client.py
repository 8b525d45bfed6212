"""Resilient PokeAPI Client — wraps httpx.AsyncClient with retry, backoff, and error mapping.

Invariants:
    - 404: CreatureNotFoundError immediately, no retry
    - Rate limits (429): backoff, respects Retry-After header
    - Transient errors (5xx, connection, timeout): max_retries retries with exponential backoff
    - Other 4xx: immediate CatalogLookupError, no retry
    - All transport failures mapped to CatalogLookupError (core/errors.py)

Design Decisions:
    - Wrapper over raw client: isolates retry logic from the catalog registry
    - ±25% jitter on backoff: prevents thundering herd on a shared upstream
    - Client owns the httpx.AsyncClient unless one is injected (tests pass a MockTransport)
"""

import asyncio
import logging
import random
from urllib.parse import quote

import httpx

from pokecatch.core.errors import (
    CatalogLookupError, CreatureNotFoundError, ErrorContext,
)

logger = logging.getLogger(__name__)

_RATE_LIMITED = 429


class PokeApiClient:
    """Creature lookups against PokeAPI with retries and error mapping."""

    def __init__(
        self,
        base_url: str = "https://pokeapi.co/api/v2",
        timeout_seconds: float = 10.0,
        max_retries: int = 2,
        base_delay_ms: int = 200,
        max_delay_ms: int = 5_000,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.client = http_client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"),
            timeout=timeout_seconds,
            headers={"Accept": "application/json"},
        )
        self.max_retries = max_retries
        self.base_delay_ms = base_delay_ms
        self.max_delay_ms = max_delay_ms

    async def get_creature(
        self, name: str, context: ErrorContext | None = None,
    ) -> dict:
        """Fetch creature metadata by name."""
        path = f"/pokemon/{quote(name, safe='')}"
        for attempt in range(self.max_retries + 1):
            try:
                response = await self.client.get(path)
            except httpx.TimeoutException as e:
                await self._handle_transient_error(e, "timeout", attempt, context)
                continue
            except httpx.TransportError as e:
                await self._handle_transient_error(
                    e, "connection_error", attempt, context,
                )
                continue

            if response.status_code == httpx.codes.NOT_FOUND:
                raise CreatureNotFoundError(name, context=context)
            if response.status_code == _RATE_LIMITED:
                await self._handle_rate_limit(response, attempt, context)
                continue
            if response.is_server_error:
                await self._handle_transient_error(
                    httpx.HTTPStatusError(
                        f"Upstream returned {response.status_code}",
                        request=response.request, response=response,
                    ),
                    "server_error", attempt, context,
                )
                continue
            if response.is_error:
                raise CatalogLookupError(
                    f"Upstream returned {response.status_code}",
                    "client_error", context=context,
                )

            logger.info(
                "PokeAPI lookup success",
                extra={"creature": name, "attempt": attempt + 1},
            )
            try:
                return response.json()
            except ValueError:
                raise CatalogLookupError(
                    "Upstream returned malformed JSON",
                    "malformed_response", context=context,
                )

        raise CatalogLookupError(
            "Lookup retries exhausted", "retries_exhausted", context=context,
        )

    async def exists(self, name: str) -> bool:
        """True if the catalog knows name. Transport failures still raise."""
        try:
            await self.get_creature(name)
        except CreatureNotFoundError:
            return False
        return True

    async def close(self) -> None:
        await self.client.aclose()

    async def _handle_rate_limit(
        self,
        response: httpx.Response,
        attempt: int,
        context: ErrorContext | None,
    ) -> None:
        """Handle rate limit response with retry or raise."""
        if attempt >= self.max_retries:
            raise CatalogLookupError(
                "Rate limit exceeded after retries", "rate_limit",
                context=context,
            )
        delay = self._extract_retry_after(response) or self._backoff(attempt)
        logger.warning(
            f"PokeAPI rate limit hit, retry after {delay}ms",
            extra={"attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    async def _handle_transient_error(
        self,
        e: Exception,
        error_type: str,
        attempt: int,
        context: ErrorContext | None,
    ) -> None:
        """Handle transient errors with retry or raise."""
        if attempt >= self.max_retries:
            raise CatalogLookupError(
                f"Transient failure after {self.max_retries} retries: {e}",
                error_type,
                context=context,
            )
        delay = self._backoff(attempt)
        logger.warning(
            f"PokeAPI transient error, retry after {delay}ms: {e}",
            extra={"attempt": attempt + 1},
        )
        await asyncio.sleep(delay / 1000)

    def _backoff(self, attempt: int) -> int:
        """Exponential backoff with ±25% jitter."""
        delay = min(self.max_delay_ms, (2 ** attempt) * self.base_delay_ms)
        return int(delay * random.uniform(0.75, 1.25))  # nosec B311

    def _extract_retry_after(self, response: httpx.Response) -> int | None:
        """Extract Retry-After header (returns milliseconds)."""
        val = response.headers.get("retry-after")
        if val and val.isdigit():
            return int(val) * 1000
        return None


# Singleton (initialized on startup)
pokeapi_client: PokeApiClient | None = None


def init_pokeapi_client(**kwargs) -> PokeApiClient:
    global pokeapi_client
    pokeapi_client = PokeApiClient(**kwargs)
    return pokeapi_client


async def close_pokeapi_client() -> None:
    global pokeapi_client
    if pokeapi_client:
        await pokeapi_client.close()
    pokeapi_client = None
