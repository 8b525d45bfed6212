"""Pokecatch API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map PokecatchError → structured JSON responses
    - CORS configured from settings (not hardcoded)
    - Database and PokeAPI client initialized on startup, closed on shutdown

Design Decisions:
    - Lifespan over @app.on_event: FastAPI recommended pattern, cleaner cleanup
    - Error handlers live in api/error_handlers.py
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from pokecatch.api.dependencies import jwt_secret_is_placeholder
from pokecatch.api.error_handlers import register_error_handlers
from pokecatch.api.routes import auth, health, ownership, pokemon
from pokecatch.config import get_settings
from pokecatch.infrastructure.database import close_db, init_db
from pokecatch.infrastructure.observability import setup_logging
from pokecatch.infrastructure.pokeapi_client import (
    close_pokeapi_client, init_pokeapi_client,
)

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    if jwt_secret_is_placeholder():
        logger.warning("JWT_SECRET is the placeholder value; tokens are insecure")
    init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    init_pokeapi_client(
        base_url=settings.pokeapi_base_url,
        timeout_seconds=settings.pokeapi_timeout_seconds,
        max_retries=settings.pokeapi_max_retries,
        base_delay_ms=settings.pokeapi_base_delay_ms,
        max_delay_ms=settings.pokeapi_max_delay_ms,
    )
    logger.info("Pokecatch API started")
    yield
    logger.info("Pokecatch API shutting down")
    await close_pokeapi_client()
    await close_db()


app = FastAPI(
    title="Pokecatch API", version="1.0.0", lifespan=lifespan,
)

settings = get_settings()
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(health.router)
app.include_router(auth.router)
app.include_router(pokemon.router)
app.include_router(ownership.router)

register_error_handlers(app)
