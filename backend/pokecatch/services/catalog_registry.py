"""Catalog Registry — get-or-create of shared catalog entries by creature name.

Invariants:
    - At most one CatalogEntry per name, guaranteed by the unique constraint
    - A lost creation race resolves to the winner's row, never to an error
    - A prior read is never trusted as proof of absence
    - No in-process locking: several service instances may race on the same name

Design Decisions:
    - Insert-then-fallback-read: attempt insert inside a SAVEPOINT, on IntegrityError
      roll back only the savepoint and re-select by name
    - Instances already loaded in the session stay usable after a lost race
    - External lookup (optional) only consulted when the name is new to the catalog
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from pokecatch.core.errors import CreatureNotFoundError, StoreUnavailableError
from pokecatch.core.repository_protocols import CreatureLookup
from pokecatch.models.catalog_entry import CatalogEntry

logger = logging.getLogger(__name__)


class CatalogRegistry:
    """Resolve creature names to canonical catalog entries."""

    def __init__(self, db: AsyncSession, lookup: CreatureLookup | None = None):
        self.db = db
        self.lookup = lookup

    async def get_by_name(self, name: str) -> CatalogEntry | None:
        result = await self.db.execute(
            select(CatalogEntry).where(CatalogEntry.name == name),
        )
        return result.scalar_one_or_none()

    async def get_or_create(self, name: str) -> CatalogEntry:
        """Return the entry for name, creating it on first reference."""
        entry = await self.get_by_name(name)
        if entry:
            return entry

        if self.lookup is not None and not await self.lookup.exists(name):
            raise CreatureNotFoundError(name)

        entry = CatalogEntry(name=name)
        try:
            async with self.db.begin_nested():
                self.db.add(entry)
        except IntegrityError:
            # Another request created the same name between our read and insert
            logger.info(
                "Catalog entry created concurrently, re-reading",
                extra={"creature": name},
            )
            entry = await self.get_by_name(name)
            if entry is None:
                raise StoreUnavailableError(
                    "Catalog entry vanished after uniqueness conflict", "select",
                )
            return entry

        await self.db.commit()
        logger.info("Catalog entry created", extra={"creature": name})
        return entry
