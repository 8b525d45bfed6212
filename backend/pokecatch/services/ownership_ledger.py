"""Ownership Ledger — catch, release and list of per-user ownership records.

Invariants:
    - Every operation is scoped to the authenticated subject passed in
    - catch always inserts a new record, even for a species already owned
    - Blank names and names longer than the catalog column are rejected before any write
    - release is one conditional DELETE (id AND owner): no read-then-delete window
    - Missing records and records owned by others produce the same error
    - list of a user with nothing caught is an empty list, not an error

Design Decisions:
    - Subject threaded explicitly (AuthenticatedSubject) rather than read from request state
    - Catalog resolution delegated to CatalogRegistry (shared get-or-create contract)
"""

import logging
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from pokecatch.core.domain_types import AuthenticatedSubject
from pokecatch.core.errors import InputValidationError, NotFoundOrForbiddenError
from pokecatch.models.catalog_entry import NAME_MAX_LENGTH
from pokecatch.models.ownership_record import OwnershipRecord
from pokecatch.services.catalog_registry import CatalogRegistry

logger = logging.getLogger(__name__)


class OwnershipLedger:
    """Per-user ownership records over the shared catalog."""

    def __init__(self, db: AsyncSession, registry: CatalogRegistry):
        self.db = db
        self.registry = registry

    async def catch(
        self, subject: AuthenticatedSubject, name: str | None,
    ) -> OwnershipRecord:
        """Record a new catch of name for subject."""
        if name is None or not name.strip():
            raise InputValidationError("Pokemon name is required", "name")
        if len(name) > NAME_MAX_LENGTH:
            raise InputValidationError(
                f"Pokemon name must be at most {NAME_MAX_LENGTH} characters", "name",
            )

        entry = await self.registry.get_or_create(name)
        record = OwnershipRecord(
            user_id=subject.user_id, catalog_entry_id=entry.id,
        )
        record.catalog_entry = entry
        self.db.add(record)
        await self.db.commit()

        logger.info(
            "Pokemon caught",
            extra={
                "user_id": str(subject.user_id),
                "creature": name,
                "record_id": str(record.id),
            },
        )
        return record

    async def release(
        self, subject: AuthenticatedSubject, record_id: UUID,
    ) -> None:
        """Delete record_id if, and only if, subject owns it."""
        result = await self.db.execute(
            delete(OwnershipRecord)
            .where(OwnershipRecord.id == record_id)
            .where(OwnershipRecord.user_id == subject.user_id),
        )
        if result.rowcount == 0:
            raise NotFoundOrForbiddenError(str(record_id))
        await self.db.commit()
        logger.info(
            "Pokemon released",
            extra={"user_id": str(subject.user_id), "record_id": str(record_id)},
        )

    async def list_owned(
        self, subject: AuthenticatedSubject,
    ) -> list[OwnershipRecord]:
        """All records owned by subject, catalog entries loaded."""
        result = await self.db.execute(
            select(OwnershipRecord)
            .where(OwnershipRecord.user_id == subject.user_id)
            .order_by(OwnershipRecord.caught_at, OwnershipRecord.id),
        )
        return list(result.scalars().all())
