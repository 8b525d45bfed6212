"""OwnershipRecord ORM — one catch event linking a user to a catalog entry.

Invariants:
    - Always references an existing User and CatalogEntry (FKs)
    - No uniqueness on (user_id, catalog_entry_id): catching twice yields two rows
    - Created on catch, deleted on release

Design Decisions:
    - catalog_entry loaded with lazy="selectin": listing needs the name, and async
      sessions cannot lazy-load on attribute access
    - Index on user_id: every read and delete is scoped to the owner
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from pokecatch.db.base import Base


class OwnershipRecord(Base):
    """Caught creature owned by a single user."""
    __tablename__ = "ownership_records"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    user_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("users.id"), nullable=False, index=True,
    )
    catalog_entry_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), ForeignKey("catalog_entries.id"), nullable=False,
    )
    caught_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    user: Mapped["User"] = relationship(
        "User", back_populates="ownership_records",
    )
    catalog_entry: Mapped["CatalogEntry"] = relationship(
        "CatalogEntry", lazy="selectin",
    )
