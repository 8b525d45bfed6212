"""CatalogEntry ORM — canonical shared record for a named creature species.

Invariants:
    - name is unique and case-sensitive
    - Created lazily on the first catch by that name, never deleted
    - Shared read-only across users

Design Decisions:
    - Unique constraint on name is what resolves concurrent first catches
      (see services/catalog_registry.py)
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy.dialects.postgresql import UUID

from pokecatch.db.base import Base

NAME_MAX_LENGTH = 100


class CatalogEntry(Base):
    """Catalog entry — one row per distinct creature name."""
    __tablename__ = "catalog_entries"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH), nullable=False, unique=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )
