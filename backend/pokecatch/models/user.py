"""User ORM — persisted credential identity.

Invariants:
    - id is UUID primary key
    - email is unique and case-sensitive as stored
    - hashed_password holds a bcrypt modular-crypt string, never the raw password
    - Rows are immutable after registration and never deleted

Design Decisions:
    - Uniqueness enforced by the database constraint, not a pre-insert check:
      concurrent registrations resolve at the store
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import String, DateTime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy.dialects.postgresql import UUID

from pokecatch.db.base import Base


class User(Base):
    """Registered user."""
    __tablename__ = "users"

    id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True), primary_key=True, default=uuid.uuid4,
    )
    email: Mapped[str] = mapped_column(
        String(320), nullable=False, unique=True,
    )
    hashed_password: Mapped[str] = mapped_column(String(128), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    ownership_records: Mapped[list["OwnershipRecord"]] = relationship(
        "OwnershipRecord", back_populates="user",
    )
