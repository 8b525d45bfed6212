"""Ownership Schemas — catch request and caught-creature responses.

Invariants:
    - CatchRequest.name may be absent at the boundary; the ledger rejects empty names
      so the rule holds for every caller, not just HTTP
    - name is bounded by the catalog_entries.name column (100 characters)
    - List responses share one envelope whether empty or populated
"""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field


class CatchRequest(BaseModel):
    name: str | None = Field(default=None, max_length=100)


class CatalogEntryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str


class OwnershipRecordResponse(BaseModel):
    """A caught creature, enriched with its catalog entry."""

    id: UUID
    user_id: UUID
    catalog_entry_id: UUID
    caught_at: datetime
    pokemon: CatalogEntryResponse

    @classmethod
    def from_record(cls, record) -> "OwnershipRecordResponse":
        return cls(
            id=record.id,
            user_id=record.user_id,
            catalog_entry_id=record.catalog_entry_id,
            caught_at=record.caught_at,
            pokemon=CatalogEntryResponse.model_validate(record.catalog_entry),
        )


class CatchResponse(BaseModel):
    message: str = "Pokemon caught"
    data: OwnershipRecordResponse


class ReleaseResponse(BaseModel):
    message: str = "Pokemon is released"


class CaughtListResponse(BaseModel):
    message: str
    count: int
    data: list[OwnershipRecordResponse]
