"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, CatalogEntryId, OwnershipRecordId wrap UUIDs — never bare UUID in domain logic
    - AuthenticatedSubject is immutable once the auth gate builds it

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - Subject passed explicitly through the call chain instead of ambient request state
"""

from dataclasses import dataclass
from datetime import datetime
from typing import NewType
from uuid import UUID


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", UUID)
CatalogEntryId = NewType("CatalogEntryId", UUID)
OwnershipRecordId = NewType("OwnershipRecordId", UUID)


# ─── Auth Context ────────────────────────────────────────────────

@dataclass(frozen=True)
class AuthenticatedSubject:
    """Verified identity of the caller for the remainder of a request."""
    user_id: UserId
    expires_at: datetime
