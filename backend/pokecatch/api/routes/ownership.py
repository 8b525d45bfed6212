"""Ownership Routes — catch, release and list, all behind the auth gate.

Invariants:
    - Router-level dependency on get_current_subject: no handler runs unauthenticated
    - Subject passed explicitly to the ledger
    - caught list uses one envelope for empty and populated results

Design Decisions:
    - Thin routes delegate to OwnershipLedger (no SQL here)
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from pokecatch.api.dependencies import get_current_subject, get_ownership_ledger
from pokecatch.core.domain_types import AuthenticatedSubject
from pokecatch.schemas.ownership import (
    CatchRequest, CatchResponse, CaughtListResponse,
    OwnershipRecordResponse, ReleaseResponse,
)
from pokecatch.services.ownership_ledger import OwnershipLedger

router = APIRouter(
    prefix="/api/v1/protected",
    tags=["ownership"],
    dependencies=[Depends(get_current_subject)],
)


@router.post(
    "/catch", response_model=CatchResponse,
    status_code=status.HTTP_201_CREATED,
)
async def catch_pokemon(
    body: CatchRequest,
    subject: AuthenticatedSubject = Depends(get_current_subject),
    ledger: OwnershipLedger = Depends(get_ownership_ledger),
):
    """Catch a creature by name (always a new record)."""
    record = await ledger.catch(subject, body.name)
    return CatchResponse(data=OwnershipRecordResponse.from_record(record))


@router.delete("/release/{record_id}", response_model=ReleaseResponse)
async def release_pokemon(
    record_id: UUID,
    subject: AuthenticatedSubject = Depends(get_current_subject),
    ledger: OwnershipLedger = Depends(get_ownership_ledger),
):
    """Release a caught creature owned by the caller."""
    await ledger.release(subject, record_id)
    return ReleaseResponse()


@router.get("/caught", response_model=CaughtListResponse)
async def list_caught(
    subject: AuthenticatedSubject = Depends(get_current_subject),
    ledger: OwnershipLedger = Depends(get_ownership_ledger),
):
    """List the caller's caught creatures."""
    records = await ledger.list_owned(subject)
    return CaughtListResponse(
        message="No Pokémon found." if not records else "Caught Pokémon",
        count=len(records),
        data=[OwnershipRecordResponse.from_record(r) for r in records],
    )
