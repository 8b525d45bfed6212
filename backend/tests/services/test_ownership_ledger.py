"""Ownership Ledger — catch, release and list scoped to the owning user.

Invariants:
    - catch always creates a new record; same species twice → two records, one entry
    - Concurrent first catches of a new name share one catalog entry
    - release by a non-owner fails and leaves the record in place
    - list of a user with no catches is empty
"""

from uuid import uuid4

import pytest
from sqlalchemy import func, select

from pokecatch.core.errors import (
    CreatureNotFoundError, InputValidationError, NotFoundOrForbiddenError,
)
from pokecatch.models.catalog_entry import CatalogEntry
from pokecatch.models.ownership_record import OwnershipRecord
from pokecatch.services.catalog_registry import CatalogRegistry
from pokecatch.services.ownership_ledger import OwnershipLedger
from tests.fakes import stale_first_read


@pytest.fixture
def ledger(test_db):
    return OwnershipLedger(test_db, CatalogRegistry(test_db))


async def test_catch_twice_creates_two_records_one_entry(ledger, ash, test_db):
    first = await ledger.catch(ash, "pikachu")
    second = await ledger.catch(ash, "pikachu")

    assert first.id != second.id
    assert first.catalog_entry_id == second.catalog_entry_id
    assert await test_db.scalar(select(func.count()).select_from(CatalogEntry)) == 1


async def test_catch_links_record_to_subject(ledger, ash):
    record = await ledger.catch(ash, "bulbasaur")

    assert record.user_id == ash.user_id
    assert record.catalog_entry.name == "bulbasaur"
    assert record.caught_at is not None


@pytest.mark.parametrize("name", [None, "", "   "])
async def test_catch_requires_name(ledger, ash, name):
    with pytest.raises(InputValidationError) as exc:
        await ledger.catch(ash, name)
    assert exc.value.field == "name"


async def test_concurrent_first_catches_share_catalog_entry(
    test_session_factory, ash, misty,
):
    async with test_session_factory() as db_a, test_session_factory() as db_b:
        ledger_a = OwnershipLedger(db_a, stale_first_read(CatalogRegistry(db_a)))
        ledger_b = OwnershipLedger(db_b, stale_first_read(CatalogRegistry(db_b)))

        record_a = await ledger_a.catch(ash, "charmander")
        record_b = await ledger_b.catch(misty, "charmander")

        assert record_a.catalog_entry_id == record_b.catalog_entry_id
        count = await db_a.scalar(
            select(func.count()).select_from(CatalogEntry)
            .where(CatalogEntry.name == "charmander"),
        )
        assert count == 1


async def test_release_removes_owned_record(ledger, ash, test_db):
    record = await ledger.catch(ash, "pikachu")

    await ledger.release(ash, record.id)

    assert await test_db.get(OwnershipRecord, record.id) is None


async def test_release_by_non_owner_fails_and_keeps_record(ledger, ash, misty, test_db):
    record = await ledger.catch(ash, "pikachu")

    with pytest.raises(NotFoundOrForbiddenError):
        await ledger.release(misty, record.id)

    result = await test_db.execute(
        select(OwnershipRecord).where(OwnershipRecord.id == record.id),
    )
    assert result.scalar_one().user_id == ash.user_id


async def test_release_unknown_record_matches_forbidden_error(ledger, ash):
    with pytest.raises(NotFoundOrForbiddenError):
        await ledger.release(ash, uuid4())


async def test_list_empty_for_user_without_catches(ledger, ash):
    assert await ledger.list_owned(ash) == []


async def test_list_only_returns_own_records(ledger, ash, misty):
    await ledger.catch(ash, "pikachu")
    await ledger.catch(misty, "starmie")

    records = await ledger.list_owned(ash)

    assert [r.catalog_entry.name for r in records] == ["pikachu"]


async def test_catch_rejects_unknown_creature_when_lookup_wired(test_db, ash, fake_lookup):
    ledger = OwnershipLedger(test_db, CatalogRegistry(test_db, fake_lookup))

    with pytest.raises(CreatureNotFoundError):
        await ledger.catch(ash, "missingno")
    assert await ledger.list_owned(ash) == []


async def test_catch_rejects_name_longer_than_catalog_column(ledger, ash, test_db):
    with pytest.raises(InputValidationError) as exc:
        await ledger.catch(ash, "x" * 101)

    assert exc.value.field == "name"
    assert await test_db.scalar(select(func.count()).select_from(CatalogEntry)) == 0


async def test_catch_accepts_name_at_column_limit(ledger, ash):
    record = await ledger.catch(ash, "x" * 100)

    assert record.catalog_entry.name == "x" * 100


async def test_failed_release_leaves_loaded_records_usable(ledger, ash, misty):
    record = await ledger.catch(ash, "pikachu")

    with pytest.raises(NotFoundOrForbiddenError):
        await ledger.release(misty, record.id)

    assert record.user_id == ash.user_id
    assert record.catalog_entry.name == "pikachu"
