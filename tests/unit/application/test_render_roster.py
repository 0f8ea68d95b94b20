"""Tests for RenderRosterUseCase — seeding and degraded rendering."""

import json

import pytest

from contador.adapters.kv.memory_store import InMemoryKeyValueStore
from contador.application.repositories.people_repo import PeopleRepository
from contador.application.use_cases.render_roster import RenderRosterUseCase
from contador.domain.entities.person import Person

DEFAULT = Person(id="gabriel", name="Gabriel", count=0)


class ReadOnlyStore(InMemoryKeyValueStore):
    async def put(self, key, value):
        raise OSError("read-only")


def _uc(store) -> RenderRosterUseCase:
    return RenderRosterUseCase(PeopleRepository(store), default_id="gabriel", default_name="Gabriel")


@pytest.mark.asyncio
async def test_empty_store_is_seeded_and_persisted(store):
    view = await _uc(store).execute()

    assert view.people == [DEFAULT]
    assert view.seeded is True
    assert view.degraded is False
    assert json.loads(store.snapshot()["people"]) == [DEFAULT.to_dict()]


@pytest.mark.asyncio
async def test_empty_array_is_seeded_too(store):
    await store.put("people", "[]")
    view = await _uc(store).execute()
    assert view.seeded is True
    assert view.people == [DEFAULT]


@pytest.mark.asyncio
async def test_existing_roster_is_returned_untouched(store):
    await store.put("people", json.dumps([{"id": "ana-1", "name": "Ana", "count": 4}]))
    before = store.snapshot()

    view = await _uc(store).execute()

    assert view.people == [Person(id="ana-1", name="Ana", count=4)]
    assert view.seeded is False
    assert store.snapshot() == before


@pytest.mark.asyncio
async def test_unreachable_store_degrades_to_default(failing_store):
    view = await _uc(failing_store).execute()
    assert view.people == [DEFAULT]
    assert view.degraded is True


@pytest.mark.asyncio
async def test_malformed_roster_degrades_without_overwriting(store):
    await store.put("people", "{broken")
    view = await _uc(store).execute()

    assert view.degraded is True
    assert view.people == [DEFAULT]
    assert store.snapshot()["people"] == "{broken"


@pytest.mark.asyncio
async def test_seed_write_failure_still_renders():
    view = await _uc(ReadOnlyStore()).execute()
    assert view.people == [DEFAULT]
    assert view.seeded is True
    assert view.degraded is True
