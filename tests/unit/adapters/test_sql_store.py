"""Tests for SqlKeyValueStore against a fake async session factory."""

from __future__ import annotations

import asyncio

import pytest
from sqlalchemy.dialects import postgresql
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.sql.dml import Delete, Insert

from contador.adapters.kv.sql_store import SqlKeyValueStore
from contador.adapters.persistence.models import KeyValueModel
from contador.domain.exceptions import StorageError


class FakeSession:
    """Stages writes until commit, like a transaction on a primary-key table.

    A plain INSERT on a key that exists at commit time fails; an
    ``ON CONFLICT ... DO UPDATE`` overwrites.
    """

    def __init__(self, factory: FakeSessionFactory):
        self._factory = factory
        self._pending: list[tuple[str, str, str | None]] = []
        self.commits = 0

    async def __aenter__(self):
        if self._factory.down:
            raise OperationalError("connect", {}, Exception("connection refused"))
        return self

    async def __aexit__(self, *exc):
        return False

    async def get(self, model, key):
        assert model is KeyValueModel
        if key not in self._factory.rows:
            return None
        return KeyValueModel(key=key, value=self._factory.rows[key])

    async def execute(self, stmt):
        compiled = stmt.compile(dialect=postgresql.dialect())
        self._factory.statements.append(str(compiled))
        if isinstance(stmt, Insert):
            mode = "upsert" if "ON CONFLICT" in str(compiled) else "insert"
            self._pending.append((mode, compiled.params["key"], compiled.params["value"]))
        elif isinstance(stmt, Delete):
            # DELETE ... WHERE kv_entries.key = :key_1
            self._pending.append(("delete", stmt.whereclause.right.value, None))
        await self._factory.executed()

    async def commit(self):
        rows = self._factory.rows
        for mode, key, value in self._pending:
            if mode == "insert" and key in rows:
                raise IntegrityError("INSERT", {}, Exception("duplicate key"))
            if mode == "delete":
                rows.pop(key, None)
            else:
                rows[key] = value
        self._pending.clear()
        self.commits += 1


class FakeSessionFactory:
    def __init__(self, down: bool = False, overlap: int = 1):
        self.rows: dict[str, str] = {}
        self.sessions: list[FakeSession] = []
        self.statements: list[str] = []
        self.down = down
        # Number of writers that must have executed before any may commit
        self._overlap = overlap
        self._executed = 0
        self._all_executed = asyncio.Event()

    def __call__(self):
        session = FakeSession(self)
        self.sessions.append(session)
        return session

    async def executed(self):
        self._executed += 1
        if self._executed >= self._overlap:
            self._all_executed.set()
        await self._all_executed.wait()


@pytest.mark.asyncio
async def test_get_put_delete():
    factory = FakeSessionFactory()
    store = SqlKeyValueStore(factory)

    assert await store.get("people") is None
    await store.put("people", "[]")
    assert await store.get("people") == "[]"
    await store.put("people", '["a"]')
    assert await store.get("people") == '["a"]'
    await store.delete("people")
    await store.delete("people")
    assert factory.rows == {}


@pytest.mark.asyncio
async def test_put_is_an_upsert_on_the_key():
    factory = FakeSessionFactory()
    await SqlKeyValueStore(factory).put("people", "[]")
    sql = factory.statements[0]
    assert "ON CONFLICT" in sql
    assert "DO UPDATE SET" in sql
    assert "excluded.value" in sql


@pytest.mark.asyncio
async def test_overlapping_first_puts_both_succeed_last_writer_wins():
    factory = FakeSessionFactory(overlap=2)
    store = SqlKeyValueStore(factory)

    results = await asyncio.gather(
        store.put("people", '["a"]'),
        store.put("people", '["b"]'),
        return_exceptions=True,
    )

    assert results == [None, None]
    assert factory.rows["people"] in ('["a"]', '["b"]')


@pytest.mark.asyncio
async def test_every_operation_uses_its_own_session_and_commits_writes():
    factory = FakeSessionFactory()
    store = SqlKeyValueStore(factory)

    await store.put("a", "1")
    await store.get("a")
    await store.delete("a")

    assert len(factory.sessions) == 3
    assert [s.commits for s in factory.sessions] == [1, 0, 1]


@pytest.mark.asyncio
@pytest.mark.parametrize("op, args", [("get", ("k",)), ("put", ("k", "v")), ("delete", ("k",))])
async def test_database_errors_become_storage_errors(op, args):
    store = SqlKeyValueStore(FakeSessionFactory(down=True))
    with pytest.raises(StorageError) as exc_info:
        await getattr(store, op)(*args)
    assert isinstance(exc_info.value.__cause__, OperationalError)
