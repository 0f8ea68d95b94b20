"""Pytest configuration and shared fixtures."""

import os

# Must be set before contador.config is imported anywhere.
os.environ.setdefault("KV_BACKEND", "memory")

import pytest  # noqa: E402

from contador.adapters.kv.memory_store import InMemoryKeyValueStore  # noqa: E402
from contador.application.repositories.people_repo import PeopleRepository  # noqa: E402


class FailingStore(InMemoryKeyValueStore):
    """Every operation fails like an unreachable backend."""

    async def get(self, key):
        raise OSError("store unreachable")

    async def put(self, key, value):
        raise OSError("store unreachable")

    async def delete(self, key):
        raise OSError("store unreachable")


@pytest.fixture
def store():
    return InMemoryKeyValueStore()


@pytest.fixture
def failing_store():
    return FailingStore()


@pytest.fixture
def repo(store):
    return PeopleRepository(store, roster_key="people")
