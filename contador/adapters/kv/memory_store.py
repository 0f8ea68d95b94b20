"""In-process key-value store — implements KeyValueStore.

Used for local development (``KV_BACKEND=memory``) and as the test fake.
State is per process, so it is only faithful to a single instance.
"""

from __future__ import annotations

from contador.application.ports.kv_store import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self._data.get(key)

    async def put(self, key: str, value: str) -> None:
        self._data[key] = value

    async def delete(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> dict[str, str]:
        return dict(self._data)
