"""PeopleRepository — the whole roster lives under a single store key."""

from __future__ import annotations

import json
import logging

from contador.application.ports.kv_store import KeyValueStore
from contador.domain.entities.person import Person
from contador.domain.exceptions import StorageError
from contador.domain.policies import roster as roster_policy

logger = logging.getLogger(__name__)


class PeopleRepository:
    """Loads and saves the roster; mutations are pure and delegated to the policy.

    Every mutating operation is one ``load``, one pure transform, one ``save``.
    There is no version token: two overlapping cycles resolve as last writer wins.
    """

    def __init__(self, store: KeyValueStore, roster_key: str = "people"):
        self._store = store
        self._key = roster_key

    @property
    def roster_key(self) -> str:
        return self._key

    async def load(self) -> list[Person]:
        try:
            raw = await self._store.get(self._key)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to read roster key '{self._key}'") from e

        if raw is None:
            return []

        try:
            data = json.loads(raw)
        except (TypeError, ValueError) as e:
            raise StorageError(f"Roster under '{self._key}' is not valid JSON") from e

        if not isinstance(data, list):
            raise StorageError(f"Roster under '{self._key}' is not a JSON array")

        return [Person.from_dict(item) for item in data]

    async def save(self, roster: list[Person]) -> None:
        payload = json.dumps([p.to_dict() for p in roster], ensure_ascii=False)
        try:
            await self._store.put(self._key, payload)
        except StorageError:
            raise
        except Exception as e:
            raise StorageError(f"Failed to write roster key '{self._key}'") from e
        logger.debug("Saved roster (%d people) under '%s'", len(roster), self._key)

    @staticmethod
    def add_person(
        roster: list[Person], name: str, now_ms: int | None = None
    ) -> tuple[list[Person], Person]:
        return roster_policy.add_person(roster, name, now_ms)

    @staticmethod
    def increment_person(roster: list[Person], person_id: str) -> tuple[list[Person], int]:
        return roster_policy.increment_person(roster, person_id)
