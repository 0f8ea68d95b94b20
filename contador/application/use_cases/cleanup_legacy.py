"""CleanupLegacyKeysUseCase — best-effort removal of keys from older schemas.

Earlier versions stored a single global counter and later one key per
person. Both are dead once the roster key exists; this deletes them and
never raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from contador.application.ports.kv_store import KeyValueStore
from contador.domain.entities.person import Person

logger = logging.getLogger(__name__)


@dataclass
class CleanupReport:
    deleted: list[str] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)


def legacy_keys(roster: list[Person], counter_key: str, person_prefix: str) -> list[str]:
    """Per-person keys for the current roster, then the global counter key."""
    return [f"{person_prefix}{p.id}" for p in roster] + [counter_key]


class CleanupLegacyKeysUseCase:
    def __init__(
        self,
        store: KeyValueStore,
        counter_key: str = "babaquinha_count",
        person_prefix: str = "person_",
    ):
        self._store = store
        self._counter_key = counter_key
        self._person_prefix = person_prefix

    async def execute(self, roster: list[Person]) -> CleanupReport:
        report = CleanupReport()
        for key in legacy_keys(roster, self._counter_key, self._person_prefix):
            try:
                await self._store.delete(key)
            except Exception:
                logger.warning("Failed to delete legacy key '%s'", key, exc_info=True)
                report.failed.append(key)
                continue
            report.deleted.append(key)

        if report.failed:
            logger.info(
                "Legacy cleanup: %d deleted, %d failed",
                len(report.deleted), len(report.failed),
            )
        return report
