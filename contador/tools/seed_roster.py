"""Operator tool for the roster stored in the key-value store.

Usage:
    python -m contador.tools.seed_roster --list
    python -m contador.tools.seed_roster --name Ana --name Bruno
    python -m contador.tools.seed_roster --reset            # only the default person
    python -m contador.tools.seed_roster --cleanup-legacy   # delete old-schema keys now
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys

from contador.application.ports.kv_store import KeyValueStore
from contador.application.repositories.people_repo import PeopleRepository
from contador.application.use_cases.cleanup_legacy import CleanupLegacyKeysUseCase
from contador.application.use_cases.manage_people import AddPersonUseCase
from contador.config import settings
from contador.domain.exceptions import ContadorError
from contador.domain.policies.roster import seed_default

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


async def run(
    store: KeyValueStore,
    names: list[str],
    reset: bool = False,
    cleanup_legacy: bool = False,
    list_roster: bool = False,
) -> int:
    """Apply the requested actions in order: reset, add names, cleanup, list."""
    repo = PeopleRepository(store, roster_key=settings.roster_key)

    if reset:
        await repo.save(seed_default(settings.default_person_id, settings.default_person_name))
        logger.info("Roster reset to default person '%s'", settings.default_person_id)

    failures = 0
    add_uc = AddPersonUseCase(repo)
    for name in names:
        try:
            person = await add_uc.execute(name)
        except ContadorError as e:
            logger.error("Could not add '%s': %s", name, e.message)
            failures += 1
            continue
        logger.info("Added %s", person.id)

    if cleanup_legacy:
        roster = await repo.load()
        report = await CleanupLegacyKeysUseCase(
            store,
            counter_key=settings.legacy_counter_key,
            person_prefix=settings.legacy_person_prefix,
        ).execute(roster)
        logger.info(
            "Legacy cleanup: %d deleted, %d failed", len(report.deleted), len(report.failed)
        )
        failures += len(report.failed)

    if list_roster:
        roster = await repo.load()
        print(json.dumps([p.to_dict() for p in roster], ensure_ascii=False, indent=2))

    return 1 if failures else 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Manage the counter roster")
    parser.add_argument("--name", action="append", default=[], help="Add a person (repeatable)")
    parser.add_argument("--reset", action="store_true", help="Overwrite roster with the default person")
    parser.add_argument("--cleanup-legacy", action="store_true", help="Delete legacy per-person and global keys")
    parser.add_argument("--list", dest="list_roster", action="store_true", help="Print the roster as JSON")
    args = parser.parse_args(argv)

    # Imported here so --help works without a database driver configured
    from contador.infrastructure.api.dependencies import build_store

    store = build_store(settings.kv_backend)
    try:
        return asyncio.run(
            run(
                store,
                args.name,
                reset=args.reset,
                cleanup_legacy=args.cleanup_legacy,
                list_roster=args.list_roster,
            )
        )
    except ContadorError as e:
        logger.error("%s", e.message)
        return 2


if __name__ == "__main__":
    sys.exit(main())
