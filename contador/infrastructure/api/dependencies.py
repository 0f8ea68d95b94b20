"""FastAPI dependency injection — wires the store into repositories and use cases."""

from __future__ import annotations

import logging

from fastapi import Depends

from contador.adapters.kv.memory_store import InMemoryKeyValueStore
from contador.adapters.kv.sql_store import SqlKeyValueStore
from contador.adapters.persistence.database import async_session_factory
from contador.application.ports.kv_store import KeyValueStore
from contador.application.repositories.people_repo import PeopleRepository
from contador.application.use_cases.cleanup_legacy import CleanupLegacyKeysUseCase
from contador.application.use_cases.manage_people import (
    AddPersonUseCase,
    IncrementPersonUseCase,
    ListPeopleUseCase,
)
from contador.application.use_cases.render_roster import RenderRosterUseCase
from contador.config import settings

logger = logging.getLogger(__name__)


def build_store(backend: str) -> KeyValueStore:
    if backend == "memory":
        logger.info("Using in-memory key-value store")
        return InMemoryKeyValueStore()
    return SqlKeyValueStore(async_session_factory)


# Singleton store; the roster itself is never cached between requests.
_store = build_store(settings.kv_backend)


def get_kv_store() -> KeyValueStore:
    return _store


def get_people_repo(store: KeyValueStore = Depends(get_kv_store)) -> PeopleRepository:
    return PeopleRepository(store, roster_key=settings.roster_key)


def get_list_people_uc(repo: PeopleRepository = Depends(get_people_repo)) -> ListPeopleUseCase:
    return ListPeopleUseCase(repo)


def get_add_person_uc(repo: PeopleRepository = Depends(get_people_repo)) -> AddPersonUseCase:
    return AddPersonUseCase(repo)


def get_increment_person_uc(
    repo: PeopleRepository = Depends(get_people_repo),
) -> IncrementPersonUseCase:
    return IncrementPersonUseCase(repo)


def get_render_roster_uc(
    repo: PeopleRepository = Depends(get_people_repo),
) -> RenderRosterUseCase:
    return RenderRosterUseCase(
        repo,
        default_id=settings.default_person_id,
        default_name=settings.default_person_name,
    )


def get_cleanup_legacy_uc(
    store: KeyValueStore = Depends(get_kv_store),
) -> CleanupLegacyKeysUseCase:
    return CleanupLegacyKeysUseCase(
        store,
        counter_key=settings.legacy_counter_key,
        person_prefix=settings.legacy_person_prefix,
    )
