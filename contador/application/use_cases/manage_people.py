"""Roster API use cases — list, add, increment."""

from __future__ import annotations

import logging

from contador.application.repositories.people_repo import PeopleRepository
from contador.domain.entities.person import Person

logger = logging.getLogger(__name__)


class ListPeopleUseCase:
    def __init__(self, people_repo: PeopleRepository):
        self._people = people_repo

    async def execute(self) -> list[Person]:
        # No seeding here: the API may observe an empty roster.
        return await self._people.load()


class AddPersonUseCase:
    def __init__(self, people_repo: PeopleRepository):
        self._people = people_repo

    async def execute(self, name: str) -> Person:
        roster = await self._people.load()
        roster, person = self._people.add_person(roster, name)
        await self._people.save(roster)
        logger.info("Added person %s (%s), roster size %d", person.id, person.name, len(roster))
        return person


class IncrementPersonUseCase:
    """Read-modify-write of the whole roster.

    Concurrent increments are not coordinated; when two cycles read the same
    snapshot the second save overwrites the first (lost update).
    """

    def __init__(self, people_repo: PeopleRepository):
        self._people = people_repo

    async def execute(self, person_id: str) -> int:
        roster = await self._people.load()
        roster, count = self._people.increment_person(roster, person_id)
        await self._people.save(roster)
        logger.info("Incremented %s → %d", person_id, count)
        return count
