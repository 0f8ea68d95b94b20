"""RenderRosterUseCase — roster for the HTML page, seeded and never failing."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from contador.application.repositories.people_repo import PeopleRepository
from contador.domain.entities.person import Person
from contador.domain.exceptions import StorageError
from contador.domain.policies.roster import seed_default

logger = logging.getLogger(__name__)


@dataclass
class RosterView:
    people: list[Person]
    seeded: bool = False
    degraded: bool = False


class RenderRosterUseCase:
    """Load the roster for the page, seeding the default person when empty.

    Storage failures downgrade to an in-memory default roster instead of
    propagating, so the page always has at least one counter.
    """

    def __init__(self, people_repo: PeopleRepository, default_id: str, default_name: str):
        self._people = people_repo
        self._default_id = default_id
        self._default_name = default_name

    async def execute(self) -> RosterView:
        try:
            roster = await self._people.load()
        except StorageError:
            logger.warning("Roster unavailable, rendering default", exc_info=True)
            return RosterView(
                people=seed_default(self._default_id, self._default_name),
                degraded=True,
            )

        if roster:
            return RosterView(people=roster)

        roster = seed_default(self._default_id, self._default_name)
        try:
            await self._people.save(roster)
        except StorageError:
            logger.warning("Could not persist seeded roster", exc_info=True)
            return RosterView(people=roster, seeded=True, degraded=True)

        logger.info("Seeded empty roster with default person '%s'", self._default_id)
        return RosterView(people=roster, seeded=True)
