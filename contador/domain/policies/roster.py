"""Roster policy — pure transforms over the list of counters.

Nothing here touches the store: callers load the roster, apply one of these
functions to get a new list, and write the whole list back.
"""

from __future__ import annotations

import re
import time
import unicodedata

from contador.domain.entities.person import Person
from contador.domain.exceptions import ConflictError, NotFoundError, ValidationError

_NON_SLUG = re.compile(r"[^a-z0-9]+")


def slugify(name: str) -> str:
    """Lowercase ASCII slug of a display name ("João Silva" → "joao-silva")."""
    ascii_name = (
        unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    )
    slug = _NON_SLUG.sub("-", ascii_name.lower()).strip("-")
    return slug or "person"


def make_person_id(name: str, existing_ids: set[str], now_ms: int | None = None) -> str:
    """Synthesize ``<slug>-<timestamp>``, bumping the timestamp on collision."""
    stamp = now_ms if now_ms is not None else int(time.time() * 1000)
    slug = slugify(name)
    candidate = f"{slug}-{stamp}"
    while candidate in existing_ids:
        stamp += 1
        candidate = f"{slug}-{stamp}"
    return candidate


def find_by_name(roster: list[Person], name: str) -> Person | None:
    key = name.casefold()
    return next((p for p in roster if p.name.casefold() == key), None)


def add_person(
    roster: list[Person], name: str, now_ms: int | None = None
) -> tuple[list[Person], Person]:
    """Append a new zero-count person.

    Returns:
        (new_roster, new_person). The input list is left untouched.

    Raises:
        ValidationError: if the name is empty after trimming.
        ConflictError: if the name already exists, ignoring case.
    """
    if not isinstance(name, str):
        raise ValidationError("Name must be a string")
    clean = name.strip()
    if not clean:
        raise ValidationError("Name is required")
    if find_by_name(roster, clean) is not None:
        raise ConflictError(f"A person named '{clean}' already exists")

    person = Person(
        id=make_person_id(clean, {p.id for p in roster}, now_ms),
        name=clean,
        count=0,
    )
    return [*roster, person], person


def increment_person(roster: list[Person], person_id: str) -> tuple[list[Person], int]:
    """Bump one person's count by exactly one.

    Returns:
        (new_roster, new_count)

    Raises:
        NotFoundError: if no person has ``person_id``.
    """
    for index, person in enumerate(roster):
        if person.id == person_id:
            bumped = person.incremented()
            new_roster = list(roster)
            new_roster[index] = bumped
            return new_roster, bumped.count
    raise NotFoundError(f"Person '{person_id}' not found")


def seed_default(person_id: str, name: str) -> list[Person]:
    """The roster used when the store holds none yet."""
    return [Person(id=person_id, name=name, count=0)]
