"""Person entity — one named counter in the roster."""

from __future__ import annotations

from dataclasses import asdict, dataclass

from contador.domain.exceptions import StorageError


@dataclass(frozen=True)
class Person:
    id: str
    name: str
    count: int = 0

    def incremented(self) -> Person:
        return Person(id=self.id, name=self.name, count=self.count + 1)

    def to_dict(self) -> dict:
        return asdict(self)

    @classmethod
    def from_dict(cls, raw: object) -> Person:
        """Build a Person from one stored roster entry.

        Raises:
            StorageError: if the entry does not have the stored shape.
        """
        if not isinstance(raw, dict):
            raise StorageError(f"Roster entry is not an object: {raw!r}")

        pid, name, count = raw.get("id"), raw.get("name"), raw.get("count")
        if not isinstance(pid, str) or not pid:
            raise StorageError(f"Roster entry has invalid id: {raw!r}")
        if not isinstance(name, str) or not name:
            raise StorageError(f"Roster entry has invalid name: {raw!r}")
        # bool is an int subclass
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise StorageError(f"Roster entry has invalid count: {raw!r}")

        return cls(id=pid, name=name, count=count)
