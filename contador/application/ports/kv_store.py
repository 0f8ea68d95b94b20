"""Port interface for the key-value store backing the roster."""

from abc import ABC, abstractmethod


class KeyValueStore(ABC):
    """String keys to string values. No transactions, no compare-and-swap."""

    @abstractmethod
    async def get(self, key: str) -> str | None:
        """Return the stored value, or None when the key is absent."""
        ...

    @abstractmethod
    async def put(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, overwriting unconditionally."""
        ...

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove ``key``. Deleting an absent key is a no-op."""
        ...
