"""Port interface for durable counter persistence."""

from abc import ABC, abstractmethod


class CounterStore(ABC):
    @abstractmethod
    async def load(self, key: str) -> int | None:
        """Return the persisted value for *key*, or None if nothing is stored.

        Raises StorageError if the substrate cannot be read.
        """
        ...

    @abstractmethod
    async def store(self, key: str, value: int) -> None:
        """Durably persist *value* for *key* before returning.

        Raises StorageError if the write is not confirmed.
        """
        ...
