"""In-memory CounterStore — process-local, for development and tests."""

from __future__ import annotations

from viewcounter.application.ports.counter_store import CounterStore


class InMemoryCounterStore(CounterStore):
    def __init__(self, initial: dict[str, int] | None = None):
        self._values: dict[str, int] = dict(initial or {})

    async def load(self, key: str) -> int | None:
        return self._values.get(key)

    async def store(self, key: str, value: int) -> None:
        self._values[key] = value

    def snapshot(self) -> dict[str, int]:
        return dict(self._values)
