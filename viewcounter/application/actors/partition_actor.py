"""PartitionActor — single-writer owner of one counter."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from viewcounter.application.ports.counter_store import CounterStore
from viewcounter.domain.entities.counter import Counter
from viewcounter.domain.errors import MethodNotSupportedError
from viewcounter.domain.value_objects.enums import CounterMethod
from viewcounter.domain.value_objects.partition_key import PartitionKey

logger = logging.getLogger(__name__)


class PartitionActor:
    """Serializes every operation on one partition key.

    The actor keeps no copy of the value between operations: each call
    re-reads the store, so a recreated actor picks up exactly where the
    previous one left off.
    """

    def __init__(self, key: PartitionKey, store: CounterStore):
        self.key = key
        self._store = store
        self._lock = asyncio.Lock()
        self._pending = 0

    @property
    def is_idle(self) -> bool:
        """True when no operation is running or queued on this actor."""
        return self._pending == 0

    async def get(self) -> int:
        async with self._serialized():
            counter = await self._load()
            return counter.views

    async def increment(self) -> int:
        async with self._serialized():
            counter = (await self._load()).incremented()
            await self._store.store(str(self.key), counter.views)
            logger.debug("Counter %s incremented to %d", self.key, counter.views)
            return counter.views

    async def handle(self, method: str) -> int:
        """Dispatch a request verb: GET reads, POST increments."""
        if method == CounterMethod.GET:
            return await self.get()
        if method == CounterMethod.POST:
            return await self.increment()
        raise MethodNotSupportedError(method)

    async def _load(self) -> Counter:
        value = await self._store.load(str(self.key))
        return Counter(key=self.key, views=value or 0)

    @asynccontextmanager
    async def _serialized(self) -> AsyncIterator[None]:
        # Pending is raised before waiting on the lock so the registry never
        # treats a queued actor as idle.
        self._pending += 1
        try:
            async with self._lock:
                yield
        finally:
            self._pending -= 1
