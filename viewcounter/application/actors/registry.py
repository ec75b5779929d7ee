"""ActorRegistry — lazy, idempotent table of partition key → PartitionActor."""

from __future__ import annotations

import logging
from collections import OrderedDict

from viewcounter.application.actors.partition_actor import PartitionActor
from viewcounter.application.ports.counter_store import CounterStore
from viewcounter.domain.value_objects.partition_key import PartitionKey

logger = logging.getLogger(__name__)


class ActorRegistry:
    """Resolves the single live actor for each partition key.

    ``actor_for`` never awaits, so lookup and insert cannot interleave with
    another request on the event loop: concurrent first requests for a key
    always share one actor.

    When more than *max_resident* actors are held, least-recently-used idle
    actors are dropped. Busy actors are never dropped, otherwise a second
    actor (and a second lock) could exist for the same key.
    """

    def __init__(self, store: CounterStore, max_resident: int | None = None):
        if max_resident is not None and max_resident < 1:
            raise ValueError("max_resident must be at least 1")
        self._store = store
        self._max_resident = max_resident
        self._actors: OrderedDict[str, PartitionActor] = OrderedDict()

    def __len__(self) -> int:
        return len(self._actors)

    def __contains__(self, key: PartitionKey) -> bool:
        return str(key) in self._actors

    def actor_for(self, key: PartitionKey) -> PartitionActor:
        name = str(key)
        actor = self._actors.get(name)
        if actor is None:
            actor = PartitionActor(key, self._store)
            self._actors[name] = actor
            logger.debug("Created actor for %s", name)
            self._evict_idle(keep=name)
        else:
            self._actors.move_to_end(name)
        return actor

    def _evict_idle(self, keep: str) -> None:
        if self._max_resident is None:
            return
        overflow = len(self._actors) - self._max_resident
        if overflow <= 0:
            return
        victims = [
            name for name, actor in self._actors.items()
            if name != keep and actor.is_idle
        ][:overflow]
        for name in victims:
            del self._actors[name]
        if victims:
            logger.debug("Evicted %d idle actors (%d resident)", len(victims), len(self._actors))
