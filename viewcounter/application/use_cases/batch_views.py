"""BatchViewsUseCase — concurrent best-effort read of many counters."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from viewcounter.application.actors.registry import ActorRegistry
from viewcounter.domain.errors import MissingTenantError
from viewcounter.domain.policies.resource_path import validate_batch_paths
from viewcounter.domain.value_objects.partition_key import PartitionKey

logger = logging.getLogger(__name__)


class BatchViewsUseCase:
    """Fan out one GET per path and collect the results."""

    def __init__(self, registry: ActorRegistry):
        self._registry = registry

    async def execute(self, host: str | None, body: Any) -> dict[str, int | None]:
        """Return ``{normalized_path: views}`` for every path in *body*.

        The body is validated as a whole before any actor is contacted.
        After that every lookup runs concurrently and a failing path maps
        to None without affecting the others.

        Raises:
            MissingTenantError: host is missing or blank.
            MalformedBatchError: body is not a list of non-blank strings.
        """
        if not host:
            raise MissingTenantError()
        paths = validate_batch_paths(body)
        if not paths:
            return {}

        outcomes = await asyncio.gather(
            *(self._lookup(host, path) for path in paths),
            return_exceptions=True,
        )

        results: dict[str, int | None] = {}
        for path, outcome in zip(paths, outcomes):
            if isinstance(outcome, BaseException):
                logger.error("Error fetching views for %s%s", host, path, exc_info=outcome)
                results[path] = None
            else:
                results[path] = outcome

        failed = sum(1 for v in results.values() if v is None)
        logger.info("Batch for %s: %d paths, %d failed", host, len(results), failed)
        return results

    async def _lookup(self, host: str, path: str) -> int:
        key = PartitionKey(host=host, path=path)
        return await self._registry.actor_for(key).get()
