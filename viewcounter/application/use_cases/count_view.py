"""CountViewUseCase — read or increment the counter for one host + path."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from viewcounter.application.actors.registry import ActorRegistry
from viewcounter.domain.errors import MethodNotSupportedError, MissingTenantError
from viewcounter.domain.policies.resource_path import validate_single_path
from viewcounter.domain.value_objects.enums import CounterMethod
from viewcounter.domain.value_objects.partition_key import PartitionKey

logger = logging.getLogger(__name__)

SUPPORTED_METHODS = frozenset(m.value for m in CounterMethod)


@dataclass
class ViewCount:
    """Result of a single counter request."""

    path: str
    views: int


class CountViewUseCase:
    """Validates a single request and forwards it to the owning actor."""

    def __init__(self, registry: ActorRegistry):
        self._registry = registry

    async def execute(self, method: str, host: str | None, path: str | None) -> ViewCount:
        """Handle GET (read) or POST (increment) for *host* + *path*.

        Validation order: tenant, path, method. Nothing reaches an actor
        unless all three pass.

        Raises:
            MissingTenantError: host is missing or blank.
            InvalidPathError: path is the root or the batch endpoint.
            MethodNotSupportedError: any verb other than GET/POST.
            StorageError: the store failed; the increment is not confirmed.
        """
        if not host:
            raise MissingTenantError()
        article_path = validate_single_path(path)
        method = method.upper()
        if method not in SUPPORTED_METHODS:
            raise MethodNotSupportedError(method)

        key = PartitionKey(host=host, path=article_path)
        views = await self._registry.actor_for(key).handle(method)
        logger.debug("%s %s -> %d", method, key, views)
        return ViewCount(path=article_path, views=views)
