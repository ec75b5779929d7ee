"""FastAPI dependency injection — wires adapters into use cases."""

from __future__ import annotations

import logging

from fastapi import Depends, Request

from viewcounter.adapters.persistence.database import async_session_factory
from viewcounter.adapters.persistence.memory import InMemoryCounterStore
from viewcounter.adapters.persistence.repositories import SqlCounterStore
from viewcounter.application.actors.registry import ActorRegistry
from viewcounter.application.ports.counter_store import CounterStore
from viewcounter.application.use_cases.batch_views import BatchViewsUseCase
from viewcounter.application.use_cases.count_view import CountViewUseCase
from viewcounter.config import settings
from viewcounter.domain.errors import MissingTenantError

logger = logging.getLogger(__name__)


def _build_store() -> CounterStore:
    if settings.storage_backend == "memory":
        logger.info("Using in-memory counter store (values are lost on restart)")
        return InMemoryCounterStore()
    return SqlCounterStore(async_session_factory)


# One registry per process: per-key serialization only holds if every
# request for a key goes through the same actor table.
_registry = ActorRegistry(_build_store(), max_resident=settings.max_resident_actors)


def get_registry() -> ActorRegistry:
    return _registry


def get_tenant_host(request: Request) -> str:
    host = request.headers.get("host")
    logger.debug("Request Host: %s", host)
    if not host:
        raise MissingTenantError()
    return host


def get_count_view_uc(registry: ActorRegistry = Depends(get_registry)) -> CountViewUseCase:
    return CountViewUseCase(registry=registry)


def get_batch_views_uc(registry: ActorRegistry = Depends(get_registry)) -> BatchViewsUseCase:
    return BatchViewsUseCase(registry=registry)
