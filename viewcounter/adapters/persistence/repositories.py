"""SQLAlchemy implementation of the CounterStore port."""

from __future__ import annotations

import logging

from sqlalchemy import func, select
from sqlalchemy.dialects.postgresql import Insert, insert
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from viewcounter.adapters.persistence.models import ViewCounterModel
from viewcounter.application.ports.counter_store import CounterStore
from viewcounter.domain.errors import StorageError

logger = logging.getLogger(__name__)


def upsert_views(key: str, value: int) -> Insert:
    """INSERT ... ON CONFLICT (key) DO UPDATE — one write whether or not the row exists."""
    stmt = insert(ViewCounterModel).values(key=key, views=value)
    return stmt.on_conflict_do_update(
        index_elements=[ViewCounterModel.key],
        set_={"views": stmt.excluded.views, "updated_at": func.now()},
    )


class SqlCounterStore(CounterStore):
    """One short-lived session per call; each store() commits before returning.

    Actors outlive requests, so the store takes a session factory rather
    than a request-scoped session.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._sessions = session_factory

    async def load(self, key: str) -> int | None:
        try:
            async with self._sessions() as session:
                result = await session.execute(
                    select(ViewCounterModel.views).where(ViewCounterModel.key == key)
                )
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            logger.error("Failed to load counter %s: %s", key, e)
            raise StorageError(f"Failed to load counter {key}") from e

    async def store(self, key: str, value: int) -> None:
        try:
            async with self._sessions() as session:
                await session.execute(upsert_views(key, value))
                await session.commit()
        except SQLAlchemyError as e:
            logger.error("Failed to store counter %s=%d: %s", key, value, e)
            raise StorageError(f"Failed to store counter {key}") from e
