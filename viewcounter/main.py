"""View counter — FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from viewcounter.adapters.persistence.database import engine
from viewcounter.config import settings
from viewcounter.infrastructure.api import middleware
from viewcounter.infrastructure.api.routes_counters import router as counters_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup and shutdown events."""
    if settings.storage_backend == "sql":
        try:
            async with engine.begin():
                pass  # Connection pool warmed up
            logger.info("Database connection established")
        except Exception as e:
            logger.warning("Database not available on startup: %s", e)
    yield
    await engine.dispose()


def create_app() -> FastAPI:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s | %(message)s",
    )

    app = FastAPI(
        title="viewcounter",
        description="Per-tenant page view counters with single-writer partitions",
        version="0.1.0",
        lifespan=lifespan,
        # The catch-all counter route would shadow the docs endpoints
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    middleware.install(app)
    app.include_router(counters_router)

    return app


app = create_app()
