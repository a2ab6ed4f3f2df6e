"""FastAPI application for the pcos-companion API."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .. import __version__
from ..config import Settings, get_settings
from ..logging_config import configure_logging
from ..store import Storage
from .routers import content, daily_logs, mental_health, period_logs, quotes, users

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    logger.info("pcos-companion API started")
    yield
    # Nothing to release; the store lives in memory


def create_app(storage: Storage | None = None, settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        storage: Store to serve from. A new one is built if omitted.
        settings: Runtime settings. Read from the environment if omitted.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title="pcos-companion",
        description="Personal PCOS health-tracking API",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=False,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store shared by every router
    app.state.storage = storage or Storage(seed=settings.seed_content)

    app.include_router(users.router)
    app.include_router(period_logs.router)
    app.include_router(daily_logs.router)
    app.include_router(mental_health.router)
    app.include_router(content.router)
    app.include_router(quotes.router)

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy", "version": __version__}

    return app
