"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI

from modcomment.config import Settings
from modcomment.domain.repository import CommentRepository
from modcomment.interface.api.routes import comments, health
from modcomment.interface.error import register_error_handlers
from modcomment.util.di.container import create_container, setup_di
from modcomment.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Provision the schema on startup and release the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container

    settings = await container.get(Settings)
    # Settings are read once, by the container
    app.version = settings.version

    if settings.database.sync_schema:
        repository = await container.get(CommentRepository)
        with logfire.span("ensure_schema"):
            await repository.ensure_schema()

    yield

    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.
    In tests, configure in conftest.py.

    Args:
        container: DI container to use; the production container by default

    Returns:
        Application serving the comment RPC operations
    """
    app_instance = FastAPI(
        title="Mod Comment Service",
        description="Create, update, delete and list comments on mods",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of RPC calls
    instrument_fastapi(app_instance)

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance
