"""FastAPI application."""

import asyncio
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager, suppress

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from blog.config import Settings
from blog.interface.api.errors import register_error_handlers
from blog.interface.api.routes import comments, health, posts, tags
from blog.interface.maintenance import run_orphan_tag_purge
from blog.util.di.container import create_container, setup_di
from blog.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Start the orphan tag purge loop and close the container on shutdown."""
    container: AsyncContainer = app.state.dishka_container
    settings = await container.get(Settings)

    purge_task: asyncio.Task | None = None
    if settings.maintenance.purge_orphan_tags:
        purge_task = asyncio.create_task(
            run_orphan_tag_purge(
                container, settings.maintenance.orphan_tag_purge_interval_seconds
            )
        )

    yield

    if purge_task is not None:
        purge_task.cancel()
        with suppress(asyncio.CancelledError):
            await purge_task
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use, the production container if None
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Blog API",
        description="Backend API for a blog with tagged posts, comments and search",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,
    )

    setup_di(app_instance, container or create_container())

    register_error_handlers(app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(tags.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
app = create_app()
