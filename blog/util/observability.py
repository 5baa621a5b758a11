"""Observability configuration using Logfire.

Usage:
    import logfire

    logfire.info("Post created", post_id=str(post.id), tags=names)

    with logfire.span("post_service.update_post", post_id=str(post_id)):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from blog.config import Settings


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for observability.

    Token Configuration:
    - Set OBSERVABILITY__LOGFIRE_TOKEN to enable cloud sending
    - OBSERVABILITY__SEND_TO_LOGFIRE overrides the token-based default

    Args:
        settings: Application settings
    """
    if settings.observability.send_to_logfire is not None:
        send_to_logfire = settings.observability.send_to_logfire
    else:
        send_to_logfire = bool(settings.observability.logfire_token)

    config_kwargs = {
        "service_name": "blog-backend",
        "service_version": settings.git_sha,
        "environment": settings.environment,
        "send_to_logfire": send_to_logfire,
        "console": logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }

    if settings.observability.logfire_token:
        config_kwargs["token"] = settings.observability.logfire_token

    logfire.configure(**config_kwargs)

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        debug=settings.debug,
        send_to_logfire=send_to_logfire,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Instrument FastAPI application with Logfire.

    Args:
        app: FastAPI application instance
    """

    def _map_request_attributes(request, attributes):
        result = {**attributes}
        if hasattr(request, "method"):
            result["method"] = request.method
        if hasattr(request, "url"):
            result["path"] = request.url.path
        return result

    logfire.instrument_fastapi(
        app,
        request_attributes_mapper=_map_request_attributes,
    )
    logfire.info("FastAPI instrumented")


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Instrument SQLAlchemy engine with Logfire.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,
    )
    logfire.info("SQLAlchemy instrumented")
