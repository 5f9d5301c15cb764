"""Logfire setup for the comments service.

Spans and structured events are emitted with the module-level logfire API
throughout the code base, e.g.::

    with logfire.span("comment_service.delete_comment", comment_id=comment_id):
        logfire.info("Comment deleted", removed=removed)

This module only wires logfire up: where telemetry goes, and which
frameworks (FastAPI, SQLAlchemy) are traced automatically.
"""

from typing import Any

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from tome.config import ObservabilitySettings, Settings

SERVICE_NAME = "tome-comments"
SERVICE_VERSION = "0.1.0"


def _should_send(observability: ObservabilitySettings) -> bool:
    """Explicit flag wins; otherwise ship telemetry only when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure logfire once, before the app is created.

    Without ``OBSERVABILITY__LOGFIRE_TOKEN`` everything stays on the console.

    Args:
        settings: Application settings
    """
    observability = settings.observability
    send = _should_send(observability)

    options: dict[str, Any] = {
        "service_name": SERVICE_NAME,
        "service_version": SERVICE_VERSION,
        "environment": settings.environment,
        "send_to_logfire": send,
        "console": logfire.ConsoleOptions(
            colors="auto",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    }
    if observability.logfire_token:
        options["token"] = observability.logfire_token

    logfire.configure(**options)
    logfire.info(
        "Logfire configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def _request_attributes(request: Any, attributes: dict[str, Any]) -> dict[str, Any]:
    """Tag request spans with route and caller address for abuse tracing."""
    extra = dict(attributes)
    url = getattr(request, "url", None)
    if url is not None:
        extra["path"] = url.path
    client = getattr(request, "client", None)
    if client:
        extra["client_host"] = client.host
    return extra


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request handled by ``app``."""
    logfire.instrument_fastapi(app, request_attributes_mapper=_request_attributes)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace every statement run through ``engine``."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)
