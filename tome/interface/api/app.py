"""FastAPI application."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi.middleware import SlowAPIMiddleware

from tome.config import Settings
from tome.domain.service import CommentService
from tome.interface.api.handlers import register_exception_handlers
from tome.interface.api.rate_limit import limiter
from tome.interface.api.routes import comments, health, info
from tome.util.di.container import create_container, setup_di
from tome.util.observability import instrument_fastapi


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Initialize the comment store on startup and release it on shutdown."""
    container: AsyncContainer = app.state.dishka_container

    async with container() as request_container:
        comment_service = await request_container.get(CommentService)
        await comment_service.initialize()

    yield

    # Closing the container disposes the database engine
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Build the comments API.

    Configure logfire first (scripts/start_app.py does) so request spans
    are exported.

    Args:
        container: DI container; the production container when omitted
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Tome Comments API",
        description="Threaded comments for character pages, served to the browser extension",
        version="0.1.0",
        lifespan=lifespan,
    )

    instrument_fastapi(app_instance)

    # Rate limiting: default limit on every route, stricter on comment creation
    limiter.enabled = settings.rate_limit.enabled
    app_instance.state.limiter = limiter
    app_instance.add_middleware(SlowAPIMiddleware)

    # Extension pages have per-install origins, matched by scheme
    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors.allowed_origins,
        allow_origin_regex=settings.cors.extension_origin_regex,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["Content-Type", "X-Nickname"],
    )

    register_exception_handlers(app_instance)

    setup_di(app_instance, container or create_container())

    app_instance.include_router(info.router)
    app_instance.include_router(health.router)
    app_instance.include_router(comments.router)

    return app_instance


# Entry point for uvicorn
app = create_app()
