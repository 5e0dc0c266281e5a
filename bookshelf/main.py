"""Bookshelf API — FastAPI application entry point.

Invariants:
    - Exactly one BookStore per application, created here and shared via app.state
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map BookshelfError → structured JSON responses
    - CORS configured from settings (not hardcoded)

Design Decisions:
    - create_app() factory: tests build isolated apps with their own store;
      module-level `app` serves `uvicorn bookshelf.main:app`
    - Lifespan over @app.on_event: FastAPI recommended pattern
    - HTTPS redirect is opt-in (force_https) so plain-http local runs work
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.httpsredirect import HTTPSRedirectMiddleware

from bookshelf.api.error_handlers import register_error_handlers
from bookshelf.api.routes import books, health
from bookshelf.config import Settings, get_settings
from bookshelf.core.book_store import BookStore
from bookshelf.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


def build_store(settings: Settings) -> BookStore:
    """Construct the process-wide store, seeded unless disabled."""
    if settings.seed_books:
        return BookStore.with_default_seed()
    return BookStore()


def create_app(
    store: BookStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the FastAPI app around a single shared BookStore."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"{settings.app_name} started with {len(app.state.book_store)} books",
        )
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title="Bookshelf API", version=settings.app_version, lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.book_store = store if store is not None else build_store(settings)

    if settings.force_https:
        app.add_middleware(HTTPSRedirectMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origin_regex=settings.cors_origin_regex,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(books.router)

    register_error_handlers(app)
    return app


app = create_app()
