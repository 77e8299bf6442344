"""Quotes API — FastAPI application entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map QuotesError → structured JSON responses
    - Store → QuoteService wired once per app in create_app(); no ambient singletons
    - Logging configured on startup via lifespan context manager

Design Decisions:
    - create_app() factory: tests inject their own service, uvicorn uses `app`
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from quotes_api import __version__
from quotes_api.api.error_handlers import register_error_handlers
from quotes_api.api.routes import health, quotes
from quotes_api.config import Settings, get_settings
from quotes_api.core.repository_protocols import QuoteUseCases
from quotes_api.infrastructure.memory_store import InMemoryQuoteStore
from quotes_api.infrastructure.observability import setup_logging
from quotes_api.services.quote_service import QuoteService

logger = logging.getLogger(__name__)


def create_app(
    service: QuoteUseCases | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the application with a fresh in-memory store unless a service is given."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Quotes API started")
        yield
        logger.info("Quotes API shutting down")

    app = FastAPI(title="Quotes API", version=__version__, lifespan=lifespan)
    if service is None:
        service = QuoteService(InMemoryQuoteStore())
    app.state.quote_service = service

    if settings.cors_origins:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.include_router(health.router)
    app.include_router(quotes.router)
    register_error_handlers(app)
    return app


app = create_app()


def run() -> None:
    """Serve `app` with uvicorn on the configured host/port."""
    settings = get_settings()
    logger.info(f"Starting server on {settings.host}:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port, log_level="info")


if __name__ == "__main__":
    run()
