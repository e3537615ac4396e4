"""Entry point for the FastAPI application.

This module constructs the FastAPI app, includes the routers and sets
up startup and shutdown events. Run it with uvicorn directly::

    uvicorn app.api.main:app --port 8081

or through the ``receipt-points`` console script, which reads the host
and port from ``app.core.config``.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.api.endpoints.health import router as health_router
from app.api.error_handlers import (
    generic_exception_handler,
    http_exception_handler,
    validation_exception_handler,
)
from app.api.routes.receipts import router as receipts_router
from app.core.config import settings
from app.core.observability import init_sentry
from app.services.store import ReceiptStore

# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifecycle."""
    # Startup
    logger.info("Starting up %s (%s)...", settings.PROJECT_NAME, settings.ENVIRONMENT)
    if init_sentry("api"):
        logger.info("Sentry SDK initialized (api)")
    yield
    # Shutdown
    logger.info("Shutting down with %d stored receipt(s)...", len(app.state.receipt_store))


def create_app(store: ReceiptStore | None = None) -> FastAPI:
    """Build the application around a single receipt store."""
    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        lifespan=lifespan,
    )
    app.state.receipt_store = store if store is not None else ReceiptStore()

    # Register custom exception handlers
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    # Include routers
    app.include_router(receipts_router)
    app.include_router(health_router, tags=["health"])
    return app


app = create_app()


def run() -> None:
    """Serve the application on the configured host and port."""
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
