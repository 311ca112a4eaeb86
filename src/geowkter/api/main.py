"""
Main FastAPI application instance.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from geowkter import __version__
from geowkter.api.convert import router as convert_router
from geowkter.api.error_handlers import register_error_handlers
from geowkter.api.middleware import (
    LoggingContextMiddleware,
    RequestCorrelationMiddleware,
)
from geowkter.core.config import settings
from geowkter.core.logging_config import setup_logging
from geowkter.utils.version import format_version_info

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Configure logging on startup and log shutdown."""
    setup_logging(
        log_level="DEBUG" if settings.environment == "development" else "INFO",
        json_logs=(settings.environment == "production"),
        enable_console=True,
    )
    logger.info(f"Starting GeoWKTer API v{__version__} in {settings.environment} mode")

    yield

    logger.info("Shutting down GeoWKTer API")


app = FastAPI(
    title="GeoWKTer API",
    description="Well-Known Text to GeoJSON conversion",
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Added in reverse order of execution
app.add_middleware(LoggingContextMiddleware)
app.add_middleware(RequestCorrelationMiddleware)

register_error_handlers(app)

app.include_router(convert_router, prefix=settings.api_v1_prefix)


@app.get("/")
async def root() -> dict[str, str]:
    """
    Root endpoint returning API information.

    Returns:
        dict[str, str]: API name, version and description.
    """
    return format_version_info()


@app.get("/health")
async def health_check() -> dict[str, str]:
    """
    Health check endpoint.

    Returns:
        dict[str, str]: Health status.
    """
    return {"status": "healthy"}
