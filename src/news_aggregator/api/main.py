"""
FastAPI application for the News Aggregator.

Exposes the aggregator's two public operations over HTTP:
- /api/v1/news: every category, newest first
- /api/v1/news/{category}: top articles for one category
"""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any

import msgspec
from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from starlette.status import HTTP_500_INTERNAL_SERVER_ERROR

from ..core.config import get_settings
from ..services import NewsAggregator
from .errors import APIError, api_error_handler
from .routers import news

logger = logging.getLogger(__name__)


class MSGSpecResponse(Response):
    """Custom response class using msgspec for JSON serialization."""

    media_type = "application/json"

    def render(self, content: Any) -> bytes:
        if content is None:
            return b""
        return msgspec.json.encode(content)


def create_app(aggregator: NewsAggregator | None = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        aggregator: Aggregator to serve (built from settings at startup if
                    not provided)

    Returns:
        Configured FastAPI application instance
    """
    settings = get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting {settings.app_name}...")
        app.state.aggregator = aggregator or NewsAggregator(settings=settings)
        try:
            yield
        finally:
            await app.state.aggregator.close()
            logger.info(f"{settings.app_name} shutdown complete")

    app = FastAPI(
        title=settings.app_name,
        description="Merged, recency-ordered news from NewsAPI and The Guardian",
        version=settings.app_version,
        default_response_class=MSGSpecResponse,
        lifespan=lifespan,
    )

    app.add_exception_handler(APIError, api_error_handler)

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        """Handle unexpected exceptions with consistent format."""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)
        return JSONResponse(
            status_code=HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": {
                    "code": "INTERNAL_ERROR",
                    "message": "An internal error occurred",
                    "detail": str(exc) if settings.debug else None,
                }
            },
        )

    @app.get("/health", tags=["health"])
    async def health_check():
        """Basic health check endpoint."""
        return {"status": "healthy", "timestamp": datetime.now(tz=timezone.utc).isoformat()}

    app.include_router(news.router, prefix="/api/v1/news", tags=["news"])

    return app


# Create app instance
app = create_app()
