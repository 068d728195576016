"""FastAPI application factory for the Transcriptor HTTP server.

This module provides the factory function for creating and configuring
the FastAPI application instance with its middleware and routers.
"""

from collections.abc import AsyncGenerator, Awaitable, Callable
from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from .. import __version__
from ..logging_config import new_context_id
from ..transcript_fetcher import TranscriptFetcher
from .routers import health, transcript

logger = logging.getLogger(__name__)


class LoggingMiddleware(BaseHTTPMiddleware):
    """Tag each request with a context id and log requests and responses."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and log details.

        Args:
            request: The incoming HTTP request.
            call_next: The next middleware or endpoint to call.

        Returns:
            The HTTP response.
        """
        context_id = new_context_id()
        logger.debug(
            "HTTP request received",
            extra={
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else None,
            },
        )

        response = await call_next(request)
        response.headers["X-Request-ID"] = context_id

        logger.debug(
            "HTTP response sent",
            extra={
                "method": request.method,
                "path": request.url.path,
                "status_code": response.status_code,
            },
        )

        return response


def create_app(
    transcript_fetcher: TranscriptFetcher,
    shutdown_callback: Callable[[], Awaitable[None]] | None = None,
) -> FastAPI:
    """Create and configure a FastAPI application instance.

    Args:
        transcript_fetcher: The transcript fetcher serving all endpoints.
        shutdown_callback: Optional callback run when the app shuts down.

    Returns:
        Configured FastAPI application instance.
    """

    @asynccontextmanager
    async def lifespan(_app: FastAPI) -> AsyncGenerator[None]:
        """Handle application lifespan events."""
        try:
            yield
        finally:
            if shutdown_callback:
                await shutdown_callback()

    app = FastAPI(
        title="Transcriptor",
        description="View and download YouTube caption transcripts",
        version=__version__,
        lifespan=lifespan,
    )

    app.add_middleware(LoggingMiddleware)

    app.state.transcript_fetcher = transcript_fetcher

    app.include_router(transcript.router, tags=["transcript"])
    app.include_router(health.router, tags=["health"])

    logger.debug("FastAPI application created successfully")

    return app
