"""HTTP server initialization for Transcriptor.

This module builds the uvicorn server around the FastAPI application.
"""

from collections.abc import Awaitable, Callable
import logging
from typing import Any

import uvicorn

from ..config import AppSettings
from ..logging_config import LOGGING_CONFIG
from ..transcript_fetcher import TranscriptFetcher
from .app import create_app

logger = logging.getLogger(__name__)


def create_server(
    settings: AppSettings,
    transcript_fetcher: TranscriptFetcher,
    log_config: dict[str, Any] | None = None,
    shutdown_callback: Callable[[], Awaitable[None]] | None = None,
) -> uvicorn.Server:
    """Create and configure a uvicorn HTTP server with the FastAPI app.

    Args:
        settings: Application settings containing server configuration.
        transcript_fetcher: The transcript fetcher serving all endpoints.
        log_config: Logging configuration to hand to uvicorn; defaults to
            the package's base configuration.
        shutdown_callback: Optional callback to execute during shutdown.

    Returns:
        Configured uvicorn server ready to run.
    """
    logger.debug("Creating FastAPI application.")
    app = create_app(
        transcript_fetcher=transcript_fetcher,
        shutdown_callback=shutdown_callback,
    )

    proxy_headers = settings.trusted_proxies is not None
    forwarded_allow_ips = (settings.trusted_proxies or ["*"]) if proxy_headers else None

    config = uvicorn.Config(
        app=app,
        host=settings.server_host,
        port=settings.server_port,
        log_config=log_config or LOGGING_CONFIG,
        access_log=False,  # LoggingMiddleware logs requests
        ws="none",
        lifespan="on",
        proxy_headers=proxy_headers,
        forwarded_allow_ips=forwarded_allow_ips,
    )
    server = uvicorn.Server(config)

    logger.debug(
        "HTTP server configured.",
        extra={
            "host": settings.server_host,
            "port": settings.server_port,
        },
    )

    return server
