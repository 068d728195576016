"""Default mode: wire up the transcript components and serve HTTP."""

import logging
from typing import Any

from ..cache import TranscriptCache
from ..caption_source import CaptionSource
from ..config import AppSettings
from ..server import create_server
from ..title_resolver import TitleResolver
from ..transcript_fetcher import TranscriptFetcher

logger = logging.getLogger(__name__)


def build_transcript_fetcher(settings: AppSettings) -> TranscriptFetcher:
    """Construct the transcript fetcher and its collaborators from settings.

    Args:
        settings: Application settings.

    Returns:
        A ready-to-use transcript fetcher.
    """
    cache = TranscriptCache(
        ttl_seconds=settings.cache_ttl_seconds,
        max_entries=settings.cache_max_entries,
    )
    caption_source = CaptionSource(
        timeout_seconds=settings.caption_timeout_seconds,
        proxy_url=settings.proxy_url,
        cookies_path=settings.cookies_path,
    )
    title_resolver = TitleResolver(
        timeout_seconds=settings.title_timeout_seconds,
        proxy_url=settings.proxy_url,
    )
    return TranscriptFetcher(
        caption_source=caption_source,
        title_resolver=title_resolver,
        cache=cache,
        caption_timeout_seconds=settings.caption_timeout_seconds,
    )


async def default(settings: AppSettings, log_config: dict[str, Any] | None = None) -> None:
    """Run the HTTP server until it is stopped.

    Args:
        settings: Application settings.
        log_config: Logging configuration handed to uvicorn.
    """
    transcript_fetcher = build_transcript_fetcher(settings)

    async def shutdown() -> None:
        logger.info("Transcriptor shutdown completed.")

    server = create_server(
        settings,
        transcript_fetcher,
        log_config=log_config,
        shutdown_callback=shutdown,
    )

    logger.info(
        "Starting HTTP server.",
        extra={"host": settings.server_host, "port": settings.server_port},
    )
    await server.serve()
