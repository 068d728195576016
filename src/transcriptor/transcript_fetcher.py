"""Transcript fetch orchestration.

Coordinates the cache, the oEmbed title lookup and the caption source for a
single request, and funnels every caption failure through the error
classifier before it leaves this module.
"""

import asyncio
from collections.abc import Callable, Sequence
import logging
from typing import Any, TypeVar

from .cache import TranscriptCache
from .caption_source import CaptionSource
from .error_classifier import classify
from .exceptions import CaptionSourceError, InvalidVideoUrlError
from .title_resolver import TitleResolver
from .types import Subtitle, TranscriptResult
from .video_id import extract_video_id

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _cache_key(url: str, languages: Sequence[str] | None) -> str:
    if not languages:
        return url
    return f"{url}#lang={','.join(languages)}"


class TranscriptFetcher:
    """Fetch transcripts for YouTube URLs with caching and error mapping.

    The title lookup and the caption download are independent and run
    concurrently. Only successful results are cached.

    Attributes:
        _caption_source: Synchronous caption backend, run in a worker thread.
        _title_resolver: Best-effort title lookup.
        _cache: Shared transcript cache.
        _caption_timeout_seconds: Upper bound on a single caption retrieval.
    """

    def __init__(
        self,
        caption_source: CaptionSource,
        title_resolver: TitleResolver,
        cache: TranscriptCache,
        caption_timeout_seconds: float = 20.0,
    ):
        self._caption_source = caption_source
        self._title_resolver = title_resolver
        self._cache = cache
        self._caption_timeout_seconds = caption_timeout_seconds
        logger.debug("TranscriptFetcher initialized.")

    async def _run_bounded(
        self, video_id: str, func: Callable[..., T], *args: Any
    ) -> T:
        """Run a blocking caption call in a worker thread under the timeout."""
        try:
            async with asyncio.timeout(self._caption_timeout_seconds):
                return await asyncio.to_thread(func, *args)
        except TimeoutError as e:
            raise CaptionSourceError(
                f"Timed out after {self._caption_timeout_seconds}s retrieving captions.",
                video_id=video_id,
            ) from e

    async def fetch_transcript(
        self,
        url: str,
        languages: Sequence[str] | None = None,
    ) -> TranscriptResult:
        """Fetch the title and caption lines for a YouTube URL.

        Args:
            url: The YouTube URL, used verbatim as the cache key.
            languages: Optional language codes in order of preference.

        Returns:
            The transcript, served from cache when a live entry exists.

        Raises:
            FetchError: When captions cannot be retrieved.
        """
        key = _cache_key(url, languages)
        log_params = {"url": url, "languages": list(languages or [])}

        entry = self._cache.get(key)
        if entry is not None:
            logger.debug("Transcript served from cache.", extra=log_params)
            return entry.result

        video_id = extract_video_id(url)
        if video_id is None:
            error = classify(InvalidVideoUrlError(url))
            logger.info(
                "Rejected URL without a video ID.",
                extra={**log_params, "error_kind": str(error.kind)},
            )
            raise error

        log_params["video_id"] = video_id
        logger.debug("Fetching transcript.", extra=log_params)

        title, lines_or_error = await asyncio.gather(
            self._title_resolver.resolve_title(url),
            self._run_bounded(
                video_id, self._caption_source.fetch_lines, video_id, languages
            ),
            return_exceptions=True,
        )

        if isinstance(lines_or_error, BaseException):
            if not isinstance(lines_or_error, Exception):
                raise lines_or_error
            error = classify(lines_or_error)
            logger.error(
                "Error fetching transcript.",
                extra={
                    **log_params,
                    "error_kind": str(error.kind),
                    "http_status": error.http_status,
                },
                exc_info=lines_or_error,
            )
            raise error from lines_or_error

        # TitleResolver degrades to a sentinel; an exception here is a bug.
        if isinstance(title, BaseException):
            raise title

        result = TranscriptResult(title=title, lines=tuple(lines_or_error))
        self._cache.put(key, result)
        logger.info(
            "Transcript fetched.",
            extra={**log_params, "line_count": len(result.lines)},
        )
        return result

    async def fetch_subtitles(self, video_id: str, lang: str = "en") -> list[Subtitle]:
        """Fetch subtitles for a bare video ID in one language, uncached.

        Args:
            video_id: The YouTube video ID.
            lang: Language code of the requested track.

        Returns:
            Subtitle rows in source order.

        Raises:
            FetchError: When the subtitles cannot be retrieved.
        """
        try:
            return await self._run_bounded(
                video_id, self._caption_source.fetch_subtitles, video_id, lang
            )
        except Exception as e:
            error = classify(e)
            logger.error(
                "Failed to fetch subtitles.",
                extra={
                    "video_id": video_id,
                    "lang": lang,
                    "error_kind": str(error.kind),
                },
                exc_info=e,
            )
            raise error from e
