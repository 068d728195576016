"""Type-safe wrapper for the youtube-transcript-api library.

This module encapsulates all youtube-transcript-api interactions. Calls are
synchronous (the library is built on ``requests``); callers run them in a
worker thread. Library exceptions propagate unchanged so the error
classifier can map them to HTTP responses.
"""

from collections.abc import Sequence
from http.cookiejar import MozillaCookieJar
import logging
from pathlib import Path
from typing import Any

import requests
from youtube_transcript_api import YouTubeTranscriptApi
from youtube_transcript_api.proxies import GenericProxyConfig

from .exceptions import NoCaptionsError
from .http_headers import BROWSER_HEADERS
from .types import Subtitle, TranscriptLine

logger = logging.getLogger(__name__)


class _TimeoutSession(requests.Session):
    """A requests session that applies a default timeout to every request."""

    def __init__(self, timeout_seconds: float):
        super().__init__()
        self._timeout_seconds = timeout_seconds

    def request(self, *args: Any, **kwargs: Any) -> requests.Response:  # type: ignore[override]
        kwargs.setdefault("timeout", self._timeout_seconds)
        return super().request(*args, **kwargs)


class CaptionSource:
    """Retrieve caption tracks for YouTube videos.

    Attributes:
        _timeout_seconds: Per-request timeout for caption HTTP calls.
        _proxy_url: Optional proxy URL applied to all caption requests.
        _cookies_path: Optional Netscape-format cookies file.
    """

    def __init__(
        self,
        timeout_seconds: float = 20.0,
        proxy_url: str | None = None,
        cookies_path: Path | None = None,
    ):
        self._timeout_seconds = timeout_seconds
        self._proxy_url = proxy_url
        self._cookies_path = cookies_path
        logger.debug(
            "CaptionSource initialized.",
            extra={
                "timeout_seconds": timeout_seconds,
                "proxy_enabled": proxy_url is not None,
                "cookies_path": str(cookies_path) if cookies_path else None,
            },
        )

    def _create_api(self) -> YouTubeTranscriptApi:
        """Create a YouTubeTranscriptApi bound to a fresh, configured session."""
        session = _TimeoutSession(self._timeout_seconds)
        session.headers.update(BROWSER_HEADERS)
        if self._cookies_path is not None:
            cookie_jar = MozillaCookieJar(self._cookies_path)
            cookie_jar.load(ignore_discard=True, ignore_expires=True)
            session.cookies.update(cookie_jar)  # pyright: ignore[reportUnknownMemberType]

        proxy_config = None
        if self._proxy_url is not None:
            proxy_config = GenericProxyConfig(
                http_url=self._proxy_url,
                https_url=self._proxy_url,
            )
        return YouTubeTranscriptApi(proxy_config=proxy_config, http_client=session)

    def fetch_lines(
        self,
        video_id: str,
        languages: Sequence[str] | None = None,
    ) -> list[TranscriptLine]:
        """Fetch the caption lines of a video.

        Without ``languages`` a manually created track is preferred, falling
        back to the first auto-generated one.

        Args:
            video_id: The YouTube video ID.
            languages: Language codes in order of preference, or None.

        Returns:
            Caption lines in the order the source delivers them.

        Raises:
            NoCaptionsError: When the video has no caption tracks at all.
            youtube_transcript_api.CouldNotRetrieveTranscript: Any failure
                reported by the library (disabled, unavailable, blocked, ...).
            requests.RequestException: On network errors and timeouts.
        """
        log_params = {"video_id": video_id, "languages": list(languages or [])}
        logger.debug("Listing caption tracks.", extra=log_params)

        transcript_list = self._create_api().list(video_id)
        if languages:
            transcript = transcript_list.find_transcript(languages)
        else:
            transcript = next(iter(transcript_list), None)
            if transcript is None:
                raise NoCaptionsError(video_id)

        fetched = transcript.fetch()
        lines = [
            TranscriptLine(
                text=snippet.text,
                offset_seconds=max(snippet.start, 0.0),
                duration_seconds=snippet.duration,
            )
            for snippet in fetched
        ]
        logger.debug(
            "Caption track fetched.",
            extra={
                **log_params,
                "language_code": transcript.language_code,
                "is_generated": transcript.is_generated,
                "line_count": len(lines),
            },
        )
        return lines

    def fetch_subtitles(self, video_id: str, lang: str = "en") -> list[Subtitle]:
        """Fetch subtitles in a specific language with string-encoded timing.

        Args:
            video_id: The YouTube video ID.
            lang: Language code of the requested track.

        Returns:
            Subtitle rows in source order.

        Raises:
            youtube_transcript_api.CouldNotRetrieveTranscript: On library failures.
            requests.RequestException: On network errors and timeouts.
        """
        return [
            Subtitle.from_timing(line.text, line.offset_seconds, line.duration_seconds)
            for line in self.fetch_lines(video_id, [lang])
        ]
