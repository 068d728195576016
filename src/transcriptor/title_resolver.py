"""Best-effort video title lookup via YouTube's oEmbed endpoint."""

import asyncio
import logging

import httpx

from .http_headers import BROWSER_HEADERS
from .types import TITLE_NOT_FOUND

logger = logging.getLogger(__name__)

OEMBED_ENDPOINT = "https://www.youtube.com/oembed"


class TitleResolver:
    """Resolve display titles for YouTube URLs.

    Title lookup is an enrichment step: every failure mode (non-2xx status,
    transport error, timeout, malformed body) degrades to ``TITLE_NOT_FOUND``
    instead of raising.

    Attributes:
        _timeout_seconds: Overall budget for the lookup, body read included.
        _timeout: Per-operation timeout handed to httpx.
        _proxy_url: Optional proxy for the request.
        _endpoint: oEmbed endpoint URL.
    """

    def __init__(
        self,
        timeout_seconds: float = 5.0,
        proxy_url: str | None = None,
        endpoint: str = OEMBED_ENDPOINT,
    ):
        self._timeout_seconds = timeout_seconds
        self._timeout = httpx.Timeout(timeout_seconds)
        self._proxy_url = proxy_url
        self._endpoint = endpoint
        logger.debug(
            "TitleResolver initialized.",
            extra={"timeout_seconds": timeout_seconds, "endpoint": endpoint},
        )

    async def resolve_title(self, url: str) -> str:
        """Fetch the title of the video at ``url``.

        Args:
            url: The YouTube URL as provided by the caller.

        Returns:
            The video title, or ``TITLE_NOT_FOUND``.
        """
        log_params = {"url": url}
        params = {"url": url, "format": "json"}

        try:
            async with (
                asyncio.timeout(self._timeout_seconds),
                httpx.AsyncClient(
                    headers=BROWSER_HEADERS,
                    timeout=self._timeout,
                    proxy=self._proxy_url,
                ) as client,
            ):
                response = await client.get(self._endpoint, params=params)
        except httpx.HTTPError as e:
            logger.warning(
                "Error fetching video title from oEmbed endpoint.",
                extra=log_params,
                exc_info=e,
            )
            return TITLE_NOT_FOUND
        except TimeoutError as e:
            logger.warning(
                "Timed out fetching video title from oEmbed endpoint.",
                extra={**log_params, "timeout_seconds": self._timeout_seconds},
                exc_info=e,
            )
            return TITLE_NOT_FOUND

        if not response.is_success:
            logger.warning(
                "Failed to fetch video title from oEmbed endpoint.",
                extra={
                    **log_params,
                    "status_code": response.status_code,
                    "body": response.text[:200],
                },
            )
            return TITLE_NOT_FOUND

        try:
            data = response.json()
        except ValueError as e:
            logger.warning(
                "oEmbed endpoint returned malformed JSON.",
                extra=log_params,
                exc_info=e,
            )
            return TITLE_NOT_FOUND

        title = data.get("title") if isinstance(data, dict) else None
        if not isinstance(title, str) or not title:
            logger.warning("oEmbed response carried no title.", extra=log_params)
            return TITLE_NOT_FOUND

        return title
