"""Map transcript fetch failures to a small, HTTP-aware taxonomy.

Rules are evaluated in order and the first match wins. Every resulting
:class:`FetchError` keeps the raw message of the original error in
``details``, even when the public message is generic.
"""

from collections.abc import Callable
from dataclasses import dataclass
import re

import requests
from youtube_transcript_api import (
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
)
from youtube_transcript_api._errors import (
    CouldNotRetrieveTranscript,
    InvalidVideoId,
    YouTubeRequestFailed,
)

from .exceptions import (
    CaptionSourceError,
    FetchError,
    InvalidVideoUrlError,
    NoCaptionsError,
)
from .types import ErrorKind

INVALID_VIDEO_ID_MARKER = "Impossible to retrieve Youtube video ID"
UNKNOWN_DETAILS = "An unknown error occurred."
GENERIC_MESSAGE = "Failed to fetch transcript. The server encountered an issue."

_RECOGNIZED_ERRORS = (
    CouldNotRetrieveTranscript,
    CaptionSourceError,
    requests.RequestException,
    TimeoutError,
)


@dataclass(frozen=True)
class _Rule:
    kind: ErrorKind
    http_status: int
    matches: Callable[[BaseException, str], bool]
    message: Callable[[str], str]


_HTTP_STATUS_PREFIX = re.compile(r"^(\d{3})\b")
TOO_MANY_REQUESTS_STATUS = 429


def _request_failure_status(error: YouTubeRequestFailed) -> int | None:
    # The originating HTTPError is the implicit context when raised by the library.
    http_error = error.__cause__ or error.__context__
    if isinstance(http_error, requests.HTTPError) and http_error.response is not None:
        return http_error.response.status_code
    match = _HTTP_STATUS_PREFIX.match(error.reason)
    return int(match.group(1)) if match else None


def _is_rate_limited(error: BaseException, details: str) -> bool:
    if isinstance(error, RequestBlocked):
        return True
    if isinstance(error, YouTubeRequestFailed):
        return (
            _request_failure_status(error) == TOO_MANY_REQUESTS_STATUS
            or "Too Many Requests" in error.reason
        )
    return False


def _is_invalid_url(error: BaseException, details: str) -> bool:
    if isinstance(error, InvalidVideoId | InvalidVideoUrlError):
        return True
    return isinstance(error, _RECOGNIZED_ERRORS) and INVALID_VIDEO_ID_MARKER in details


_RULES: tuple[_Rule, ...] = (
    _Rule(
        ErrorKind.TOO_MANY_REQUESTS,
        429,
        _is_rate_limited,
        lambda _: "Could not process the request due to too many requests "
        "to YouTube. Please try again later.",
    ),
    _Rule(
        ErrorKind.VIDEO_UNAVAILABLE,
        404,
        lambda e, _: isinstance(e, VideoUnavailable),
        lambda _: "The video is unavailable or does not exist.",
    ),
    _Rule(
        ErrorKind.CAPTIONS_DISABLED,
        400,
        lambda e, _: isinstance(e, TranscriptsDisabled),
        lambda _: "Transcripts are disabled for this video.",
    ),
    _Rule(
        ErrorKind.NO_CAPTIONS,
        404,
        lambda e, _: isinstance(e, NoCaptionsError),
        lambda _: "No transcripts are available for this video.",
    ),
    _Rule(
        ErrorKind.LANGUAGE_UNAVAILABLE,
        404,
        lambda e, _: isinstance(e, NoTranscriptFound),
        lambda d: "Transcripts are not available in the requested language. "
        f"Available: {d}",
    ),
    _Rule(
        ErrorKind.INVALID_URL,
        400,
        _is_invalid_url,
        lambda _: "Invalid YouTube link provided.",
    ),
    _Rule(
        ErrorKind.UPSTREAM,
        500,
        lambda e, _: isinstance(e, _RECOGNIZED_ERRORS),
        lambda d: f"A problem occurred while fetching the transcript: {d}",
    ),
)


def classify(error: BaseException) -> FetchError:
    """Classify a failure raised while fetching a transcript.

    Args:
        error: The exception raised by the caption source or fetch pipeline.

    Returns:
        The classified error. A ``FetchError`` input is returned unchanged.
    """
    if isinstance(error, FetchError):
        return error

    details = str(error) or UNKNOWN_DETAILS
    for rule in _RULES:
        if rule.matches(error, details):
            return FetchError(
                kind=rule.kind,
                message=rule.message(details),
                http_status=rule.http_status,
                details=details,
            )

    return FetchError(
        kind=ErrorKind.UNKNOWN,
        message=GENERIC_MESSAGE,
        http_status=500,
        details=details,
    )
