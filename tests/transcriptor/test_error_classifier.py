"""Tests for mapping fetch failures to FetchError."""

import pytest
import requests
from youtube_transcript_api import (
    AgeRestricted,
    IpBlocked,
    NoTranscriptFound,
    RequestBlocked,
    TranscriptsDisabled,
    VideoUnavailable,
)
from youtube_transcript_api._errors import InvalidVideoId, YouTubeRequestFailed

from transcriptor.error_classifier import GENERIC_MESSAGE, classify
from transcriptor.exceptions import (
    CaptionSourceError,
    FetchError,
    InvalidVideoUrlError,
    NoCaptionsError,
)
from transcriptor.types import ErrorKind

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.mark.unit
@pytest.mark.parametrize(
    ("error", "kind", "status"),
    [
        (RequestBlocked(VIDEO_ID), ErrorKind.TOO_MANY_REQUESTS, 429),
        (IpBlocked(VIDEO_ID), ErrorKind.TOO_MANY_REQUESTS, 429),
        (VideoUnavailable(VIDEO_ID), ErrorKind.VIDEO_UNAVAILABLE, 404),
        (TranscriptsDisabled(VIDEO_ID), ErrorKind.CAPTIONS_DISABLED, 400),
        (NoCaptionsError(VIDEO_ID), ErrorKind.NO_CAPTIONS, 404),
        (
            NoTranscriptFound(VIDEO_ID, ["de"], 'en ("English")'),
            ErrorKind.LANGUAGE_UNAVAILABLE,
            404,
        ),
        (InvalidVideoId(VIDEO_ID), ErrorKind.INVALID_URL, 400),
        (InvalidVideoUrlError("not a url"), ErrorKind.INVALID_URL, 400),
        (AgeRestricted(VIDEO_ID), ErrorKind.UPSTREAM, 500),
        (requests.ConnectTimeout("connect timed out"), ErrorKind.UPSTREAM, 500),
        (CaptionSourceError("Timed out", video_id=VIDEO_ID), ErrorKind.UPSTREAM, 500),
        (RuntimeError("boom"), ErrorKind.UNKNOWN, 500),
    ],
)
def test_classify_kinds_and_statuses(error: Exception, kind: ErrorKind, status: int):
    """Each failure maps to its documented kind and HTTP status."""
    result = classify(error)

    assert result.kind == kind
    assert result.http_status == status
    assert result.details == str(error)


@pytest.mark.unit
def test_classify_rate_limited_request_failure():
    """A failed YouTube request with HTTP 429 counts as rate limiting."""
    http_error = requests.HTTPError("429 Client Error: Too Many Requests for url")
    error = YouTubeRequestFailed(VIDEO_ID, http_error)

    result = classify(error)

    assert result.kind == ErrorKind.TOO_MANY_REQUESTS
    assert result.http_status == 429
    assert "too many requests" in result.message.lower()


@pytest.mark.unit
def test_classify_other_request_failure_is_upstream():
    """A non-429 failed YouTube request is a generic upstream error."""
    http_error = requests.HTTPError("503 Server Error: Service Unavailable")
    error = YouTubeRequestFailed(VIDEO_ID, http_error)

    result = classify(error)

    assert result.kind == ErrorKind.UPSTREAM
    assert result.http_status == 500
    assert result.message.startswith("A problem occurred while fetching the transcript")
    assert "503 Server Error" in result.details


@pytest.mark.unit
def test_classify_request_failure_ignores_429_in_video_id():
    """A 503 for a video whose ID contains "429" is not rate limiting."""
    video_id = "ab429cdefgh"
    http_error = requests.HTTPError(
        "503 Server Error: Service Unavailable for url: "
        f"https://www.youtube.com/watch?v={video_id}"
    )
    error = YouTubeRequestFailed(video_id, http_error)
    assert "429" in str(error)

    result = classify(error)

    assert result.kind == ErrorKind.UPSTREAM
    assert result.http_status == 500


@pytest.mark.unit
def test_classify_request_failure_uses_response_status():
    """The status of the originating HTTP response decides rate limiting."""
    response = requests.Response()
    response.status_code = 429
    try:
        try:
            raise requests.HTTPError("Client Error", response=response)
        except requests.HTTPError as http_error:
            raise YouTubeRequestFailed(VIDEO_ID, http_error)  # noqa: B904
    except YouTubeRequestFailed as e:
        error = e

    result = classify(error)

    assert result.kind == ErrorKind.TOO_MANY_REQUESTS
    assert result.http_status == 429


@pytest.mark.unit
def test_classify_invalid_url_by_message():
    """A recognized error whose message names an unparseable URL is InvalidUrl."""
    error = CaptionSourceError("Impossible to retrieve Youtube video ID.")

    result = classify(error)

    assert result.kind == ErrorKind.INVALID_URL
    assert result.http_status == 400
    assert result.message == "Invalid YouTube link provided."
    assert result.details == "Impossible to retrieve Youtube video ID."


@pytest.mark.unit
def test_classify_invalid_url_message_ignored_for_unrecognized_errors():
    """Message matching only applies to errors from the caption pipeline."""
    result = classify(ValueError("Impossible to retrieve Youtube video ID."))

    assert result.kind == ErrorKind.UNKNOWN


@pytest.mark.unit
def test_classify_captions_disabled_keeps_original_message():
    """Public message is stable while details carry the upstream text."""
    error = TranscriptsDisabled(VIDEO_ID)

    result = classify(error)

    assert "disabled" in result.message
    assert result.details == str(error)
    assert VIDEO_ID in result.details


@pytest.mark.unit
def test_classify_language_unavailable_includes_detail():
    """The language message carries the available-languages detail."""
    error = NoTranscriptFound(VIDEO_ID, ["de"], 'en ("English")')

    result = classify(error)

    assert result.message.startswith(
        "Transcripts are not available in the requested language. Available:"
    )
    assert 'en ("English")' in result.message


@pytest.mark.unit
def test_classify_unknown_uses_generic_message():
    """Unrecognized errors get the generic fallback message."""
    result = classify(KeyError())

    assert result.message == GENERIC_MESSAGE
    assert result.details == "An unknown error occurred."


@pytest.mark.unit
def test_classify_timeout_error_is_upstream():
    """Bare timeouts surface as upstream failures, not unknown ones."""
    result = classify(TimeoutError())

    assert result.kind == ErrorKind.UPSTREAM
    assert result.details == "An unknown error occurred."


@pytest.mark.unit
def test_classify_returns_fetch_error_unchanged():
    """Already classified errors pass through."""
    error = FetchError(ErrorKind.NO_CAPTIONS, "msg", 404, "details")

    assert classify(error) is error
