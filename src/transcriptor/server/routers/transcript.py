"""Transcript endpoints.

- ``GET /transcript``: title and caption lines for a YouTube URL.
- ``GET /transcript/export``: the same transcript as a text or SubRip file.
- ``GET /manual-transcript``: subtitles for a bare video ID in one language.

Failures are always answered with a JSON body carrying an ``error`` summary
and, for classified fetch failures, a ``details`` field with the raw
upstream message.
"""

from enum import Enum
import logging
from typing import Annotated, Any

from fastapi import APIRouter, Query
from fastapi.responses import JSONResponse, PlainTextResponse
from pydantic import BaseModel, Field

from ...exceptions import FetchError
from ...formatting import filter_lines, to_plain_text, to_srt
from ...types import Subtitle, TranscriptResult
from ...video_id import extract_video_id, is_valid_video_id
from ..dependencies import TranscriptFetcherDep

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_URL_MESSAGE = "YouTube link is required"
MISSING_VIDEO_ID_MESSAGE = "videoID query parameter is required"
INVALID_VIDEO_ID_MESSAGE = "videoID must be an 11-character YouTube video ID"


class ExportFormat(str, Enum):
    """Supported transcript export formats."""

    TXT = "txt"
    SRT = "srt"


class TranscriptLineModel(BaseModel):
    """One caption segment in an HTTP response.

    Attributes:
        text: Caption text.
        offset: Start time in seconds.
        duration: Display duration in seconds.
    """

    text: str
    offset: float
    duration: float


class TranscriptResponse(BaseModel):
    """Response model for ``GET /transcript``.

    Attributes:
        title: Video title, or "Title not found".
        transcript: Caption lines in chronological order.
    """

    title: str
    transcript: list[TranscriptLineModel]

    @classmethod
    def from_result(cls, result: TranscriptResult) -> "TranscriptResponse":
        """Build the response from a fetched transcript."""
        return cls(
            title=result.title,
            transcript=[
                TranscriptLineModel(
                    text=line.text,
                    offset=line.offset_seconds,
                    duration=line.duration_seconds,
                )
                for line in result.lines
            ],
        )


class SubtitleModel(BaseModel):
    """Subtitle row with string-encoded timing, in seconds."""

    text: str
    start: str
    dur: str

    @classmethod
    def from_subtitle(cls, subtitle: Subtitle) -> "SubtitleModel":
        """Build the model from a fetched subtitle."""
        return cls(text=subtitle.text, start=subtitle.start, dur=subtitle.dur)


class ErrorResponse(BaseModel):
    """Error body returned by every transcript endpoint.

    Attributes:
        error: Stable, human readable summary.
        details: Raw upstream message, for debugging.
    """

    error: str
    details: str | None = Field(default=None)


def _error_response(
    status_code: int, error: str, details: str | None = None
) -> JSONResponse:
    body = ErrorResponse(error=error, details=details)
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(exclude_none=True),
    )


_FETCH_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status: {"model": ErrorResponse} for status in (400, 404, 429, 500)
}


def _fetch_error_response(error: FetchError) -> JSONResponse:
    return _error_response(error.http_status, error.message, error.details)


def _parse_languages(lang: str | None) -> list[str] | None:
    if lang is None:
        return None
    languages = [code.strip() for code in lang.split(",") if code.strip()]
    return languages or None


@router.get(
    "/transcript",
    response_model=TranscriptResponse,
    responses=_FETCH_ERROR_RESPONSES,
)
async def get_transcript(
    transcript_fetcher: TranscriptFetcherDep,
    url: Annotated[str | None, Query(description="YouTube video link")] = None,
    lang: Annotated[
        str | None,
        Query(description="Comma separated language codes in order of preference"),
    ] = None,
) -> TranscriptResponse | JSONResponse:
    """Fetch the title and caption lines of a YouTube video.

    Args:
        transcript_fetcher: Injected transcript fetcher.
        url: The YouTube link.
        lang: Optional preferred languages.

    Returns:
        The transcript, or a JSON error response.
    """
    if url is None or not url.strip():
        return _error_response(400, MISSING_URL_MESSAGE)

    try:
        result = await transcript_fetcher.fetch_transcript(
            url, _parse_languages(lang)
        )
    except FetchError as e:
        return _fetch_error_response(e)

    return TranscriptResponse.from_result(result)


@router.get(
    "/transcript/export",
    response_class=PlainTextResponse,
    response_model=None,
    responses=_FETCH_ERROR_RESPONSES,
)
async def export_transcript(
    transcript_fetcher: TranscriptFetcherDep,
    url: Annotated[str | None, Query(description="YouTube video link")] = None,
    export_format: Annotated[
        ExportFormat, Query(alias="format", description="Export format")
    ] = ExportFormat.TXT,
    timestamps: Annotated[
        bool, Query(description="Prefix text lines with timestamps")
    ] = False,
    q: Annotated[str, Query(description="Only export lines containing this text")] = "",
    lang: Annotated[
        str | None,
        Query(description="Comma separated language codes in order of preference"),
    ] = None,
) -> PlainTextResponse | JSONResponse:
    """Download a transcript as a plain text or SubRip file.

    Args:
        transcript_fetcher: Injected transcript fetcher.
        url: The YouTube link.
        export_format: ``txt`` or ``srt``.
        timestamps: Include timestamps in ``txt`` output.
        q: Optional case-insensitive filter on line text.
        lang: Optional preferred languages.

    Returns:
        The rendered file, or a JSON error response.
    """
    if url is None or not url.strip():
        return _error_response(400, MISSING_URL_MESSAGE)

    try:
        result = await transcript_fetcher.fetch_transcript(
            url, _parse_languages(lang)
        )
    except FetchError as e:
        return _fetch_error_response(e)

    lines = filter_lines(result.lines, q)
    match export_format:
        case ExportFormat.SRT:
            content = to_srt(lines)
        case ExportFormat.TXT:
            content = to_plain_text(result, include_timestamps=timestamps, lines=lines)

    filename = f"{extract_video_id(url) or 'transcript'}.{export_format.value}"
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )


@router.get(
    "/manual-transcript",
    response_model=list[SubtitleModel],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def get_manual_transcript(
    transcript_fetcher: TranscriptFetcherDep,
    video_id: Annotated[
        str | None, Query(alias="videoID", description="11-character YouTube video ID")
    ] = None,
    lang: Annotated[str, Query(description="Language code")] = "en",
) -> list[SubtitleModel] | JSONResponse:
    """Fetch subtitles for a video ID in a single language.

    Args:
        transcript_fetcher: Injected transcript fetcher.
        video_id: The YouTube video ID.
        lang: Language code, defaults to English.

    Returns:
        Subtitle rows, or a JSON error response.
    """
    if video_id is None or not video_id.strip():
        return _error_response(400, MISSING_VIDEO_ID_MESSAGE)
    video_id = video_id.strip()
    if not is_valid_video_id(video_id):
        return _error_response(400, INVALID_VIDEO_ID_MESSAGE)

    try:
        subtitles = await transcript_fetcher.fetch_subtitles(video_id, lang or "en")
    except FetchError as e:
        return _error_response(500, e.details)

    return [SubtitleModel.from_subtitle(subtitle) for subtitle in subtitles]
