"""Custom exceptions for the Transcriptor application.

This module defines the exception hierarchy used throughout the service.
Caption source failures are raised with structured context and later mapped
to a :class:`FetchError` by the error classifier before they reach HTTP
clients.
"""

from .types.error_kind import ErrorKind


class TranscriptorError(Exception):
    """Base class for application-specific errors."""


class ConfigLoadError(TranscriptorError):
    """Raised when application settings cannot be loaded.

    Attributes:
        setting: Name of the setting that failed to load, if known.
    """

    def __init__(
        self,
        message: str,
        setting: str | None = None,
    ):
        super().__init__(message)
        self.setting = setting


class CaptionSourceError(TranscriptorError):
    """Base class for errors raised while retrieving captions.

    Attributes:
        video_id: The YouTube video ID associated with the error.
        url: The source URL associated with the error.
    """

    def __init__(
        self,
        message: str,
        video_id: str | None = None,
        url: str | None = None,
    ):
        super().__init__(message)
        self.video_id = video_id
        self.url = url


class InvalidVideoUrlError(CaptionSourceError):
    """Raised when no video ID can be extracted from a URL."""

    def __init__(self, url: str):
        super().__init__("Impossible to retrieve Youtube video ID.", url=url)


class NoCaptionsError(CaptionSourceError):
    """Raised when a video has no caption tracks of any kind."""

    def __init__(self, video_id: str):
        super().__init__(
            f"No transcripts are available for video {video_id}.",
            video_id=video_id,
        )


class FetchError(TranscriptorError):
    """Classified transcript fetch failure, safe to return to HTTP clients.

    Attributes:
        kind: Category of the failure.
        message: Public, human readable summary.
        http_status: HTTP status code to answer with.
        details: Raw message of the underlying error, for diagnostics.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        http_status: int,
        details: str,
    ):
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.http_status = http_status
        self.details = details
