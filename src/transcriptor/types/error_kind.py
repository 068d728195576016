"""Taxonomy of transcript fetch failures."""

from enum import Enum


class ErrorKind(str, Enum):
    """Represent the category of a failed transcript fetch.

    Each kind maps to a fixed HTTP status in the error classifier.
    """

    TOO_MANY_REQUESTS = "TooManyRequests"
    VIDEO_UNAVAILABLE = "VideoUnavailable"
    CAPTIONS_DISABLED = "CaptionsDisabled"
    NO_CAPTIONS = "NoCaptions"
    LANGUAGE_UNAVAILABLE = "LanguageUnavailable"
    INVALID_URL = "InvalidUrl"
    UPSTREAM = "Upstream"
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value
