"""YouTube video ID extraction from arbitrary URL strings."""

import re

VIDEO_ID_LENGTH = 11

# Group 2 captures everything after the marker up to the next '#', '&' or '?'.
_VIDEO_URL_PATTERN = re.compile(
    r"^.*(youtu\.be/|v/|u/\w/|embed/|watch\?v=|&v=)([^#&?]*).*"
)
_VIDEO_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{11}$")


def extract_video_id(url: str) -> str | None:
    """Extract the 11-character video ID from a YouTube URL.

    Recognizes ``youtu.be/<id>``, ``/v/<id>``, ``/u/<n>/<id>``,
    ``/embed/<id>``, ``watch?v=<id>`` and ``&v=<id>`` shapes. A matched
    candidate of any other length is rejected.

    Args:
        url: Any string, usually a YouTube link.

    Returns:
        The video ID, or None when no valid ID is present.
    """
    match = _VIDEO_URL_PATTERN.match(url.strip())
    if match is None:
        return None
    candidate = match.group(2)
    if len(candidate) != VIDEO_ID_LENGTH:
        return None
    return candidate


def is_valid_video_id(value: str) -> bool:
    """Check that a bare value looks like a YouTube video ID."""
    return _VIDEO_ID_PATTERN.match(value) is not None
