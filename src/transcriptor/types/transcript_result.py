"""Title plus caption lines for one video."""

from dataclasses import dataclass

from .transcript_line import TranscriptLine

TITLE_NOT_FOUND = "Title not found"


@dataclass(frozen=True, slots=True)
class TranscriptResult:
    """A fetched transcript.

    Lines are kept in the order the caption source delivered them and are
    stored as a tuple, so a result handed to a caller cannot change in place.

    Attributes:
        title: Video title, or ``TITLE_NOT_FOUND`` when it could not be resolved.
        lines: Caption lines in chronological order.
    """

    title: str
    lines: tuple[TranscriptLine, ...]
