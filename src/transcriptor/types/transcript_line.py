"""Single timed caption segment."""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TranscriptLine:
    """One caption segment of a video's subtitle track.

    Attributes:
        text: Caption text.
        offset_seconds: Start time relative to the start of the video.
        duration_seconds: How long the segment is displayed.
    """

    text: str
    offset_seconds: float
    duration_seconds: float

    def __post_init__(self) -> None:
        if self.offset_seconds < 0:
            raise ValueError(
                f"offset_seconds must be >= 0, got {self.offset_seconds}"
            )
