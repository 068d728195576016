"""Subtitle row returned by the manual transcript endpoint."""

from dataclasses import dataclass


def format_seconds(value: float) -> str:
    """Render seconds as a compact decimal string (``1.0 -> "1"``)."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return text or "0"


@dataclass(frozen=True, slots=True)
class Subtitle:
    """A caption row with string-encoded timing.

    Attributes:
        text: Caption text.
        start: Start time in seconds, as a decimal string.
        dur: Duration in seconds, as a decimal string.
    """

    text: str
    start: str
    dur: str

    @classmethod
    def from_timing(cls, text: str, start: float, duration: float) -> "Subtitle":
        """Build a subtitle from numeric timing values."""
        return cls(text=text, start=format_seconds(start), dur=format_seconds(duration))
