"""Tests for transcript data types."""

from dataclasses import FrozenInstanceError

import pytest

from transcriptor.types import Subtitle, TranscriptLine, TranscriptResult


@pytest.mark.unit
def test_transcript_line_rejects_negative_offset():
    """Offsets before the start of the video are invalid."""
    with pytest.raises(ValueError):
        TranscriptLine(text="x", offset_seconds=-0.1, duration_seconds=1.0)


@pytest.mark.unit
def test_transcript_result_is_immutable():
    """Results cannot be changed in place once returned."""
    result = TranscriptResult(
        title="t",
        lines=(TranscriptLine(text="x", offset_seconds=0.0, duration_seconds=1.0),),
    )

    with pytest.raises(FrozenInstanceError):
        result.title = "other"  # type: ignore[misc]
    assert isinstance(result.lines, tuple)


@pytest.mark.unit
@pytest.mark.parametrize(
    ("start", "duration", "expected_start", "expected_dur"),
    [
        (0.24, 2.5, "0.24", "2.5"),
        (1.0, 3.0, "1", "3"),
        (0.0, 0.0, "0", "0"),
        (12.3456, 1.2, "12.346", "1.2"),
    ],
)
def test_subtitle_from_timing(
    start: float, duration: float, expected_start: str, expected_dur: str
):
    """Timing is rendered as compact decimal strings."""
    subtitle = Subtitle.from_timing("hi", start, duration)

    assert subtitle == Subtitle(text="hi", start=expected_start, dur=expected_dur)
