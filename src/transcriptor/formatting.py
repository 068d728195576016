"""Plain-text rendering, search and export helpers for transcripts.

All helpers are read-only with respect to their inputs.
"""

from collections.abc import Iterable, Sequence

from .types import TranscriptLine, TranscriptResult


def format_timestamp(seconds: float) -> str:
    """Format an offset as ``M:SS``, or ``H:MM:SS`` from one hour on."""
    total = int(max(seconds, 0.0))
    hours, remainder = divmod(total, 3600)
    minutes, secs = divmod(remainder, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"


def _format_srt_timestamp(seconds: float) -> str:
    total_ms = int(round(max(seconds, 0.0) * 1000))
    hours, remainder = divmod(total_ms, 3_600_000)
    minutes, remainder = divmod(remainder, 60_000)
    secs, millis = divmod(remainder, 1000)
    return f"{hours:02d}:{minutes:02d}:{secs:02d},{millis:03d}"


def filter_lines(lines: Iterable[TranscriptLine], query: str) -> list[TranscriptLine]:
    """Return the lines whose text contains ``query``, case-insensitively.

    An empty or blank query returns every line. The result is always a new
    list.
    """
    needle = query.strip().casefold()
    if not needle:
        return list(lines)
    return [line for line in lines if needle in line.text.casefold()]


def to_plain_text(
    result: TranscriptResult,
    include_timestamps: bool = False,
    lines: Sequence[TranscriptLine] | None = None,
) -> str:
    """Render a transcript as plain text with the title on the first line.

    Args:
        result: The transcript to render.
        include_timestamps: Prefix each line with ``[M:SS]``.
        lines: Subset of lines to render instead of ``result.lines``.

    Returns:
        The rendered text, newline terminated.
    """
    selected = result.lines if lines is None else lines
    rendered = [result.title, ""]
    for line in selected:
        if include_timestamps:
            rendered.append(f"[{format_timestamp(line.offset_seconds)}] {line.text}")
        else:
            rendered.append(line.text)
    return "\n".join(rendered) + "\n"


def to_srt(lines: Sequence[TranscriptLine]) -> str:
    """Render caption lines as a SubRip (``.srt``) document."""
    blocks: list[str] = []
    for index, line in enumerate(lines, start=1):
        start = _format_srt_timestamp(line.offset_seconds)
        end = _format_srt_timestamp(line.offset_seconds + line.duration_seconds)
        blocks.append(f"{index}\n{start} --> {end}\n{line.text}\n")
    return "\n".join(blocks)
