"""Cached transcript record."""

from dataclasses import dataclass

from .transcript_result import TranscriptResult


@dataclass(frozen=True, slots=True)
class CacheEntry:
    """A transcript stored in the cache.

    Attributes:
        key: Exact source URL the result was fetched for.
        result: The cached transcript.
        fetched_at_ms: Epoch milliseconds at which the result was stored.
    """

    key: str
    result: TranscriptResult
    fetched_at_ms: int
