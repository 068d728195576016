"""In-memory, TTL-bounded transcript cache.

Entries are keyed by the exact source URL string; no normalization is
performed, so two spellings of the same video are cached separately.
Expiry is lazy: stale entries are dropped when read, never by a sweeper.
"""

from collections import OrderedDict
import logging
import time

from .types import CacheEntry, TranscriptResult

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 15 * 60
DEFAULT_MAX_ENTRIES = 1024


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


class TranscriptCache:
    """Least-recently-used transcript cache with a fixed time-to-live.

    A single instance is shared by all requests of the serving process.
    All operations are synchronous and run on the event loop thread, so
    no locking is needed. Same-key writes are last-write-wins.

    Attributes:
        ttl_ms: Entry lifetime in milliseconds.
        max_entries: Capacity bound, or None for an unbounded cache.
    """

    def __init__(
        self,
        ttl_seconds: float = DEFAULT_TTL_SECONDS,
        max_entries: int | None = DEFAULT_MAX_ENTRIES,
    ):
        if ttl_seconds <= 0:
            raise ValueError(f"ttl_seconds must be positive, got {ttl_seconds}")
        if max_entries is not None and max_entries < 1:
            raise ValueError(f"max_entries must be >= 1, got {max_entries}")
        self.ttl_ms = int(ttl_seconds * 1000)
        self.max_entries = max_entries
        self._entries: OrderedDict[str, CacheEntry] = OrderedDict()
        logger.debug(
            "TranscriptCache initialized.",
            extra={"ttl_seconds": ttl_seconds, "max_entries": max_entries},
        )

    def __len__(self) -> int:
        return len(self._entries)

    def get(self, key: str, now_ms: int | None = None) -> CacheEntry | None:
        """Return the live entry for ``key``, or None when absent or stale.

        Args:
            key: Exact source URL.
            now_ms: Current time in epoch milliseconds; defaults to the wall clock.

        Returns:
            The cached entry, or None.
        """
        entry = self._entries.get(key)
        if entry is None:
            return None

        now = _now_ms() if now_ms is None else now_ms
        if now - entry.fetched_at_ms >= self.ttl_ms:
            del self._entries[key]
            logger.debug(
                "Cache entry expired.",
                extra={"key": key, "age_ms": now - entry.fetched_at_ms},
            )
            return None

        self._entries.move_to_end(key)
        return entry

    def put(
        self,
        key: str,
        result: TranscriptResult,
        now_ms: int | None = None,
    ) -> CacheEntry:
        """Store ``result`` under ``key``, replacing any previous entry.

        Evicts the least recently used entry when the cache is over capacity.

        Args:
            key: Exact source URL.
            result: Transcript to cache.
            now_ms: Storage time in epoch milliseconds; defaults to the wall clock.

        Returns:
            The stored entry.
        """
        entry = CacheEntry(
            key=key,
            result=result,
            fetched_at_ms=_now_ms() if now_ms is None else now_ms,
        )
        self._entries[key] = entry
        self._entries.move_to_end(key)

        if self.max_entries is not None:
            while len(self._entries) > self.max_entries:
                evicted_key, _ = self._entries.popitem(last=False)
                logger.debug("Cache entry evicted.", extra={"key": evicted_key})

        return entry

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()
