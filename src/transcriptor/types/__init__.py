from .cache_entry import CacheEntry
from .error_kind import ErrorKind
from .subtitle import Subtitle
from .transcript_line import TranscriptLine
from .transcript_result import TITLE_NOT_FOUND, TranscriptResult

__all__ = [
    "TITLE_NOT_FOUND",
    "CacheEntry",
    "ErrorKind",
    "Subtitle",
    "TranscriptLine",
    "TranscriptResult",
]
