"""Dependency provider functions for FastAPI endpoints.

Collaborators are attached to ``app.state`` by the application factory and
retrieved here for use via the ``Depends`` system.
"""

from typing import Annotated

from fastapi import Depends, Request

from transcriptor.transcript_fetcher import TranscriptFetcher


def get_transcript_fetcher(request: Request) -> TranscriptFetcher:
    """Return the shared :class:`TranscriptFetcher` from application state.

    Args:
        request: Incoming FastAPI request.

    Returns:
        Transcript fetcher stored on ``app.state``.
    """
    return request.app.state.transcript_fetcher


TranscriptFetcherDep = Annotated[TranscriptFetcher, Depends(get_transcript_fetcher)]
