"""Health check router for the Transcriptor HTTP server."""

from datetime import UTC, datetime
from typing import Literal

from fastapi import APIRouter, Request
from pydantic import BaseModel

from ... import __version__

router = APIRouter(prefix="/api")


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status of the service.
        timestamp: Current server timestamp.
        service: Name of the service.
        version: Version of the service.
    """

    status: Literal["healthy", "degraded", "unhealthy"]
    timestamp: datetime
    service: str
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Report whether the transcript fetcher is wired into the app.

    Args:
        request: Incoming FastAPI request.

    Returns:
        ``healthy`` when a fetcher is attached to ``app.state``, otherwise
        ``degraded``.
    """
    fetcher = getattr(request.app.state, "transcript_fetcher", None)
    return HealthResponse(
        status="healthy" if fetcher is not None else "degraded",
        timestamp=datetime.now(UTC),
        service="transcriptor",
        version=__version__,
    )
