"""HTTP server module for Transcriptor.

This module provides the FastAPI-based HTTP server serving the transcript
endpoints.
"""

from .app import create_app
from .server import create_server

__all__ = ["create_app", "create_server"]
