"""Application configuration management for Transcriptor.

Settings are read from environment variables and command-line flags via
pydantic-settings. There is no configuration file.
"""

import logging
from pathlib import Path
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .proxy import validate_proxy_url

logger = logging.getLogger(__name__)


class AppSettings(BaseSettings):
    """Application settings.

    Attributes:
        log_format: Format for application logs (human or json).
        log_level: Logging level for the application.
        log_include_stacktrace: Include full stack traces in error logs.
        server_host: Host address for the HTTP server to bind to.
        server_port: Port number for the HTTP server to listen on.
        trusted_proxies: Reverse proxies whose forwarding headers are honored.
        proxy_url: Outbound proxy applied to every YouTube request.
        cookies_path: Path to a cookies.txt file for caption requests.
        cache_ttl_seconds: Lifetime of a cached transcript.
        cache_max_entries: Maximum number of cached transcripts.
        title_timeout_seconds: Timeout for the oEmbed title lookup.
        caption_timeout_seconds: Timeout for a caption retrieval.
    """

    log_format: Literal["human", "json"] = Field(
        default="json",
        validation_alias="LOG_FORMAT",
        description="Format for application logs ('human' or 'json').",
    )
    log_level: str = Field(
        default="INFO",
        validation_alias="LOG_LEVEL",
        description="Logging level for the application (e.g., DEBUG, INFO, WARNING, ERROR). Case-insensitive.",
    )
    log_include_stacktrace: bool = Field(
        default=False,
        validation_alias="LOG_INCLUDE_STACKTRACE",
        description="Include full stack traces in error logs (true/false).",
    )

    # Server configuration
    server_host: str = Field(
        default="0.0.0.0",
        validation_alias="SERVER_HOST",
        description="Host address for the HTTP server to bind to.",
    )
    server_port: int = Field(
        default=8025,
        validation_alias="SERVER_PORT",
        description="Port number for the HTTP server to listen on.",
    )
    trusted_proxies: list[str] | None = Field(
        default=None,
        validation_alias="TRUSTED_PROXIES",
        description="Trusted reverse proxy IPs or networks. When set, enables proxy header processing.",
    )

    # Outbound requests
    proxy_url: str | None = Field(
        default=None,
        validation_alias="PROXY_URL",
        description="Optional proxy for all YouTube requests, as scheme://[user:pass@]host:port.",
    )
    cookies_path: Path | None = Field(
        default=None,
        validation_alias="COOKIES_PATH",
        description="Optional path to a Netscape cookies.txt file sent with caption requests.",
    )
    title_timeout_seconds: float = Field(
        default=5.0,
        gt=0,
        validation_alias="TITLE_TIMEOUT_SECONDS",
        description="Timeout for the oEmbed title lookup.",
    )
    caption_timeout_seconds: float = Field(
        default=20.0,
        gt=0,
        validation_alias="CAPTION_TIMEOUT_SECONDS",
        description="Timeout for retrieving a caption track.",
    )

    # Cache
    cache_ttl_seconds: float = Field(
        default=900,
        gt=0,
        validation_alias="CACHE_TTL_SECONDS",
        description="How long a fetched transcript is served from cache.",
    )
    cache_max_entries: int | None = Field(
        default=1024,
        ge=1,
        validation_alias="CACHE_MAX_ENTRIES",
        description="Maximum cached transcripts; least recently used entries are evicted. Null for unbounded.",
    )

    model_config = SettingsConfigDict(
        env_prefix="",
        cli_parse_args=True,
        cli_ignore_unknown_args=True,
        cli_kebab_case=True,
        extra="ignore",
    )

    @field_validator("proxy_url", mode="before")
    @classmethod
    def parse_proxy_url(cls, v: Any) -> str | None:
        """Validate the proxy URL, treating blank values as unset.

        Args:
            v: Value to parse, can be string or None.

        Returns:
            The validated proxy URL, or None if not provided.

        Raises:
            ValueError: If the proxy URL is malformed.
            TypeError: If the value is not a string or None.
        """
        match v:
            case None:
                return None
            case str() as s if not s.strip():
                return None
            case str() as s:
                return validate_proxy_url(s)
            case _:
                raise TypeError(f"proxy_url must be a string, got {type(v).__name__}")
