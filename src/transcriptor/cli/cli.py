"""Command-line interface entry point for Transcriptor.

Loads settings, configures logging, then hands over to the server mode.
"""

import logging

from pydantic import ValidationError

from ..config import AppSettings, redact_proxy_url
from ..exceptions import ConfigLoadError
from ..logging_config import setup_logging
from .default import default


def load_settings() -> AppSettings:
    """Load application settings from the environment and CLI flags.

    Returns:
        The loaded settings.

    Raises:
        ConfigLoadError: If any setting fails validation.
    """
    try:
        return AppSettings()  # type: ignore
    except ValidationError as e:
        first = e.errors()[0] if e.errors() else None
        setting = ".".join(str(p) for p in first["loc"]) if first else None
        raise ConfigLoadError("Invalid application settings.", setting=setting) from e


async def main_cli():
    """Initialize logging and run the HTTP server."""
    settings = load_settings()

    log_config = setup_logging(
        log_format_type=settings.log_format,
        app_log_level_name=settings.log_level,
        include_stacktrace=settings.log_include_stacktrace,
    )

    logger = logging.getLogger(__name__)
    logger.debug(
        "Application settings loaded.",
        extra={
            "log_format": settings.log_format,
            "log_level": settings.log_level,
            "proxy_url": redact_proxy_url(settings.proxy_url),
            "cache_ttl_seconds": settings.cache_ttl_seconds,
            "cache_max_entries": settings.cache_max_entries,
        },
    )

    await default(settings, log_config)

    logger.debug("main_cli execution finished.")
