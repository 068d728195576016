"""Proxy URL validation and redaction helpers."""

from urllib.parse import urlsplit, urlunsplit

SUPPORTED_PROXY_SCHEMES = frozenset({"http", "https"})


def validate_proxy_url(value: str) -> str:
    """Validate a ``scheme://[user:pass@]host:port`` proxy URL.

    Args:
        value: Proxy URL to validate.

    Returns:
        The stripped proxy URL.

    Raises:
        ValueError: If the scheme is unsupported or the host or port is missing.
    """
    candidate = value.strip()
    parts = urlsplit(candidate)
    if parts.scheme not in SUPPORTED_PROXY_SCHEMES:
        raise ValueError(
            f"Unsupported proxy scheme '{parts.scheme}'. "
            f"Expected one of: {', '.join(sorted(SUPPORTED_PROXY_SCHEMES))}."
        )
    if not parts.hostname:
        raise ValueError("Proxy URL must include a host.")
    try:
        port = parts.port
    except ValueError as e:
        raise ValueError("Proxy URL has an invalid port.") from e
    if port is None:
        raise ValueError("Proxy URL must include a port.")
    return candidate


def redact_proxy_url(value: str | None) -> str | None:
    """Mask the credentials of a proxy URL so it can be logged."""
    if value is None:
        return None
    parts = urlsplit(value)
    if parts.username is None and parts.password is None:
        return value
    netloc = f"***:***@{parts.hostname}"
    if parts.port is not None:
        netloc += f":{parts.port}"
    return urlunsplit(parts._replace(netloc=netloc))
