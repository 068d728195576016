from .config import AppSettings
from .proxy import redact_proxy_url, validate_proxy_url

__all__ = [
    "AppSettings",
    "redact_proxy_url",
    "validate_proxy_url",
]
