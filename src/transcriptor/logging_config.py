"""Logging configuration and formatters for Transcriptor.

Supports a human-readable format that appends ``extra`` fields as
``key:value`` pairs and a JSON format via python-json-logger. Records are
tagged with a per-request context id, and chained exception messages are
collected into a short "semantic trace" used when stack traces are off.
"""

from contextvars import ContextVar
import copy
import json
import logging
from logging.config import dictConfig
import sys
from typing import Any, Literal
import uuid

APP_LOGGER_NAME = "transcriptor"

_original_log_record_factory = logging.getLogRecordFactory()
_context_id_var: ContextVar[str | None] = ContextVar("context_id", default=None)
_should_include_stacktrace: bool = False

# Attributes every LogRecord carries; anything else came in through `extra`.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {
    "asctime",
    "message",
    "context_id",
    "taskName",
    "exc_custom_attrs",
    "semantic_trace",
}


def custom_record_factory(*args: Any, **kwargs: Any) -> logging.LogRecord:
    """Create a log record enriched with details of the logged exception.

    Walks the ``__cause__``/``__context__`` chain of ``exc_info``, collecting
    public exception attributes (e.g. ``video_id``) and each exception's
    message.

    Args:
        *args: Arguments for the original record factory.
        **kwargs: Keyword arguments for the original record factory.

    Returns:
        The log record.
    """
    record = _original_log_record_factory(*args, **kwargs)
    if not (record.exc_info and record.exc_info[1]):
        return record

    attrs: dict[str, Any] = {}
    trace: list[str] = []
    current: BaseException | None = record.exc_info[1]
    seen: set[int] = set()
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        for name, value in vars(current).items():
            if not name.startswith("_"):
                attrs.setdefault(name, value)
        trace.append(str(current) or type(current).__name__)
        current = current.__cause__ or current.__context__

    if attrs:
        record.exc_custom_attrs = attrs
    record.semantic_trace = trace
    return record


def set_context_id(context_id: str) -> None:
    """Bind a context id to the current task; it is attached to every log record."""
    _context_id_var.set(context_id)


def new_context_id() -> str:
    """Generate and bind a fresh short context id.

    Returns:
        The new context id.
    """
    context_id = uuid.uuid4().hex[:12]
    set_context_id(context_id)
    return context_id


class ContextIdFilter(logging.Filter):
    """Inject the current context id into log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        context_id = _context_id_var.get()
        if context_id is not None:
            record.context_id = context_id
        return True


class HumanReadableExtrasFormatter(logging.Formatter):
    """Human-readable formatter that appends ``extra`` fields.

    Output looks like::

        2024-01-01 12:00:00 INFO [transcriptor.cache] CtxID:ab12 key:value - Message
    """

    @staticmethod
    def _format_value(value: Any) -> str:
        if isinstance(value, dict | list | tuple):
            try:
                return json.dumps(value, sort_keys=True, separators=(", ", ":"))
            except TypeError:
                return f"[Unserializable Value: {type(value)}]"  # type: ignore
        return str(value)

    def _extras(self, record: logging.LogRecord) -> dict[str, Any]:
        extras: dict[str, Any] = {}
        exc_attrs = getattr(record, "exc_custom_attrs", None)
        if isinstance(exc_attrs, dict):
            extras.update(exc_attrs)  # type: ignore
        for key, value in record.__dict__.items():
            if key not in _STANDARD_ATTRS and not key.startswith("_"):
                extras[key] = value
        return extras

    def format(self, record: logging.LogRecord) -> str:
        """Format a record as a single human-readable line plus error details.

        Args:
            record: The log record to format.

        Returns:
            Formatted log message string.
        """
        parts = [
            self.formatTime(record, self.datefmt),
            record.levelname,
            f"[{record.name}]",
        ]
        context_id = getattr(record, "context_id", None)
        if context_id is not None:
            parts.append(f"CtxID:{context_id}")
        parts.extend(
            f"{key}:{self._format_value(value)}"
            for key, value in self._extras(record).items()
        )
        parts.append(f"- {record.getMessage()}".rstrip())
        output = " ".join(parts)

        if record.exc_info:
            if _should_include_stacktrace:
                if not record.exc_text:
                    record.exc_text = self.formatException(record.exc_info)
                output += "\n" + record.exc_text
            else:
                trace: list[str] = getattr(record, "semantic_trace", None) or []
                for i, message in enumerate(trace):
                    prefix = "Error" if i == 0 else "  Caused by"
                    output += f"\n{prefix}: {message}"

        if record.stack_info:
            output += "\n" + self.formatStack(record.stack_info)
        return output


LOGGING_CONFIG: dict[str, Any] = {
    "version": 1,
    "disable_existing_loggers": False,
    "filters": {
        "context_id_filter": {
            "()": ContextIdFilter,
        },
    },
    "formatters": {
        "human_readable_formatter": {
            "()": HumanReadableExtrasFormatter,
            "datefmt": "%Y-%m-%d %H:%M:%S",
        },
        "json_formatter": {
            "()": "pythonjsonlogger.json.JsonFormatter",
            "format": "%(asctime)s %(levelname)s %(name)s %(message)s",
        },
    },
    "handlers": {
        "console_handler": {
            "class": "logging.StreamHandler",
            "formatter": "human_readable_formatter",
            "stream": "ext://sys.stdout",
            "filters": ["context_id_filter"],
        },
    },
    "loggers": {
        APP_LOGGER_NAME: {
            "handlers": ["console_handler"],
            "level": "INFO",
            "propagate": False,
        },
        "uvicorn.error": {
            "handlers": ["console_handler"],
            "level": "INFO",
            "propagate": False,
        },
    },
    "root": {
        "handlers": ["console_handler"],
        "level": "WARNING",
    },
}


def build_logging_config(
    log_format_type: Literal["human", "json"],
    app_log_level_name: str,
) -> dict[str, Any]:
    """Return a copy of ``LOGGING_CONFIG`` adjusted for the given settings.

    Args:
        log_format_type: Format for logs ('human' or 'json').
        app_log_level_name: Logging level name; invalid names fall back to INFO.

    Returns:
        A ``dictConfig``-compatible mapping.
    """
    config = copy.deepcopy(LOGGING_CONFIG)

    level = app_log_level_name.upper()
    if not isinstance(getattr(logging, level, None), int):
        print(
            f"Warning: Invalid LOG_LEVEL '{app_log_level_name}'. Defaulting to INFO.",
            file=sys.stderr,
        )
        level = "INFO"
    config["loggers"][APP_LOGGER_NAME]["level"] = level

    if log_format_type.lower() == "json":
        config["handlers"]["console_handler"]["formatter"] = "json_formatter"
    return config


def setup_logging(
    log_format_type: Literal["human", "json"],
    app_log_level_name: str,
    include_stacktrace: bool,
) -> dict[str, Any]:
    """Configure logging for the application.

    Args:
        log_format_type: Format for logs ('human' or 'json').
        app_log_level_name: Logging level name (e.g., 'INFO', 'DEBUG').
        include_stacktrace: Whether to include full stack traces in error logs.

    Returns:
        The applied configuration, reusable as uvicorn's ``log_config``.
    """
    global _should_include_stacktrace
    _should_include_stacktrace = include_stacktrace

    logging.setLogRecordFactory(custom_record_factory)
    config = build_logging_config(log_format_type, app_log_level_name)
    dictConfig(config)
    return config
