r"""Structured logging utilities for machine-readable log output.

The retry engine attaches fields such as ``attempt``, ``wait_time`` and
``remaining_budget`` to its log records. With the default formatter
these fields are invisible; ``StructuredFormatter`` renders every record
as one JSON object that includes them, together with an optional
correlation id shared by all records of the current context.

Example:
    ```python
    import logging

    from arequest import HttpClient
    from arequest.utils.structured_logging import StructuredFormatter, correlation_scope

    handler = logging.StreamHandler()
    handler.setFormatter(StructuredFormatter())
    logger = logging.getLogger("arequest")
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)

    with HttpClient() as client, correlation_scope("order-42"):
        client.get("https://api.example.com/orders/42")
    ```
"""

from __future__ import annotations

__all__ = [
    "StructuredFormatter",
    "clear_correlation_id",
    "correlation_scope",
    "get_correlation_id",
    "log_structured",
    "set_correlation_id",
]

import contextvars
import json
import logging
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Generator

_correlation_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "arequest_correlation_id", default=None
)

# Attributes every LogRecord has; anything else was passed with ``extra``
_RECORD_ATTRIBUTES = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}


def get_correlation_id() -> str | None:
    """Get the correlation ID of the current context.

    Example:
        ```pycon
        >>> from arequest.utils.structured_logging import (
        ...     clear_correlation_id,
        ...     get_correlation_id,
        ...     set_correlation_id,
        ... )
        >>> set_correlation_id("req-123")
        >>> get_correlation_id()
        'req-123'
        >>> clear_correlation_id()

        ```
    """
    return _correlation_id.get()


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID for the current context.

    Args:
        correlation_id: The correlation ID (e.g., request ID, trace ID).
    """
    _correlation_id.set(correlation_id)


def clear_correlation_id() -> None:
    """Clear the correlation ID for the current context."""
    _correlation_id.set(None)


@contextmanager
def correlation_scope(correlation_id: str) -> Generator[None, None, None]:
    """Set a correlation ID for the duration of a ``with`` block.

    The previous value is restored on exit.

    Example:
        ```pycon
        >>> from arequest.utils.structured_logging import correlation_scope, get_correlation_id
        >>> with correlation_scope("batch-7"):
        ...     get_correlation_id()
        ...
        'batch-7'

        ```
    """
    token = _correlation_id.set(correlation_id)
    try:
        yield
    finally:
        _correlation_id.reset(token)


class StructuredFormatter(logging.Formatter):
    """JSON formatter for structured logging.

    Each record becomes a JSON object with the fields ``timestamp``
    (ISO 8601, UTC), ``level``, ``logger``, ``message``, ``module``,
    ``function`` and ``line``, plus ``correlation_id`` when one is set,
    ``exception`` when the record carries exception info, and every
    field passed through ``extra``. Values that are not JSON
    serializable are rendered with ``str``.

    Example:
        ```pycon
        >>> import json
        >>> import logging
        >>> from arequest.utils.structured_logging import StructuredFormatter
        >>> record = logging.LogRecord("arequest", logging.INFO, __file__, 1, "done", (), None)
        >>> record.attempt = 2
        >>> payload = json.loads(StructuredFormatter().format(record))
        >>> payload["message"], payload["attempt"]
        ('done', 2)

        ```
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        correlation_id = get_correlation_id()
        if correlation_id is not None:
            log_data["correlation_id"] = correlation_id
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        log_data.update(
            (key, value) for key, value in record.__dict__.items() if key not in _RECORD_ATTRIBUTES
        )
        return json.dumps(log_data, default=str)

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        """Format the record creation time as ISO 8601 in UTC.

        ``datefmt`` is ignored.
        """
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        return created.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def log_structured(logger: logging.Logger, level: int, message: str, **extra: Any) -> None:
    """Log a message with structured fields.

    Nothing is built when the logger is not enabled for ``level``.

    Args:
        logger: Logger to use.
        level: Log level (e.g., logging.DEBUG).
        message: Log message.
        **extra: Structured fields to attach to the record.
    """
    if logger.isEnabledFor(level):
        logger.log(level, message, extra=extra, stacklevel=2)
