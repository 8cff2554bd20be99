r"""Retry-After header parsing utilities.

This module provides the function used to turn the value of a
``Retry-After`` response header into a number of seconds, as defined in
RFC 7231.
"""

from __future__ import annotations

__all__ = ["parse_retry_after"]

import logging
import time
from contextlib import suppress
from datetime import timezone
from email.utils import parsedate_to_datetime

logger: logging.Logger = logging.getLogger(__name__)


def parse_retry_after(retry_after_header: str | None) -> int:
    """Parse the Retry-After header value from an HTTP response.

    The Retry-After header can be specified in two formats according to RFC 7231:
    1. A number of seconds to wait (e.g., "120")
    2. An HTTP-date in RFC 1123 format (e.g., "Wed, 21 Oct 2015 07:28:00 GMT")

    For an HTTP-date, the number of whole seconds between now and that date
    is returned. A date in the past yields a negative value, which is not
    clamped: the caller combines it with ``max()`` against the computed
    backoff, so it simply has no effect.

    Args:
        retry_after_header: The value of the Retry-After header, or None
            if the header is not present in the response.

    Returns:
        The number of seconds to wait, or 0 if the header is absent or
        cannot be parsed.

    Example:
        ```pycon
        >>> from arequest.utils.retry_after import parse_retry_after
        >>> parse_retry_after("120")
        120
        >>> parse_retry_after("1.5")
        1
        >>> parse_retry_after(None)
        0
        >>> parse_retry_after("invalid")
        0

        ```
    """
    if retry_after_header is None:
        return 0

    value = retry_after_header.strip()
    with suppress(ValueError, OverflowError):
        return int(float(value))

    try:
        retry_date = parsedate_to_datetime(value)
    except (ValueError, TypeError, IndexError, OverflowError):
        logger.debug(f"Failed to parse Retry-After header: {retry_after_header!r}")
        return 0
    if retry_date is None:  # pragma: no cover
        return 0
    if retry_date.tzinfo is None:
        retry_date = retry_date.replace(tzinfo=timezone.utc)
    return int(retry_date.timestamp()) - int(time.time())
