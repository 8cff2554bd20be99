r"""Utility functions for request building, header handling and retry
timing."""

from __future__ import annotations

__all__ = [
    "append_query",
    "build_query",
    "format_headers",
    "get_header",
    "parse_headers",
    "parse_retry_after",
    "sleep",
    "validate_url",
]

from arequest.utils.headers import format_headers, get_header, parse_headers
from arequest.utils.retry_after import parse_retry_after
from arequest.utils.sleep import sleep
from arequest.utils.url import append_query, build_query, validate_url
