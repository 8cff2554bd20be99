r"""URL utilities used when building requests."""

from __future__ import annotations

__all__ = ["append_query", "build_query", "flatten_params", "validate_url"]

import re
from collections.abc import Mapping
from typing import Any

import httpx

from arequest.exceptions import ValidationError

_BASE_URL_PATTERN = re.compile(r"^(https?://[^/]+)")
_DUPLICATE_SLASHES = re.compile(r"//+")


def validate_url(url: str) -> str:
    """Validate that a URL is absolute and collapse duplicate slashes.

    Args:
        url: The URL to validate.

    Returns:
        The URL with duplicate slashes removed from everything after the
        host.

    Raises:
        ValidationError: If the URL does not start with ``http://`` or
            ``https://`` followed by a host, or cannot be parsed, e.g.
            its port is not a number.

    Example:
        ```pycon
        >>> from arequest.utils.url import validate_url
        >>> validate_url("https://api.example.com//v1///users")
        'https://api.example.com/v1/users'

        ```
    """
    match = _BASE_URL_PATTERN.match(url)
    if match is None:
        msg = f"Invalid URL format: {url!r}"
        raise ValidationError(msg)
    base = match.group(1)
    url = base + _DUPLICATE_SLASHES.sub("/", url[len(base) :])
    try:
        httpx.URL(url)
    except httpx.InvalidURL as exc:
        msg = f"Invalid URL format: {url!r} ({exc})"
        raise ValidationError(msg) from exc
    return url


def flatten_params(
    data: Mapping[str, Any] | list[Any] | tuple[Any, ...],
    parent: str | None = None,
) -> dict[str, Any]:
    """Flatten nested mappings and lists into bracketed keys.

    Args:
        data: The parameters to flatten.
        parent: The key of the enclosing structure, if any.

    Returns:
        A flat mapping from keys such as ``user[name]`` to scalar values.

    Example:
        ```pycon
        >>> from arequest.utils.url import flatten_params
        >>> flatten_params({"user": {"name": "ada", "tags": ["a", "b"]}, "page": 2})
        {'user[name]': 'ada', 'user[tags][0]': 'a', 'user[tags][1]': 'b', 'page': 2}

        ```
    """
    items = data.items() if isinstance(data, Mapping) else enumerate(data)
    result: dict[str, Any] = {}
    for key, value in items:
        new_key = f"{parent}[{key}]" if parent is not None else str(key)
        if isinstance(value, (Mapping, list, tuple)):
            result.update(flatten_params(value, new_key))
        else:
            result[new_key] = value
    return result


def build_query(params: Mapping[str, Any]) -> str:
    """Build an unescaped query string from (possibly nested) parameters.

    ``None`` values are dropped and booleans are sent as ``1``/``0``.

    Args:
        params: The parameters.

    Returns:
        The query string, without the leading ``?``.

    Example:
        ```pycon
        >>> from arequest.utils.url import build_query
        >>> build_query({"q": "python", "filter": {"lang": "en"}, "debug": True, "skip": None})
        'q=python&filter[lang]=en&debug=1'

        ```
    """
    parts = []
    for key, value in flatten_params(params).items():
        if value is None:
            continue
        if isinstance(value, bool):
            value = int(value)
        parts.append(f"{key}={value}")
    return "&".join(parts)


def append_query(url: str, params: Mapping[str, Any]) -> str:
    """Append parameters to a URL that may already have a query string.

    Example:
        ```pycon
        >>> from arequest.utils.url import append_query
        >>> append_query("https://example.com/search?page=1", {"q": "x"})
        'https://example.com/search?page=1&q=x'

        ```
    """
    query = build_query(params)
    if not query:
        return url
    separator = "&" if "?" in url else "?"
    return f"{url}{separator}{query}"
