r"""Module-level functions sending one request each.

Each function runs inside a short-lived ``HttpClient``, so no connection
is reused between calls. Use ``HttpClient`` directly to send several
requests over the same connection handle.
"""

from __future__ import annotations

__all__ = [
    "connect",
    "delete",
    "get",
    "head",
    "options",
    "patch",
    "post",
    "put",
    "request",
    "trace",
]

from typing import TYPE_CHECKING, Any

from arequest.client import HttpClient

if TYPE_CHECKING:
    from collections.abc import Mapping

    from arequest.core.config import ClientConfig
    from arequest.response import Response
    from arequest.retry.option import RetryOption
    from arequest.transport.base import BaseTransport


def request(
    method: str,
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    retry_option: RetryOption | str | None = None,
    *,
    config: ClientConfig | None = None,
    transport: BaseTransport | None = None,
) -> Response:
    """Send an HTTP request with automatic retry logic.

    Args:
        method: The HTTP method.
        url: The absolute http(s) URL.
        headers: Request-specific headers.
        body: The body, or the query parameters for GET.
        retry_option: Optional retry override for this request.
        config: Optional client configuration.
        transport: Optional transport, see ``HttpClient``.

    Returns:
        The response of the last attempt.

    Raises:
        ValidationError: If the URL is invalid.
        TransportError: If the last attempt failed at the transport level.

    Example:
        ```pycon
        >>> import arequest
        >>> from arequest.core.config import ClientConfig, RetryConfig
        >>> response = arequest.get(
        ...     "https://api.example.com/items",
        ...     params={"page": 2},
        ...     config=ClientConfig(retry=RetryConfig(retries_enabled=True)),
        ... )  # doctest: +SKIP

        ```
    """
    with HttpClient(config=config, transport=transport) as client:
        return client.request(method, url, headers, body, retry_option)


def get(
    url: str,
    headers: Mapping[str, str] | None = None,
    params: Mapping[str, Any] | None = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP GET request, ``params`` are appended to the URL.

    ``kwargs`` are passed to ``request``.
    """
    return request("GET", url, headers, params, retry_option, **kwargs)


def head(
    url: str,
    headers: Mapping[str, str] | None = None,
    params: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP HEAD request."""
    return request("HEAD", url, headers, params, retry_option, **kwargs)


def options(
    url: str,
    headers: Mapping[str, str] | None = None,
    params: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP OPTIONS request."""
    return request("OPTIONS", url, headers, params, retry_option, **kwargs)


def connect(
    url: str,
    headers: Mapping[str, str] | None = None,
    params: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP CONNECT request."""
    return request("CONNECT", url, headers, params, retry_option, **kwargs)


def post(
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP POST request."""
    return request("POST", url, headers, body, retry_option, **kwargs)


def put(
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP PUT request."""
    return request("PUT", url, headers, body, retry_option, **kwargs)


def patch(
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP PATCH request."""
    return request("PATCH", url, headers, body, retry_option, **kwargs)


def delete(
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP DELETE request."""
    return request("DELETE", url, headers, body, retry_option, **kwargs)


def trace(
    url: str,
    headers: Mapping[str, str] | None = None,
    body: Any = None,
    retry_option: RetryOption | str | None = None,
    **kwargs: Any,
) -> Response:
    """Send an HTTP TRACE request."""
    return request("TRACE", url, headers, body, retry_option, **kwargs)
