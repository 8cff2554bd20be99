r"""Synchronous HTTP client with automatic retry logic.

This module provides the HttpClient class. Each client owns its
configuration, its transport (and therefore its connection handle) and
its retry executor; nothing is shared between clients.
"""

from __future__ import annotations

__all__ = ["HttpClient"]

from typing import TYPE_CHECKING, Any

from arequest.core.config import ClientConfig
from arequest.request import Request
from arequest.retry.executor import RetryExecutor
from arequest.retry.option import RetryOption
from arequest.transport.base import TransportOptions
from arequest.transport.httpx_transport import HttpxTransport
from arequest.utils.headers import format_headers

if TYPE_CHECKING:
    from collections.abc import Mapping
    from types import TracebackType
    from typing import Self

    from arequest.response import Response
    from arequest.transport.base import BaseTransport


class HttpClient:
    r"""HTTP client with automatic retry logic.

    The client reuses one transport handle across all its requests so
    that connections are kept alive. It is meant to be used from a single
    thread: requests are executed sequentially and block the caller,
    including during the waits between retries. Sharing a client between
    threads requires external synchronization, e.g. one lock per client.

    Two usage patterns are supported:

    **Client-managed transport**: when ``transport`` is omitted, an
    ``HttpxTransport`` is created from ``config`` and closed by
    ``close()`` or when the ``with`` block exits.

    **Injected transport**: any ``BaseTransport`` can be passed, e.g. a
    test double. Its lifecycle stays with the caller.

    Args:
        config: The client configuration. Defaults to ``ClientConfig()``.
        transport: Optional transport. Defaults to an ``HttpxTransport``
            built from ``config``.

    Example:
        ```pycon
        >>> from arequest import HttpClient
        >>> from arequest.core.config import ClientConfig, RetryConfig
        >>> config = ClientConfig(retry=RetryConfig(retries_enabled=True, max_retries=5))
        >>> with HttpClient(config=config) as client:  # doctest: +SKIP
        ...     response = client.get("https://api.example.com/items", params={"page": 2})
        ...     created = client.post("https://api.example.com/items", body={"name": "x"})
        ...

        ```
    """

    def __init__(
        self,
        config: ClientConfig | None = None,
        transport: BaseTransport | None = None,
    ) -> None:
        self._config: ClientConfig = config or ClientConfig()
        self._owns_transport = transport is None
        self._transport: BaseTransport = transport or HttpxTransport(self._config)
        self._executor = RetryExecutor(
            self._config.retry, self._transport, json_options=self._config.json_options
        )
        self._next_retry_option = RetryOption.USE_GLOBAL_SETTINGS

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(transport={self._transport!r})"

    def __enter__(self) -> Self:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def config(self) -> ClientConfig:
        r"""The client configuration."""
        return self._config

    @property
    def total_number_of_connections(self) -> int:
        r"""Number of transport calls that established or reused a
        connection since the transport handle was created."""
        return self._executor.total_number_of_connections

    def close(self) -> None:
        """Close the transport if this client created it."""
        if self._owns_transport:
            self._transport.close()
            self._executor.reset_connection_count()

    def override_retry_for_next_request(self, retry_option: RetryOption | str) -> None:
        """Override the retry settings for the next request only.

        The override applies to the next request sent with ``execute``,
        ``request`` or a verb method, unless that request sets its own
        retry option. It is reset to ``RetryOption.USE_GLOBAL_SETTINGS``
        once the next request completes, whatever its outcome.

        Args:
            retry_option: The override to apply.
        """
        self._next_retry_option = RetryOption(retry_option)

    def execute(self, request: Request) -> Response:
        """Execute a request with automatic retry logic.

        A pending ``override_retry_for_next_request`` is applied when
        ``request.retry_option`` is ``RetryOption.USE_GLOBAL_SETTINGS``.

        Args:
            request: The request to execute.

        Returns:
            The response of the last attempt. HTTP error status codes are
            returned, not raised.

        Raises:
            TransportError: If the last attempt failed at the transport
                level.
        """
        retry_option = request.retry_option
        if retry_option is RetryOption.USE_GLOBAL_SETTINGS:
            retry_option = self._next_retry_option
        try:
            return self._executor.execute(self._build_options(request), retry_option)
        finally:
            self._next_retry_option = RetryOption.USE_GLOBAL_SETTINGS

    def _build_options(self, request: Request) -> TransportOptions:
        config = self._config
        return TransportOptions(
            url=request.query_url,
            method=request.method,
            headers=tuple(format_headers(config.default_headers, request.headers, config.user_agent)),
            body=request.encoded_body(),
            cookie=config.cookie,
        )

    def request(
        self,
        method: str,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        r"""Send an HTTP request with automatic retry logic.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE, PATCH, HEAD,
                OPTIONS, CONNECT, TRACE).
            url: The absolute http(s) URL.
            headers: Request-specific headers.
            body: The body, or the query parameters for GET.
            retry_option: Optional retry override for this request. If
                ``None``, the override set with
                ``override_retry_for_next_request`` is used.

        Returns:
            The response of the last attempt.

        Raises:
            ValidationError: If the URL is invalid.
            TransportError: If the last attempt failed at the transport
                level.
        """
        option = self._next_retry_option if retry_option is None else retry_option
        self._next_retry_option = RetryOption.USE_GLOBAL_SETTINGS
        return self.execute(Request(url, method, headers=headers, body=body, retry_option=option))

    def get(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Mapping[str, Any] | None = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP GET request, ``params`` are appended to the URL."""
        return self.request("GET", url, headers, params, retry_option)

    def head(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP HEAD request."""
        return self.request("HEAD", url, headers, params, retry_option)

    def options(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP OPTIONS request."""
        return self.request("OPTIONS", url, headers, params, retry_option)

    def connect(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        params: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP CONNECT request."""
        return self.request("CONNECT", url, headers, params, retry_option)

    def post(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP POST request."""
        return self.request("POST", url, headers, body, retry_option)

    def put(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP PUT request."""
        return self.request("PUT", url, headers, body, retry_option)

    def patch(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP PATCH request."""
        return self.request("PATCH", url, headers, body, retry_option)

    def delete(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP DELETE request."""
        return self.request("DELETE", url, headers, body, retry_option)

    def trace(
        self,
        url: str,
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str | None = None,
    ) -> Response:
        """Send an HTTP TRACE request."""
        return self.request("TRACE", url, headers, body, retry_option)
