r"""Transport implementation backed by httpx.

``HttpxTransport`` creates one ``httpx.Client`` on first use and keeps
it for every following call, so connections are pooled and reused
across logical requests of the same ``HttpClient``.
"""

from __future__ import annotations

__all__ = ["HttpxTransport"]

import logging
import os
import ssl
from http.cookiejar import MozillaCookieJar
from typing import TYPE_CHECKING, Any

import httpx

from arequest.core.config import ClientConfig
from arequest.transport.base import BaseTransport, TransportOptions, TransportResult

if TYPE_CHECKING:
    from arequest.core.config import AuthConfig

logger: logging.Logger = logging.getLogger(__name__)

MAX_REDIRECTS = 10


def _build_auth(auth: AuthConfig | None) -> httpx.Auth | None:
    if auth is None or not auth.username:
        return None
    if auth.method == "digest":
        return httpx.DigestAuth(auth.username, auth.password)
    return httpx.BasicAuth(auth.username, auth.password)


def _build_verify(verify_peer: bool, verify_host: bool) -> bool | ssl.SSLContext:
    if not verify_peer:
        return False
    if verify_host:
        return True
    context = ssl.create_default_context()
    context.check_hostname = False
    return context


def _split_header_lines(lines: tuple[str, ...]) -> list[tuple[str, str]]:
    r"""Convert ``name: value`` lines into header pairs.

    A line with an empty value only suppresses a header the transport
    would otherwise add, so it is not sent.
    """
    headers = []
    for line in lines:
        name, _, value = line.partition(":")
        value = value.strip()
        if value:
            headers.append((name.strip(), value))
    return headers


def _serialize_head(response: httpx.Response) -> bytes:
    status_line = f"{response.http_version} {response.status_code} {response.reason_phrase}"
    lines = [status_line.encode("ascii")]
    lines.extend(name + b": " + value for name, value in response.headers.raw)
    return b"\r\n".join(lines) + b"\r\n\r\n"


class HttpxTransport(BaseTransport):
    """Transport performing one blocking call with a reused httpx.Client.

    The client is built from the connection-level settings of a
    ``ClientConfig``: socket timeout (``0`` means none), certificate
    verification, authentication, proxy and cookie file.
    ``ClientConfig.transport_options`` are passed to ``httpx.Client`` and
    win over the computed options, e.g.
    ``{"transport": httpx.MockTransport(handler)}`` or
    ``{"timeout": httpx.Timeout(5.0, connect=1.0)}``.

    Args:
        config: The client configuration. Defaults to ``ClientConfig()``.

    Example:
        ```pycon
        >>> import httpx
        >>> from arequest.core.config import ClientConfig
        >>> from arequest.transport import HttpxTransport, TransportOptions
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, text="ok"))
        >>> transport = HttpxTransport(ClientConfig(transport_options={"transport": mock}))
        >>> result = transport.execute(TransportOptions(url="https://example.com", method="GET"))
        >>> result.status_code, result.body
        (200, b'ok')
        >>> transport.close()

        ```
    """

    def __init__(self, config: ClientConfig | None = None) -> None:
        self._config = config or ClientConfig()
        self._client: httpx.Client | None = None
        self._cookie_jar: MozillaCookieJar | None = None

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(is_open={self.is_open})"

    @property
    def is_open(self) -> bool:
        r"""Whether the underlying httpx.Client has been created and not
        closed."""
        return self._client is not None and not self._client.is_closed

    @property
    def handle(self) -> httpx.Client:
        r"""The underlying httpx.Client, created on first access."""
        if not self.is_open:
            self._client = httpx.Client(**self.client_options())
            logger.debug("Created new httpx.Client handle")
        return self._client

    def client_options(self) -> dict[str, Any]:
        """Compute the keyword arguments used to create the httpx.Client.

        Returns:
            The computed options with ``transport_options`` merged over
            them.
        """
        config = self._config
        options: dict[str, Any] = {
            "follow_redirects": True,
            "max_redirects": MAX_REDIRECTS,
            "verify": _build_verify(config.verify_peer, config.verify_host),
            "timeout": config.timeout or None,
        }
        auth = _build_auth(config.auth)
        if auth is not None:
            options["auth"] = auth
        if config.proxy is not None:
            options["proxy"] = config.proxy.url
        if config.cookie_file is not None:
            options["cookies"] = self._load_cookie_jar(config.cookie_file)
        return {**options, **config.transport_options}

    def _load_cookie_jar(self, path: str) -> MozillaCookieJar:
        self._cookie_jar = MozillaCookieJar(path)
        if os.path.exists(path):
            self._cookie_jar.load(ignore_discard=True, ignore_expires=True)
        return self._cookie_jar

    def execute(self, options: TransportOptions) -> TransportResult:
        client = self.handle
        headers = _split_header_lines(options.headers)
        if options.cookie:
            headers.append(("cookie", options.cookie))
        try:
            request = client.build_request(
                options.method,
                options.url,
                headers=headers,
                content=options.body,
            )
            response = client.send(request)
        except httpx.TimeoutException as exc:
            logger.debug(f"{options.method} request to {options.url} timed out: {exc!r}")
            return TransportResult(error=str(exc) or "operation timed out", is_timeout=True, cause=exc)
        except httpx.HTTPError as exc:
            logger.debug(f"{options.method} request to {options.url} failed: {exc!r}")
            return TransportResult(error=str(exc) or type(exc).__name__, cause=exc)

        if self._cookie_jar is not None:
            self._cookie_jar.save(ignore_discard=True, ignore_expires=True)

        head = _serialize_head(response)
        return TransportResult(
            raw_response=head + response.content,
            header_size=len(head),
            status_code=response.status_code,
            connection_established=True,
        )

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None
            logger.debug("Closed httpx.Client handle")
