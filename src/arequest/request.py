r"""Request objects consumed by the client."""

from __future__ import annotations

__all__ = ["Request"]

from collections.abc import Mapping
from typing import Any

from arequest.body import form as encode_form
from arequest.retry.option import RetryOption
from arequest.utils.url import append_query, validate_url


class Request:
    """A validated HTTP request.

    The URL is validated when the request is created, so an invalid URL
    fails before any network call is made.

    Args:
        url: The absolute http(s) URL.
        method: The HTTP method, case-insensitive.
        headers: Request-specific headers.
        body: The request body. For a GET request a mapping is sent as
            query parameters. For other methods a mapping is sent as a
            form-encoded body, ``str`` as UTF-8 and ``bytes`` as-is.
        retry_option: The per-request retry override.

    Raises:
        ValidationError: If the URL is not an absolute http(s) URL.

    Example:
        ```pycon
        >>> from arequest.request import Request
        >>> request = Request("https://api.example.com//items", body={"page": 2})
        >>> request.query_url
        'https://api.example.com/items?page=2'
        >>> request.encoded_body() is None
        True
        >>> Request("https://api.example.com/items", "post", body={"name": "x"}).encoded_body()
        b'name=x'

        ```
    """

    def __init__(
        self,
        url: str,
        method: str = "GET",
        headers: Mapping[str, str] | None = None,
        body: Any = None,
        retry_option: RetryOption | str = RetryOption.USE_GLOBAL_SETTINGS,
    ) -> None:
        self.url = validate_url(url)
        self.method = method.upper()
        self.headers = dict(headers or {})
        self.body = body
        self.retry_option = RetryOption(retry_option)

    def __repr__(self) -> str:
        return f"<{self.__class__.__qualname__} [{self.method} {self.url}]>"

    @property
    def query_url(self) -> str:
        r"""The URL to call, with the body appended as query parameters
        for a GET request with a mapping body."""
        if self.method == "GET" and isinstance(self.body, Mapping):
            return append_query(self.url, self.body)
        return self.url

    def encoded_body(self) -> bytes | None:
        """Encode the body for the transport.

        Returns:
            The raw body, or None for a GET request or an empty body.

        Raises:
            TypeError: If the body type cannot be encoded.
        """
        if self.method == "GET" or self.body is None:
            return None
        if isinstance(self.body, bytes):
            return self.body
        if isinstance(self.body, str):
            return self.body.encode("utf-8")
        if isinstance(self.body, Mapping):
            return encode_form(self.body).encode("utf-8")
        msg = f"Unsupported body type: {type(self.body).__name__}"
        raise TypeError(msg)
