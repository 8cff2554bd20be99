r"""arequest - HTTP client with an automatic retry and backoff engine.

This package sends HTTP requests through a reused connection handle and
retries them according to a per-client retry configuration. Responses
are returned for every status code; only transport failures that are
not retried any more are raised.

Key Features:
    - Exponential backoff with jitter, bounded by a cumulative wait budget
    - Retry-After header support (both integer seconds and HTTP-date formats)
    - Retryable status codes and methods configured per client
    - Per-request retry override (enable, disable or use the client settings)
    - Optional retry of transport timeouts
    - Best-effort JSON decoding of response bodies
    - Default headers, cookies, basic/digest auth and proxy settings

Example:
    ```pycon
    >>> from arequest import HttpClient, RetryOption
    >>> from arequest.core.config import ClientConfig, RetryConfig
    >>> config = ClientConfig(retry=RetryConfig(retries_enabled=True, max_retries=3))
    >>> with HttpClient(config=config) as client:  # doctest: +SKIP
    ...     response = client.get("https://api.example.com/data")
    ...     response = client.post(
    ...         "https://api.example.com/data",
    ...         body={"key": "value"},
    ...         retry_option=RetryOption.ENABLE_RETRY,
    ...     )
    ...

    ```
"""

from __future__ import annotations

__all__ = [
    "ClientConfig",
    "HttpClient",
    "Request",
    "Response",
    "RetryConfig",
    "RetryOption",
    "TransportError",
    "ValidationError",
    "__version__",
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

from importlib.metadata import PackageNotFoundError, version

from arequest.api import connect, delete, get, head, options, patch, post, put, request, trace
from arequest.client import HttpClient
from arequest.core.config import ClientConfig, RetryConfig
from arequest.exceptions import TransportError, ValidationError
from arequest.request import Request
from arequest.response import Response
from arequest.retry.option import RetryOption

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
