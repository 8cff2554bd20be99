r"""Transport capability consumed by the retry executor.

A transport performs exactly one blocking network call per ``execute``
invocation. It owns the underlying connection handle and may keep it
open across calls so that connections are reused.
"""

from __future__ import annotations

__all__ = ["BaseTransport", "TransportOptions", "TransportResult"]

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TransportOptions:
    """Fully resolved options for one transport call.

    Attributes:
        url: The absolute URL, including the query string.
        method: The upper-case HTTP method.
        headers: Header lines formatted as ``name: value``.
        body: The raw request body, or None.
        cookie: Cookie string sent with the call, or None.
    """

    url: str
    method: str
    headers: tuple[str, ...] = ()
    body: bytes | None = None
    cookie: str | None = None


@dataclass(frozen=True)
class TransportResult:
    """Raw result of one transport call.

    On success ``raw_response`` holds the header block followed by the
    body and ``header_size`` is the offset where the body starts. On
    failure ``error`` holds the transport error message and the other
    fields are meaningless.

    Attributes:
        raw_response: Header block and body as received.
        header_size: Length in bytes of the header block.
        status_code: The HTTP status code.
        error: The transport error message, or None on success.
        is_timeout: Whether the error is an operation timeout.
        connection_established: Whether the call established or reused
            a connection.
        cause: The exception raised by the underlying library, if any.
    """

    raw_response: bytes = b""
    header_size: int = 0
    status_code: int = 0
    error: str | None = None
    is_timeout: bool = False
    connection_established: bool = False
    cause: BaseException | None = None

    @property
    def raw_headers(self) -> str:
        r"""The header block decoded as ISO-8859-1."""
        return self.raw_response[: self.header_size].decode("iso-8859-1")

    @property
    def body(self) -> bytes:
        r"""The response body."""
        return self.raw_response[self.header_size :]


class BaseTransport(ABC):
    """Abstract base class for transports.

    Implementations are used sequentially by one client and are not
    expected to be thread-safe.
    """

    @abstractmethod
    def execute(self, options: TransportOptions) -> TransportResult:
        """Perform exactly one network call.

        Transport failures are reported through ``TransportResult.error``,
        never raised.

        Args:
            options: The resolved options for the call.

        Returns:
            The raw result of the call.
        """

    def reset(self) -> None:
        """Clear per-request state before a new logical request.

        The connection handle itself is kept.
        """

    def close(self) -> None:
        """Release the connection handle."""
