r"""Exception classes raised by arequest.

The hierarchy is intentionally shallow: ``ValidationError`` is raised
while a request is being built, and ``TransportError`` is raised when
the network call itself failed and the retry engine gave up. HTTP error
status codes are never turned into exceptions; they are returned as
regular responses.
"""

from __future__ import annotations

__all__ = ["ArequestError", "TransportError", "ValidationError"]


class ArequestError(Exception):
    """Base class for all arequest errors."""


class ValidationError(ArequestError, ValueError):
    """Raised when a request cannot be built, e.g. the URL is not an
    absolute http(s) URL.

    Example:
        ```pycon
        >>> from arequest.exceptions import ValidationError
        >>> from arequest.utils.url import validate_url
        >>> try:
        ...     validate_url("ftp://example.com")
        ... except ValidationError as exc:
        ...     print(exc)
        ...
        Invalid URL format: 'ftp://example.com'

        ```
    """


class TransportError(ArequestError):
    """Raised when the transport call failed and no retry is left.

    Args:
        method: The HTTP method of the failed request.
        url: The URL of the failed request.
        message: The error message reported by the transport.
        is_timeout: ``True`` if the transport reported an operation
            timeout.
        cause: The underlying exception, if the transport raised one.

    Example:
        ```pycon
        >>> from arequest.exceptions import TransportError
        >>> error = TransportError(
        ...     method="GET",
        ...     url="https://api.example.com",
        ...     message="operation timed out",
        ...     is_timeout=True,
        ... )
        >>> error.is_timeout
        True
        >>> str(error)
        'operation timed out'

        ```
    """

    def __init__(
        self,
        method: str,
        url: str,
        message: str,
        *,
        is_timeout: bool = False,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.method = method
        self.url = url
        self.message = message
        self.is_timeout = is_timeout
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(method={self.method!r}, url={self.url!r}, "
            f"message={self.message!r}, is_timeout={self.is_timeout})"
        )
