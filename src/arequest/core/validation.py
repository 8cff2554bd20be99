r"""Parameter validation utilities for the client configuration.

This module provides validation functions used by the configuration
dataclasses to reject invalid values as soon as a configuration object
is created.
"""

from __future__ import annotations

__all__ = [
    "validate_proxy_params",
    "validate_retry_params",
    "validate_timeout",
]

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


def validate_timeout(timeout: float) -> None:
    """Validate the socket timeout.

    Args:
        timeout: Maximum seconds to wait for one transport call.
            ``0`` disables the timeout. Must be >= 0.

    Raises:
        ValueError: If timeout is negative.

    Example:
        ```pycon
        >>> from arequest.core.validation import validate_timeout
        >>> validate_timeout(10.0)
        >>> validate_timeout(0)
        >>> validate_timeout(-1)  # doctest: +SKIP
        Traceback (most recent call last):
        ...
        ValueError: timeout must be >= 0, got -1

        ```
    """
    if timeout < 0:
        msg = f"timeout must be >= 0, got {timeout}"
        raise ValueError(msg)


def validate_retry_params(
    max_retries: int,
    retry_interval: float,
    maximum_retry_wait_time: float,
    backoff_factor: float,
    status_codes_to_retry: Iterable[int] = (),
) -> None:
    """Validate retry parameters.

    Args:
        max_retries: Maximum number of retries. Must be >= 0. A value of
            0 means only the initial attempt is made.
        retry_interval: Base interval in seconds. Must be > 0.
        maximum_retry_wait_time: Cumulative wait budget in seconds for
            all retries of one request. Must be >= 0.
        backoff_factor: Multiplier applied to the interval per retry.
            Must be >= 1.
        status_codes_to_retry: HTTP status codes to retry. Each code must
            be in the range 100-599.

    Raises:
        ValueError: If any parameter is out of range.

    Example:
        ```pycon
        >>> from arequest.core.validation import validate_retry_params
        >>> validate_retry_params(
        ...     max_retries=3, retry_interval=1.0, maximum_retry_wait_time=120, backoff_factor=2.0
        ... )

        ```
    """
    if max_retries < 0:
        msg = f"max_retries must be >= 0, got {max_retries}"
        raise ValueError(msg)
    if retry_interval <= 0:
        msg = f"retry_interval must be > 0, got {retry_interval}"
        raise ValueError(msg)
    if maximum_retry_wait_time < 0:
        msg = f"maximum_retry_wait_time must be >= 0, got {maximum_retry_wait_time}"
        raise ValueError(msg)
    if backoff_factor < 1:
        msg = f"backoff_factor must be >= 1, got {backoff_factor}"
        raise ValueError(msg)
    for code in status_codes_to_retry:
        if not 100 <= code <= 599:
            msg = f"status code must be in the range 100-599, got {code}"
            raise ValueError(msg)


def validate_proxy_params(address: str, port: int) -> None:
    """Validate proxy parameters.

    Args:
        address: Host name or IP address of the proxy. Must not be empty.
        port: Proxy port, in the range 1-65535.

    Raises:
        ValueError: If the address is empty or the port is out of range.
    """
    if not address:
        msg = "proxy address must not be empty"
        raise ValueError(msg)
    if not 0 < port < 65536:
        msg = f"proxy port must be in the range 1-65535, got {port}"
        raise ValueError(msg)
