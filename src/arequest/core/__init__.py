r"""Core configuration and validation shared by the client and the
retry engine."""

from __future__ import annotations

__all__ = [
    "DEFAULT_MAX_RETRIES",
    "DEFAULT_TIMEOUT",
    "RETRY_METHODS",
    "RETRY_STATUS_CODES",
    "AuthConfig",
    "ClientConfig",
    "JsonOptions",
    "ProxyConfig",
    "RetryConfig",
    "validate_proxy_params",
    "validate_retry_params",
    "validate_timeout",
]

from arequest.core.config import (
    DEFAULT_MAX_RETRIES,
    DEFAULT_TIMEOUT,
    RETRY_METHODS,
    RETRY_STATUS_CODES,
    AuthConfig,
    ClientConfig,
    JsonOptions,
    ProxyConfig,
    RetryConfig,
)
from arequest.core.validation import (
    validate_proxy_params,
    validate_retry_params,
    validate_timeout,
)
