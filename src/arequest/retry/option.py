r"""Per-request retry override."""

from __future__ import annotations

__all__ = ["RetryOption"]

from enum import Enum


class RetryOption(str, Enum):
    """Per-request override of the client retry settings.

    Attributes:
        ENABLE_RETRY: Retry whenever retries are enabled on the client,
            whatever the HTTP method.
        USE_GLOBAL_SETTINGS: Retry only if retries are enabled on the
            client and the method is one of its retryable methods.
        DISABLE_RETRY: Never retry this request.

    Example:
        ```pycon
        >>> from arequest.retry import RetryOption
        >>> RetryOption("disable_retry") is RetryOption.DISABLE_RETRY
        True

        ```
    """

    ENABLE_RETRY = "enable_retry"
    USE_GLOBAL_SETTINGS = "use_global_settings"
    DISABLE_RETRY = "disable_retry"
