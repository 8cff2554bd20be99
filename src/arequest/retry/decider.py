r"""Retry decision logic.

This module provides the RetryDecider class, which answers two separate
questions: whether retrying is considered at all for a request, and
whether a given attempt outcome warrants another attempt.
"""

from __future__ import annotations

__all__ = ["RetryDecider"]

import logging
from typing import TYPE_CHECKING

from arequest.retry.option import RetryOption
from arequest.utils.headers import get_header

if TYPE_CHECKING:
    from arequest.core.config import RetryConfig
    from arequest.retry.state import AttemptOutcome

logger: logging.Logger = logging.getLogger(__name__)


class RetryDecider:
    """Decides whether a request should be retried.

    Args:
        config: The retry configuration of the client.

    Example:
        ```pycon
        >>> from arequest.core.config import RetryConfig
        >>> from arequest.retry import RetryDecider, RetryOption
        >>> from arequest.retry.state import AttemptOutcome
        >>> decider = RetryDecider(RetryConfig(retries_enabled=True))
        >>> decider.should_consider_retry(RetryOption.USE_GLOBAL_SETTINGS, "GET")
        True
        >>> decider.should_consider_retry(RetryOption.USE_GLOBAL_SETTINGS, "POST")
        False
        >>> decider.is_retry_warranted(AttemptOutcome(status_code=503, headers={}), attempt=0)
        True

        ```
    """

    def __init__(self, config: RetryConfig) -> None:
        self.config = config

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(config={self.config})"

    def should_consider_retry(self, retry_option: RetryOption, method: str) -> bool:
        """Determine whether retrying is considered for a request.

        The answer only depends on the request, so it is computed once
        per logical request.

        Args:
            retry_option: The per-request override.
            method: The HTTP method of the request.

        Returns:
            ``True`` if the request may be retried.
        """
        if retry_option is RetryOption.DISABLE_RETRY:
            return False
        if retry_option is RetryOption.ENABLE_RETRY:
            return self.config.retries_enabled
        return self.config.retries_enabled and method.upper() in self.config.methods_to_retry

    def is_retry_warranted(self, outcome: AttemptOutcome, attempt: int) -> bool:
        """Determine whether an attempt outcome warrants another attempt.

        A transport error is retried only if it is a timeout and
        ``retry_on_timeout`` is enabled. A response is retried if it
        carries a ``Retry-After`` header or its status code is one of
        the retryable status codes. Nothing is retried once ``attempt``
        reaches ``max_retries``.

        Args:
            outcome: The outcome of the last attempt.
            attempt: Number of retries already scheduled.

        Returns:
            ``True`` if another attempt is warranted.
        """
        if attempt >= self.config.max_retries:
            logger.debug(f"No retry: max retries reached ({attempt}/{self.config.max_retries})")
            return False
        if not outcome.succeeded:
            return self.config.retry_on_timeout and outcome.is_timeout
        if get_header(outcome.headers, "Retry-After") is not None:
            return True
        return outcome.status_code in self.config.status_codes_to_retry
