r"""Wait time calculation between attempts.

This module provides the RetryStrategy class, which combines the
exponential backoff, a small random jitter and the server's
``Retry-After`` hint, and enforces the cumulative wait budget.
"""

from __future__ import annotations

__all__ = ["ExponentialBackoff", "RetryStrategy"]

import logging
import random
from typing import TYPE_CHECKING

from arequest.retry.decider import RetryDecider
from arequest.utils.headers import get_header
from arequest.utils.retry_after import parse_retry_after

if TYPE_CHECKING:
    from arequest.core.config import RetryConfig
    from arequest.retry.state import AttemptOutcome

logger: logging.Logger = logging.getLogger(__name__)

# Jitter is drawn uniformly from [0, 0.1) seconds with microsecond resolution
JITTER_STEPS = 100_000
JITTER_RESOLUTION = 1e-6


class ExponentialBackoff:
    """Delay before a retry, growing geometrically with the retry count.

    The delay before retry ``n`` (0-indexed) is
    ``base_delay * factor ** n``. Jitter, server hints and the wait
    budget are applied by ``RetryStrategy``, not here.

    Args:
        base_delay: Delay before the first retry, in seconds. Must be > 0.
        factor: Growth factor between two retries. Must be >= 1; ``1``
            gives a constant delay.

    Example:
        ```pycon
        >>> from arequest.retry.strategy import ExponentialBackoff
        >>> backoff = ExponentialBackoff(base_delay=0.5, factor=3.0)
        >>> [backoff.calculate(n) for n in range(3)]
        [0.5, 1.5, 4.5]

        ```
    """

    def __init__(self, base_delay: float = 1.0, factor: float = 2.0) -> None:
        if base_delay <= 0:
            msg = f"base_delay must be positive, got {base_delay}"
            raise ValueError(msg)
        if factor < 1:
            msg = f"factor must be >= 1, got {factor}"
            raise ValueError(msg)
        self.base_delay = base_delay
        self.factor = factor

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(base_delay={self.base_delay}, factor={self.factor})"

    def calculate(self, attempt: int) -> float:
        r"""Return the delay in seconds before retry ``attempt``."""
        return self.base_delay * self.factor**attempt


class RetryStrategy:
    """Strategy for calculating the wait before the next attempt.

    The wait is computed as follows:
    1. ``exponential = retry_interval * backoff_factor ** attempt``
    2. ``jitter`` drawn uniformly from [0, 0.1) seconds, in microseconds
    3. ``hint = parse_retry_after(headers["Retry-After"])``, 0 if absent
    4. ``candidate = max(exponential + jitter, hint)``
    5. the candidate is returned if it fits in the remaining budget,
       otherwise ``0.0``, which stops the retries.

    Args:
        config: The retry configuration of the client.
        decider: The decider used to check whether a retry is warranted.
            Defaults to ``RetryDecider(config)``.
        backoff: The exponential backoff. Defaults to
            ``ExponentialBackoff(config.retry_interval, config.backoff_factor)``.

    Example:
        ```pycon
        >>> from arequest.core.config import RetryConfig
        >>> from arequest.retry import RetryStrategy
        >>> from arequest.retry.state import AttemptOutcome
        >>> strategy = RetryStrategy(RetryConfig(retries_enabled=True))
        >>> outcome = AttemptOutcome(status_code=503, headers={"Retry-After": "5"})
        >>> strategy.compute_wait_time(outcome, attempt=0, remaining_budget=120.0) >= 5.0
        True
        >>> strategy.compute_wait_time(outcome, attempt=0, remaining_budget=4.0)
        0.0

        ```
    """

    def __init__(
        self,
        config: RetryConfig,
        decider: RetryDecider | None = None,
        backoff: ExponentialBackoff | None = None,
    ) -> None:
        self.config = config
        self.decider = decider if decider is not None else RetryDecider(config)
        self.backoff = (
            backoff
            if backoff is not None
            else ExponentialBackoff(config.retry_interval, config.backoff_factor)
        )

    def compute_wait_time(
        self,
        outcome: AttemptOutcome,
        attempt: int,
        remaining_budget: float,
    ) -> float:
        """Compute the wait before the next attempt.

        Args:
            outcome: The outcome of the last attempt.
            attempt: Number of retries already scheduled.
            remaining_budget: Seconds left in the cumulative wait budget.

        Returns:
            The wait in seconds, or ``0.0`` if no further attempt should
            be made.
        """
        if not self.decider.is_retry_warranted(outcome, attempt):
            return 0.0

        jitter = random.randrange(JITTER_STEPS) * JITTER_RESOLUTION  # noqa: S311
        backoff = self.backoff.calculate(attempt)
        retry_after = parse_retry_after(get_header(outcome.headers, "Retry-After"))
        wait_time = float(max(backoff + jitter, retry_after))

        if wait_time > remaining_budget:
            logger.debug(
                f"No retry: wait of {wait_time:.2f}s exceeds the remaining budget "
                f"of {remaining_budget:.2f}s"
            )
            return 0.0
        logger.debug(
            f"Next attempt in {wait_time:.2f}s (backoff={backoff:.2f}s, jitter={jitter:.6f}s, "
            f"retry_after={retry_after}s)"
        )
        return wait_time
