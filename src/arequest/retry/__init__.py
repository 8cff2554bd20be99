r"""Retry engine.

Public API:
    - RetryOption: Per-request retry override
    - RetryDecider: Logic for deciding whether to retry
    - RetryStrategy: Wait time calculation between attempts
    - ExponentialBackoff: Base delay growth between retries
    - RetryExecutor: Synchronous attempt loop
"""

from __future__ import annotations

__all__ = [
    "AttemptOutcome",
    "AttemptState",
    "ExecutionState",
    "ExponentialBackoff",
    "RetryDecider",
    "RetryExecutor",
    "RetryOption",
    "RetryStrategy",
]

from arequest.retry.decider import RetryDecider
from arequest.retry.executor import RetryExecutor
from arequest.retry.option import RetryOption
from arequest.retry.state import AttemptOutcome, AttemptState, ExecutionState
from arequest.retry.strategy import ExponentialBackoff, RetryStrategy
