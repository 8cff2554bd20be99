r"""State objects of one logical request.

An ``AttemptOutcome`` describes the result of one transport call and an
``AttemptState`` tracks the retry bookkeeping of one logical request.
Both are created per request and never shared.
"""

from __future__ import annotations

__all__ = ["AttemptOutcome", "AttemptState", "ExecutionState"]

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from arequest.utils.headers import parse_headers

if TYPE_CHECKING:
    from arequest.transport.base import TransportResult
    from arequest.utils.headers import HeaderValue


class ExecutionState(Enum):
    """States of the request executor."""

    ATTEMPTING = "attempting"
    WAITING = "waiting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class AttemptOutcome:
    """Outcome of one attempt.

    Either ``error`` is set, or ``status_code`` and ``headers`` are set,
    never both.

    Attributes:
        status_code: The HTTP status code, or None on transport error.
        headers: The parsed response headers, or None on transport error.
        error: The transport error message, or None.
        is_timeout: Whether the transport error is an operation timeout.
        body: The raw response body.
        cause: The exception raised by the transport library, if any.

    Example:
        ```pycon
        >>> from arequest.retry.state import AttemptOutcome
        >>> outcome = AttemptOutcome(status_code=503, headers={"Retry-After": "5"})
        >>> outcome.succeeded
        True
        >>> AttemptOutcome(error="operation timed out", is_timeout=True).succeeded
        False

        ```
    """

    status_code: int | None = None
    headers: dict[str, HeaderValue] | None = None
    error: str | None = None
    is_timeout: bool = False
    body: bytes = b""
    cause: BaseException | None = field(default=None, repr=False)

    def __post_init__(self) -> None:
        if self.error is not None and self.status_code is not None:
            msg = "an attempt outcome has either an error or a status code, not both"
            raise ValueError(msg)

    @property
    def succeeded(self) -> bool:
        r"""Whether the transport call completed without error."""
        return self.error is None

    @classmethod
    def from_transport_result(cls, result: TransportResult) -> AttemptOutcome:
        """Create the outcome of a transport call.

        Args:
            result: The raw transport result.

        Returns:
            The attempt outcome, with headers parsed when the call
            succeeded.
        """
        if result.error is not None:
            return cls(error=result.error, is_timeout=result.is_timeout, cause=result.cause)
        return cls(
            status_code=result.status_code,
            headers=parse_headers(result.raw_headers),
            body=result.body,
        )


@dataclass
class AttemptState:
    """Mutable retry bookkeeping of one logical request.

    Attributes:
        remaining_wait_budget: Seconds left in the cumulative wait budget.
        attempt: Number of retries scheduled so far.
        wait_time: Wait before the next attempt, ``0.0`` to stop.
    """

    remaining_wait_budget: float
    attempt: int = 0
    wait_time: float = 0.0

    def consume_wait(self) -> float:
        """Charge the pending wait time to the budget.

        Returns:
            The wait time that was charged.
        """
        self.remaining_wait_budget -= self.wait_time
        return self.wait_time
