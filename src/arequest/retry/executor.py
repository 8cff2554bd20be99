r"""Synchronous retry executor.

This module provides the RetryExecutor class that drives the attempt
loop of one logical request: call the transport, decide whether and how
long to wait, sleep, and finally return a response or raise the last
transport error.
"""

from __future__ import annotations

__all__ = ["RetryExecutor"]

import logging
from typing import TYPE_CHECKING

from arequest.exceptions import TransportError
from arequest.response import Response
from arequest.retry.decider import RetryDecider
from arequest.retry.option import RetryOption
from arequest.retry.state import AttemptOutcome, AttemptState, ExecutionState
from arequest.retry.strategy import RetryStrategy
from arequest.utils.sleep import sleep
from arequest.utils.structured_logging import log_structured

if TYPE_CHECKING:
    from arequest.core.config import JsonOptions, RetryConfig
    from arequest.transport.base import BaseTransport, TransportOptions

logger: logging.Logger = logging.getLogger(__name__)


class RetryExecutor:
    """Executes logical requests with automatic retry logic.

    The executor is owned by one client. It is parameterized over an
    injected transport and keeps a diagnostic count of the transport
    calls that established or reused a connection.

    The loop goes through the states ``ATTEMPTING`` and ``WAITING``
    until it ends in ``SUCCEEDED`` or ``FAILED``:
    1. the transport is reset and the retry gate is computed once;
    2. the transport is called exactly once per attempt;
    3. the next wait is computed if retrying is considered, ``0.0``
       otherwise, and the loop stops on a wait of ``0.0``;
    4. before each retry the executor sleeps for the wait and charges it
       to the cumulative budget.

    Running out of retries or budget is not an error of its own: the
    outcome of the last attempt becomes the result.

    Args:
        config: The retry configuration of the client.
        transport: The transport performing one network call per attempt.
        json_options: Options for decoding response bodies.

    Example:
        ```pycon
        >>> import httpx
        >>> from arequest.core.config import ClientConfig, RetryConfig
        >>> from arequest.retry import RetryExecutor, RetryOption
        >>> from arequest.transport import HttpxTransport, TransportOptions
        >>> mock = httpx.MockTransport(lambda request: httpx.Response(200, json={"ok": True}))
        >>> transport = HttpxTransport(ClientConfig(transport_options={"transport": mock}))
        >>> executor = RetryExecutor(RetryConfig(retries_enabled=True), transport)
        >>> response = executor.execute(TransportOptions(url="https://example.com", method="GET"))
        >>> response.status_code, response.body
        (200, {'ok': True})
        >>> transport.close()

        ```
    """

    def __init__(
        self,
        config: RetryConfig,
        transport: BaseTransport,
        json_options: JsonOptions | None = None,
    ) -> None:
        self.config = config
        self.transport = transport
        self.json_options = json_options
        self.decider: RetryDecider = RetryDecider(config)
        self.strategy: RetryStrategy = RetryStrategy(config, decider=self.decider)
        self.state: ExecutionState | None = None
        self._total_number_of_connections = 0

    @property
    def total_number_of_connections(self) -> int:
        r"""Number of transport calls that established or reused a
        connection."""
        return self._total_number_of_connections

    def reset_connection_count(self) -> None:
        """Reset the connection counter, e.g. after the transport handle
        was replaced."""
        self._total_number_of_connections = 0

    def execute(
        self,
        options: TransportOptions,
        retry_option: RetryOption = RetryOption.USE_GLOBAL_SETTINGS,
    ) -> Response:
        """Execute one logical request.

        Args:
            options: The resolved transport options of the request.
            retry_option: The per-request retry override.

        Returns:
            The response of the last attempt, whatever its status code.

        Raises:
            TransportError: If the last attempt failed at the transport
                level.
        """
        self.transport.reset()
        method, url = options.method, options.url
        consider_retry = self.decider.should_consider_retry(retry_option, method)
        state = AttemptState(remaining_wait_budget=self.config.maximum_retry_wait_time)

        while True:
            if state.attempt > 0:
                self._transition(ExecutionState.WAITING)
                sleep(state.consume_wait())
            self._transition(ExecutionState.ATTEMPTING)
            outcome = self._attempt(options, state.attempt)
            state.wait_time = 0.0
            if consider_retry:
                state.wait_time = self.strategy.compute_wait_time(
                    outcome, state.attempt, state.remaining_wait_budget
                )
                state.attempt += 1
            if state.wait_time == 0.0:
                break
            log_structured(
                logger,
                logging.DEBUG,
                f"{method} request to {url} will be retried in {state.wait_time:.2f}s",
                method=method,
                url=url,
                attempt=state.attempt,
                wait_time=state.wait_time,
                remaining_budget=state.remaining_wait_budget,
                status_code=outcome.status_code,
                error=outcome.error,
            )

        if not outcome.succeeded:
            self._transition(ExecutionState.FAILED)
            logger.debug(f"{method} request to {url} failed: {outcome.error}")
            raise TransportError(
                method=method,
                url=url,
                message=outcome.error,
                is_timeout=outcome.is_timeout,
                cause=outcome.cause,
            )

        self._transition(ExecutionState.SUCCEEDED)
        logger.debug(f"{method} request to {url} completed with status {outcome.status_code}")
        return Response(outcome.status_code, outcome.body, outcome.headers, self.json_options)

    def _attempt(self, options: TransportOptions, attempt: int) -> AttemptOutcome:
        logger.debug(
            f"{options.method} request to {options.url} "
            f"(attempt {attempt + 1}/{self.config.max_retries + 1})"
        )
        result = self.transport.execute(options)
        if result.connection_established:
            self._total_number_of_connections += 1
        return AttemptOutcome.from_transport_result(result)

    def _transition(self, state: ExecutionState) -> None:
        self.state = state
