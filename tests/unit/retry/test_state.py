from __future__ import annotations

import pytest

from arequest.retry import AttemptOutcome, AttemptState, ExecutionState
from tests.helpers import error_result, response_result

#####################################
#     Tests for AttemptOutcome     #
#####################################


def test_attempt_outcome_response() -> None:
    outcome = AttemptOutcome(status_code=200, headers={"Content-Type": "text/plain"}, body=b"ok")
    assert outcome.succeeded
    assert outcome.error is None
    assert not outcome.is_timeout


def test_attempt_outcome_error() -> None:
    outcome = AttemptOutcome(error="Connection refused")
    assert not outcome.succeeded
    assert outcome.status_code is None
    assert outcome.headers is None


def test_attempt_outcome_rejects_error_and_status_code() -> None:
    with pytest.raises(ValueError, match=r"either an error or a status code"):
        AttemptOutcome(status_code=200, error="boom")


def test_attempt_outcome_from_transport_result_response() -> None:
    result = response_result(
        503, [("Retry-After", "5"), ("Set-Cookie", "a=1"), ("Set-Cookie", "b=2")], b"busy"
    )
    outcome = AttemptOutcome.from_transport_result(result)

    assert outcome.status_code == 503
    assert outcome.headers == {"Retry-After": "5", "Set-Cookie": ["a=1", "b=2"]}
    assert outcome.body == b"busy"
    assert outcome.succeeded


def test_attempt_outcome_from_transport_result_error() -> None:
    outcome = AttemptOutcome.from_transport_result(
        error_result("operation timed out", is_timeout=True)
    )

    assert outcome.error == "operation timed out"
    assert outcome.is_timeout
    assert outcome.status_code is None
    assert not outcome.succeeded


###################################
#     Tests for AttemptState     #
###################################


def test_attempt_state_defaults() -> None:
    state = AttemptState(remaining_wait_budget=120.0)
    assert state.attempt == 0
    assert state.wait_time == 0.0


def test_attempt_state_consume_wait() -> None:
    state = AttemptState(remaining_wait_budget=10.0, wait_time=2.5)
    assert state.consume_wait() == 2.5
    assert state.remaining_wait_budget == 7.5
    assert state.consume_wait() == 2.5
    assert state.remaining_wait_budget == 5.0


def test_execution_state_values() -> None:
    assert [state.value for state in ExecutionState] == [
        "attempting",
        "waiting",
        "succeeded",
        "failed",
    ]
