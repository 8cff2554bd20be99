from __future__ import annotations

import pytest

from arequest.core.config import RetryConfig
from arequest.retry import RetryDecider, RetryOption
from arequest.retry.state import AttemptOutcome


@pytest.fixture
def decider() -> RetryDecider:
    return RetryDecider(RetryConfig(retries_enabled=True, max_retries=3, retry_on_timeout=True))


############################################
#     Tests for should_consider_retry     #
############################################


@pytest.mark.parametrize("method", ["GET", "PUT", "get", "put"])
def test_should_consider_retry_global_settings_retry_methods(
    decider: RetryDecider, method: str
) -> None:
    """Test that the configured methods are retried with the global
    settings."""
    assert decider.should_consider_retry(RetryOption.USE_GLOBAL_SETTINGS, method)


@pytest.mark.parametrize("method", ["POST", "PATCH", "DELETE", "HEAD", "OPTIONS"])
def test_should_consider_retry_global_settings_other_methods(
    decider: RetryDecider, method: str
) -> None:
    """Test that other methods are not retried with the global
    settings."""
    assert not decider.should_consider_retry(RetryOption.USE_GLOBAL_SETTINGS, method)


@pytest.mark.parametrize("method", ["GET", "POST", "DELETE"])
def test_should_consider_retry_enable_retry(decider: RetryDecider, method: str) -> None:
    """Test that ENABLE_RETRY ignores the method list."""
    assert decider.should_consider_retry(RetryOption.ENABLE_RETRY, method)


@pytest.mark.parametrize("method", ["GET", "POST"])
def test_should_consider_retry_disable_retry(decider: RetryDecider, method: str) -> None:
    assert not decider.should_consider_retry(RetryOption.DISABLE_RETRY, method)


@pytest.mark.parametrize("option", list(RetryOption))
def test_should_consider_retry_retries_disabled(option: RetryOption) -> None:
    """Test that no option re-enables retries disabled on the client."""
    decider = RetryDecider(RetryConfig(retries_enabled=False))
    assert not decider.should_consider_retry(option, "GET")


def test_should_consider_retry_custom_methods() -> None:
    decider = RetryDecider(RetryConfig(retries_enabled=True, methods_to_retry={"post"}))
    assert decider.should_consider_retry(RetryOption.USE_GLOBAL_SETTINGS, "POST")
    assert not decider.should_consider_retry(RetryOption.USE_GLOBAL_SETTINGS, "GET")


#########################################
#     Tests for is_retry_warranted     #
#########################################


@pytest.mark.parametrize("status_code", [408, 413, 429, 500, 502, 503, 504, 521, 522, 524])
def test_is_retry_warranted_retryable_status(decider: RetryDecider, status_code: int) -> None:
    outcome = AttemptOutcome(status_code=status_code, headers={})
    assert decider.is_retry_warranted(outcome, attempt=0)


@pytest.mark.parametrize("status_code", [200, 201, 301, 400, 401, 404, 501])
def test_is_retry_warranted_non_retryable_status(decider: RetryDecider, status_code: int) -> None:
    outcome = AttemptOutcome(status_code=status_code, headers={})
    assert not decider.is_retry_warranted(outcome, attempt=0)


def test_is_retry_warranted_retry_after_header(decider: RetryDecider) -> None:
    """Test that a Retry-After header warrants a retry whatever the
    status code."""
    outcome = AttemptOutcome(status_code=200, headers={"retry-after": "3"})
    assert decider.is_retry_warranted(outcome, attempt=0)


def test_is_retry_warranted_max_retries_reached(decider: RetryDecider) -> None:
    outcome = AttemptOutcome(status_code=503, headers={})
    assert decider.is_retry_warranted(outcome, attempt=2)
    assert not decider.is_retry_warranted(outcome, attempt=3)
    assert not decider.is_retry_warranted(outcome, attempt=4)


def test_is_retry_warranted_timeout(decider: RetryDecider) -> None:
    outcome = AttemptOutcome(error="operation timed out", is_timeout=True)
    assert decider.is_retry_warranted(outcome, attempt=0)


def test_is_retry_warranted_timeout_not_enabled() -> None:
    decider = RetryDecider(RetryConfig(retries_enabled=True, retry_on_timeout=False))
    outcome = AttemptOutcome(error="operation timed out", is_timeout=True)
    assert not decider.is_retry_warranted(outcome, attempt=0)


def test_is_retry_warranted_other_transport_error(decider: RetryDecider) -> None:
    """Test that transport errors other than timeouts are never
    retried."""
    outcome = AttemptOutcome(error="Could not resolve host")
    assert not decider.is_retry_warranted(outcome, attempt=0)


def test_retry_decider_repr(decider: RetryDecider) -> None:
    assert repr(decider).startswith("RetryDecider(config=RetryConfig(")
