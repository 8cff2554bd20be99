from __future__ import annotations

import pytest

from arequest.core import validate_proxy_params, validate_retry_params, validate_timeout

#######################################
#     Tests for validate_timeout     #
#######################################


@pytest.mark.parametrize("timeout", [0, 0.1, 1.0, 30.0, 100])
def test_validate_timeout_accepts_valid_values(timeout: float) -> None:
    """Test that validate_timeout accepts zero and positive values."""
    validate_timeout(timeout)


@pytest.mark.parametrize("timeout", [-1, -0.5])
def test_validate_timeout_rejects_negative(timeout: float) -> None:
    with pytest.raises(ValueError, match=r"timeout must be >= 0, got -"):
        validate_timeout(timeout)


###########################################
#     Tests for validate_retry_params     #
###########################################


def _retry_params(**kwargs: object) -> dict[str, object]:
    params = {
        "max_retries": 3,
        "retry_interval": 1.0,
        "maximum_retry_wait_time": 120.0,
        "backoff_factor": 2.0,
    }
    params.update(kwargs)
    return params


@pytest.mark.parametrize(
    "params",
    [
        _retry_params(),
        _retry_params(max_retries=0),
        _retry_params(maximum_retry_wait_time=0),
        _retry_params(backoff_factor=1),
        _retry_params(status_codes_to_retry=[100, 503, 599]),
    ],
)
def test_validate_retry_params_accepts_valid_values(params: dict[str, object]) -> None:
    validate_retry_params(**params)


@pytest.mark.parametrize(
    ("params", "message"),
    [
        (_retry_params(max_retries=-1), r"max_retries must be >= 0, got -1"),
        (_retry_params(retry_interval=0), r"retry_interval must be > 0, got 0"),
        (_retry_params(retry_interval=-1.0), r"retry_interval must be > 0, got -1.0"),
        (
            _retry_params(maximum_retry_wait_time=-5),
            r"maximum_retry_wait_time must be >= 0, got -5",
        ),
        (_retry_params(backoff_factor=0.5), r"backoff_factor must be >= 1, got 0.5"),
        (_retry_params(status_codes_to_retry=[99]), r"status code must be in the range 100-599"),
        (_retry_params(status_codes_to_retry=[600]), r"got 600"),
    ],
)
def test_validate_retry_params_rejects_invalid_values(
    params: dict[str, object], message: str
) -> None:
    with pytest.raises(ValueError, match=message):
        validate_retry_params(**params)


###########################################
#     Tests for validate_proxy_params     #
###########################################


@pytest.mark.parametrize("port", [1, 1080, 65535])
def test_validate_proxy_params_accepts_valid_values(port: int) -> None:
    validate_proxy_params("proxy.local", port)


def test_validate_proxy_params_rejects_empty_address() -> None:
    with pytest.raises(ValueError, match=r"proxy address must not be empty"):
        validate_proxy_params("", 1080)


@pytest.mark.parametrize("port", [0, -1, 65536])
def test_validate_proxy_params_rejects_invalid_port(port: int) -> None:
    with pytest.raises(ValueError, match=r"proxy port must be in the range 1-65535"):
        validate_proxy_params("proxy.local", port)
