from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import pytest

from arequest.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    correlation_scope,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> Generator[None, None, None]:
    clear_correlation_id()
    yield
    clear_correlation_id()


def make_record(message: str = "hello", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord("arequest.test", logging.INFO, __file__, 42, message, (), None)
    record.__dict__.update(extra)
    return record


#######################################
#     Tests for correlation IDs     #
#######################################


def test_correlation_id_default() -> None:
    assert get_correlation_id() is None


def test_set_and_clear_correlation_id() -> None:
    set_correlation_id("req-1")
    assert get_correlation_id() == "req-1"
    clear_correlation_id()
    assert get_correlation_id() is None


def test_correlation_scope_restores_previous() -> None:
    set_correlation_id("outer")
    with correlation_scope("inner"):
        assert get_correlation_id() == "inner"
    assert get_correlation_id() == "outer"


def test_correlation_scope_restores_on_error() -> None:
    with pytest.raises(RuntimeError, match=r"boom"), correlation_scope("inner"):
        raise RuntimeError("boom")
    assert get_correlation_id() is None


##########################################
#     Tests for StructuredFormatter     #
##########################################


def test_structured_formatter_fields() -> None:
    payload = json.loads(StructuredFormatter().format(make_record("done")))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "arequest.test"
    assert payload["message"] == "done"
    assert payload["line"] == 42
    assert payload["timestamp"].endswith("Z")
    assert "correlation_id" not in payload
    assert "exception" not in payload


def test_structured_formatter_extra_fields() -> None:
    record = make_record(attempt=2, wait_time=1.5, method="GET")
    payload = json.loads(StructuredFormatter().format(record))

    assert payload["attempt"] == 2
    assert payload["wait_time"] == 1.5
    assert payload["method"] == "GET"


def test_structured_formatter_non_serializable_extra() -> None:
    payload = json.loads(StructuredFormatter().format(make_record(value=object)))
    assert payload["value"] == str(object)


def test_structured_formatter_correlation_id() -> None:
    with correlation_scope("req-42"):
        payload = json.loads(StructuredFormatter().format(make_record()))
    assert payload["correlation_id"] == "req-42"


def test_structured_formatter_exception() -> None:
    try:
        raise ValueError("bad value")
    except ValueError:
        record = logging.LogRecord(
            "arequest.test", logging.ERROR, __file__, 1, "failed", (), sys.exc_info()
        )
    payload = json.loads(StructuredFormatter().format(record))
    assert "ValueError: bad value" in payload["exception"]


#####################################
#     Tests for log_structured     #
#####################################


def test_log_structured(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("arequest.test.structured")
    with caplog.at_level(logging.DEBUG, logger="arequest.test.structured"):
        log_structured(logger, logging.DEBUG, "retrying", attempt=1, wait_time=2.0)

    assert len(caplog.records) == 1
    record = caplog.records[0]
    assert record.getMessage() == "retrying"
    assert record.attempt == 1
    assert record.wait_time == 2.0
    assert record.funcName == "test_log_structured"


def test_log_structured_disabled_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("arequest.test.structured")
    with caplog.at_level(logging.WARNING, logger="arequest.test.structured"):
        log_structured(logger, logging.DEBUG, "retrying", attempt=1)

    assert caplog.records == []
