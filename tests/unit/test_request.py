from __future__ import annotations

import pytest

from arequest import Request, RetryOption, ValidationError


def test_request_defaults() -> None:
    request = Request("https://api.example.com/items")
    assert request.url == "https://api.example.com/items"
    assert request.method == "GET"
    assert request.headers == {}
    assert request.body is None
    assert request.retry_option is RetryOption.USE_GLOBAL_SETTINGS


def test_request_normalizes() -> None:
    request = Request(
        "https://api.example.com//items///1",
        "delete",
        headers={"Accept": "application/json"},
        retry_option="disable_retry",
    )
    assert request.url == "https://api.example.com/items/1"
    assert request.method == "DELETE"
    assert request.headers == {"Accept": "application/json"}
    assert request.retry_option is RetryOption.DISABLE_RETRY


def test_request_invalid_url() -> None:
    with pytest.raises(ValidationError, match=r"Invalid URL format: 'example.com/items'"):
        Request("example.com/items")


def test_request_invalid_retry_option() -> None:
    with pytest.raises(ValueError, match=r"'always'"):
        Request("https://api.example.com", retry_option="always")


def test_request_repr() -> None:
    assert repr(Request("https://api.example.com", "post")) == (
        "<Request [POST https://api.example.com]>"
    )


################################
#     Tests for query_url     #
################################


def test_query_url_get_with_params() -> None:
    request = Request("https://api.example.com/s?lang=en", body={"q": "x", "page": 2})
    assert request.query_url == "https://api.example.com/s?lang=en&q=x&page=2"


def test_query_url_get_without_params() -> None:
    assert Request("https://api.example.com/s").query_url == "https://api.example.com/s"


def test_query_url_post_ignores_body() -> None:
    request = Request("https://api.example.com/s", "POST", body={"q": "x"})
    assert request.query_url == "https://api.example.com/s"


###################################
#     Tests for encoded_body     #
###################################


def test_encoded_body_get_is_none() -> None:
    assert Request("https://api.example.com", body={"q": "x"}).encoded_body() is None


def test_encoded_body_none() -> None:
    assert Request("https://api.example.com", "POST").encoded_body() is None


@pytest.mark.parametrize(
    ("body", "expected"),
    [
        (b"\x00raw", b"\x00raw"),
        ('{"name": "é"}', '{"name": "é"}'.encode()),
        ({"name": "ada", "admin": False}, b"name=ada&admin=0"),
    ],
)
def test_encoded_body(body: object, expected: bytes) -> None:
    assert Request("https://api.example.com", "PUT", body=body).encoded_body() == expected


def test_encoded_body_unsupported_type() -> None:
    with pytest.raises(TypeError, match=r"Unsupported body type: int"):
        Request("https://api.example.com", "POST", body=42).encoded_body()
