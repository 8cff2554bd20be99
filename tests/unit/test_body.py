from __future__ import annotations

import json

from arequest import body


def test_json_body() -> None:
    assert json.loads(body.json({"name": "ada", "tags": ["a"]})) == {"name": "ada", "tags": ["a"]}


def test_json_body_scalar() -> None:
    assert body.json(None) == "null"


def test_form_body() -> None:
    assert body.form({"name": "ada lovelace", "age": 36}) == "name=ada+lovelace&age=36"


def test_form_body_nested() -> None:
    assert body.form({"user": {"name": "ada"}, "ids": [1, 2]}) == (
        "user%5Bname%5D=ada&ids%5B0%5D=1&ids%5B1%5D=2"
    )


def test_form_body_booleans_and_none() -> None:
    assert body.form({"a": True, "b": False, "c": None}) == "a=1&b=0"


def test_form_body_string_unchanged() -> None:
    assert body.form("a=1&b=%20") == "a=1&b=%20"


def test_form_body_empty() -> None:
    assert body.form({}) == ""
