r"""Helpers building request bodies."""

from __future__ import annotations

__all__ = ["form", "json"]

import json as _json
from typing import TYPE_CHECKING, Any
from urllib.parse import urlencode

from arequest.utils.url import flatten_params

if TYPE_CHECKING:
    from collections.abc import Mapping


def json(data: Any) -> str:
    """Encode a value as a JSON body.

    Example:
        ```pycon
        >>> from arequest import body
        >>> body.json(["foo", "bar"])
        '["foo", "bar"]'

        ```
    """
    return _json.dumps(data)


def form(data: Mapping[str, Any] | str) -> str:
    """Encode parameters as an ``application/x-www-form-urlencoded``
    body.

    Nested mappings and lists are flattened to bracketed keys. A string
    is assumed to be encoded already and is returned unchanged.

    Example:
        ```pycon
        >>> from arequest import body
        >>> body.form({"foo": "bar", "bar": "baz"})
        'foo=bar&bar=baz'
        >>> body.form("foo=bar&bar=baz")
        'foo=bar&bar=baz'

        ```
    """
    if isinstance(data, str):
        return data
    pairs = [
        (key, int(value) if isinstance(value, bool) else value)
        for key, value in flatten_params(data).items()
        if value is not None
    ]
    return urlencode(pairs)
