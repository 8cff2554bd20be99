r"""HTTP response with best-effort JSON decoding."""

from __future__ import annotations

__all__ = ["Response", "decode_json"]

import json
import logging
from decimal import Decimal
from typing import TYPE_CHECKING, Any

from arequest.core.config import JsonOptions
from arequest.utils.headers import get_header

if TYPE_CHECKING:
    from arequest.utils.headers import HeaderValue

logger: logging.Logger = logging.getLogger(__name__)

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_int_keep_big(value: str) -> int | str:
    number = int(value)
    if _INT64_MIN <= number <= _INT64_MAX:
        return number
    return value


def _nesting_depth(value: Any) -> int:
    depth = 0
    level = [value]
    while level:
        containers = [item for item in level if isinstance(item, (dict, list))]
        if not containers:
            break
        depth += 1
        level = [
            child
            for item in containers
            for child in (item.values() if isinstance(item, dict) else item)
        ]
    return depth


def decode_json(raw_body: bytes, options: JsonOptions | None = None) -> Any:
    """Decode a JSON document according to ``JsonOptions``.

    The nesting depth counts arrays and objects: ``[]`` has depth 1 and
    ``[[1]]`` has depth 2. Documents deeper than ``options.max_depth``
    are rejected.

    Args:
        raw_body: The raw document.
        options: The decoding options. Defaults to ``JsonOptions()``.

    Returns:
        The decoded value.

    Raises:
        ValueError: If the document is not valid JSON or is nested too
            deeply. ``UnicodeDecodeError`` and ``json.JSONDecodeError``
            are both subclasses of ``ValueError``.

    Example:
        ```pycon
        >>> from arequest.core.config import JsonOptions
        >>> from arequest.response import decode_json
        >>> decode_json(b'{"price": 1.10}', JsonOptions(use_decimal=True))
        {'price': Decimal('1.10')}

        ```
    """
    options = options or JsonOptions()
    try:
        value = json.loads(
            raw_body,
            strict=options.strict,
            parse_float=Decimal if options.use_decimal else None,
            parse_int=_parse_int_keep_big if options.big_int_as_string else None,
        )
    except RecursionError as exc:
        msg = "maximum JSON nesting depth exceeded"
        raise ValueError(msg) from exc
    if _nesting_depth(value) > options.max_depth:
        msg = f"maximum JSON nesting depth of {options.max_depth} exceeded"
        raise ValueError(msg)
    return value


class Response:
    """Response of a logical request.

    ``body`` holds the JSON-decoded raw body when decoding succeeds and
    the raw body itself otherwise. A decoding failure is never an error.

    Args:
        status_code: The HTTP status code.
        raw_body: The raw response body.
        headers: The parsed response headers.
        json_options: Options for decoding the body as JSON.

    Example:
        ```pycon
        >>> from arequest.response import Response
        >>> Response(200, b'{"a": 1}', {}).body
        {'a': 1}
        >>> Response(200, b"plain text", {}).body
        b'plain text'

        ```
    """

    def __init__(
        self,
        status_code: int,
        raw_body: bytes,
        headers: dict[str, HeaderValue],
        json_options: JsonOptions | None = None,
    ) -> None:
        self.status_code = status_code
        self.raw_body = raw_body
        self.headers = headers
        self.body: Any = raw_body
        try:
            self.body = decode_json(raw_body, json_options)
        except ValueError:
            logger.debug("Response body is not JSON, keeping the raw body")

    def __repr__(self) -> str:
        return f"<{self.__class__.__qualname__} [{self.status_code}]>"

    def json(self) -> Any:
        """Return the decoded body.

        Returns:
            The JSON-decoded body, or the raw body if it is not valid
            JSON. Same value as ``body``.
        """
        return self.body

    @property
    def text(self) -> str:
        r"""The raw body decoded as UTF-8, invalid bytes replaced."""
        return self.raw_body.decode("utf-8", errors="replace")

    def header(self, name: str) -> str | None:
        """Look up a response header, ignoring the case of the name.

        Args:
            name: The header name.

        Returns:
            The header value, the first one if the header was repeated,
            or None if absent.
        """
        return get_header(self.headers, name)
