r"""HTTP header utilities.

This module converts between the flat header lines sent by a transport
and the mapping representation used by responses and the retry engine.
"""

from __future__ import annotations

__all__ = ["format_headers", "get_header", "parse_headers"]

from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from collections.abc import Mapping

HeaderValue = Union[str, list[str]]


def parse_headers(raw_headers: str) -> dict[str, HeaderValue]:
    r"""Parse a raw header block into a mapping.

    Each ``name: value`` line becomes an entry. A header that appears
    more than once is collected into a list of values in the order they
    were received. A line starting with a tab continues the value of the
    previous header. Status lines and blank lines are ignored. Header
    names keep the case sent by the server.

    Args:
        raw_headers: The header block, lines separated by ``\n`` or
            ``\r\n``.

    Returns:
        The parsed headers.

    Example:
        ```pycon
        >>> from arequest.utils.headers import parse_headers
        >>> raw = "HTTP/1.1 200 OK\r\nContent-Type: text/plain\r\nSet-Cookie: a=1\r\nSet-Cookie: b=2\r\n\r\n"
        >>> parse_headers(raw)
        {'Content-Type': 'text/plain', 'Set-Cookie': ['a=1', 'b=2']}

        ```
    """
    headers: dict[str, HeaderValue] = {}
    key = ""
    for line in raw_headers.split("\n"):
        if line.startswith("\t"):
            if key:
                _append_continuation(headers, key, line.strip())
            continue
        name, sep, value = line.partition(":")
        if not sep:
            continue
        value = value.strip()
        current = headers.get(name)
        if current is None:
            headers[name] = value
        elif isinstance(current, list):
            current.append(value)
        else:
            headers[name] = [current, value]
        key = name
    return headers


def _append_continuation(headers: dict[str, HeaderValue], key: str, value: str) -> None:
    current = headers[key]
    if isinstance(current, list):
        current[-1] += f"\r\n\t{value}"
    else:
        headers[key] = f"{current}\r\n\t{value}"


def get_header(headers: Mapping[str, HeaderValue] | None, name: str) -> str | None:
    """Look up a header value, ignoring the case of the name.

    Args:
        headers: The headers to search, or None.
        name: The header name.

    Returns:
        The header value, the first value if the header was repeated,
        or None if the header is absent.

    Example:
        ```pycon
        >>> from arequest.utils.headers import get_header
        >>> get_header({"Retry-After": "5"}, "retry-after")
        '5'
        >>> get_header({"Retry-After": "5"}, "content-type") is None
        True

        ```
    """
    if not headers:
        return None
    name = name.lower()
    for key, value in headers.items():
        if key.lower() == name:
            if isinstance(value, list):
                return value[0] if value else None
            return value
    return None


def format_headers(
    default_headers: Mapping[str, str],
    headers: Mapping[str, str] | None,
    user_agent: str,
) -> list[str]:
    """Merge default and request headers into ``name: value`` lines.

    Names are lower-cased and request headers win over default headers.
    A ``user-agent`` header is added when neither defines one, and an
    empty ``expect`` header is added to disable ``Expect: 100-continue``.

    Args:
        default_headers: Headers configured on the client.
        headers: Headers given for this request.
        user_agent: The user agent used when none is given.

    Returns:
        The formatted header lines.

    Example:
        ```pycon
        >>> from arequest.utils.headers import format_headers
        >>> format_headers({"Accept": "*/*"}, {"accept": "application/json"}, "arequest/0.1")
        ['accept: application/json', 'user-agent: arequest/0.1', 'expect:']

        ```
    """
    combined: dict[str, str] = {}
    for key, value in (*default_headers.items(), *(headers or {}).items()):
        combined[key.strip().lower()] = value

    formatted = [f"{key}: {value}" for key, value in combined.items()]
    if "user-agent" not in combined:
        formatted.append(f"user-agent: {user_agent}")
    if "expect" not in combined:
        formatted.append("expect:")
    return formatted
