r"""Shared test helpers.

This module provides a scripted transport and builders for raw
transport results, so that the retry engine can be tested without any
network access.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from arequest.transport.base import BaseTransport, TransportOptions, TransportResult

if TYPE_CHECKING:
    from collections.abc import Iterable

TEST_URL = "https://api.example.com/data"


def response_result(
    status_code: int = 200,
    headers: Iterable[tuple[str, str]] = (),
    body: bytes = b"",
) -> TransportResult:
    """Build the transport result of a completed HTTP exchange."""
    lines = [f"HTTP/1.1 {status_code} Reason"]
    lines.extend(f"{name}: {value}" for name, value in headers)
    head = ("\r\n".join(lines) + "\r\n\r\n").encode("iso-8859-1")
    return TransportResult(
        raw_response=head + body,
        header_size=len(head),
        status_code=status_code,
        connection_established=True,
    )


def error_result(message: str = "Connection refused", is_timeout: bool = False) -> TransportResult:
    """Build the transport result of a failed call."""
    return TransportResult(error=message, is_timeout=is_timeout)


class FakeTransport(BaseTransport):
    """Transport replaying scripted results.

    Once the script is exhausted, the last result is repeated. Every
    call is recorded in ``calls``.
    """

    def __init__(self, *results: TransportResult) -> None:
        self.results = list(results) or [response_result()]
        self.calls: list[TransportOptions] = []
        self.reset_count = 0
        self.closed = False

    def script(self, *results: TransportResult) -> None:
        self.results = list(results)

    def execute(self, options: TransportOptions) -> TransportResult:
        self.calls.append(options)
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]

    def reset(self) -> None:
        self.reset_count += 1

    def close(self) -> None:
        self.closed = True
