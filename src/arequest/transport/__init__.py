r"""Transports performing the network call of one attempt."""

from __future__ import annotations

__all__ = ["BaseTransport", "HttpxTransport", "TransportOptions", "TransportResult"]

from arequest.transport.base import BaseTransport, TransportOptions, TransportResult
from arequest.transport.httpx_transport import HttpxTransport
