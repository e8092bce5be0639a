"""Where: src/fredsor/platform/fred/results.py
What: Outcome types for dispatched requests and the library error hierarchy.
Why: Every call resolves to exactly one of success, service error, or transport failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, TypeAlias


class FredError(Exception):
    """Base class for errors raised by the FRED client."""


class InvalidParameterError(FredError, ValueError):
    """A parameter value lies outside its closed domain."""


class ResponseDecodeError(FredError, ValueError):
    """A successful response body could not be decoded as requested."""


class TransportError(FredError):
    """The exchange ended before any HTTP response was received."""


@dataclass(slots=True, frozen=True)
class Success:
    """HTTP 2xx reply with content decoded per the requested format."""

    status: int
    content: Any


@dataclass(slots=True, frozen=True)
class ServiceError:
    """The service answered with a non-success status.

    ``body`` holds the undecoded reply; it is never parsed.
    """

    status: int
    body: bytes = b""


@dataclass(slots=True, frozen=True)
class TransportFailure:
    """No HTTP response exists (DNS failure, refused or aborted connection).

    ``reason`` has API keys masked; ``error`` keeps the original exception.
    """

    reason: str
    error: BaseException | None = None


FredResult: TypeAlias = Success | ServiceError | TransportFailure


__all__ = [
    "FredError",
    "FredResult",
    "InvalidParameterError",
    "ResponseDecodeError",
    "ServiceError",
    "Success",
    "TransportError",
    "TransportFailure",
]
