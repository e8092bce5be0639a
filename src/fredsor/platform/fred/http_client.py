"""Where: src/fredsor/platform/fred/http_client.py
What: Blocking HTTP adapter used by the dispatcher for a single GET exchange.
Why: Keep ``requests`` behind a small protocol so tests can swap the network out.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

import requests

from fredsor.config.settings import USER_AGENT
from fredsor.platform.logging import logger

from .results import TransportError


@dataclass(slots=True, frozen=True)
class HTTPResponse:
    """Status and undecoded body of a completed exchange."""

    status: int
    body: bytes


class HTTPTransport(Protocol):
    """Protocol for transports able to perform one GET request."""

    def get(self, url: str) -> HTTPResponse:
        """Fetch ``url``.

        Raises:
            TransportError: When no HTTP response was received.
        """

        ...


class RequestsTransport:
    """Perform GET requests through a ``requests`` session.

    Redirects are followed and no ``Referer`` header is sent. No timeout is
    set, so the platform default applies.
    """

    def __init__(self, session: requests.Session | None = None, user_agent: str = USER_AGENT) -> None:
        self._session: requests.Session = session or requests.Session()
        self._headers: dict[str, str] = {
            "Accept": "application/json, application/xml;q=0.9, */*;q=0.1",
            "User-Agent": user_agent,
        }

    def get(self, url: str) -> HTTPResponse:
        try:
            response = self._session.get(url, headers=self._headers, allow_redirects=True)
            body = response.content
        except requests.RequestException as exc:
            logger.debug("FRED request error: %s", exc)
            raise TransportError(str(exc) or exc.__class__.__name__) from exc

        return HTTPResponse(status=int(response.status_code), body=body)

    def close(self) -> None:
        self._session.close()


__all__ = [
    "HTTPResponse",
    "HTTPTransport",
    "RequestsTransport",
]
