"""Where: src/fredsor/platform/fred/dispatcher.py
What: Execute assembled FRED queries and normalise every outcome into a result.
Why: Endpoint methods only supply a path and parameters; everything about
     the exchange itself lives here.

Each call reads the connection configuration once, injects ``file_type`` and
``api_key`` after the caller's parameters, runs the blocking transport in a
worker thread and returns exactly one of ``Success``, ``ServiceError`` or
``TransportFailure``. Configuration mutators are not synchronised; calls that
already read the configuration keep the old values.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Mapping
from typing import Any, Final
from urllib.parse import urlencode

from fredsor.config.settings import DEFAULT_BASE_URL
from fredsor.platform.logging import logger, mask_secrets

from .enums import ResponseFormat
from .http_client import HTTPResponse, HTTPTransport, RequestsTransport
from .results import (
    FredResult,
    ResponseDecodeError,
    ServiceError,
    Success,
    TransportError,
    TransportFailure,
)

FILE_TYPE_PARAM: Final[str] = "file_type"
API_KEY_PARAM: Final[str] = "api_key"


def join_url(base_url: str, path: str) -> str:
    """Join ``base_url`` and ``path`` as path segments.

    Leading and trailing slashes on either side never produce ``//`` and never
    drop a segment.
    """
    base = base_url.rstrip("/")
    segments = [segment for segment in path.split("/") if segment]
    if not segments:
        return base
    return f"{base}/{'/'.join(segments)}"


def build_query(
    params: Mapping[str, str],
    response_format: ResponseFormat,
    api_key: str,
) -> dict[str, str]:
    """Copy ``params`` and inject the mandatory parameters, which always win."""

    query = dict(params)
    query[FILE_TYPE_PARAM] = response_format.file_type
    query[API_KEY_PARAM] = api_key
    return query


def decode_body(body: bytes, response_format: ResponseFormat) -> Any:
    """Decode a successful reply body for ``response_format``.

    Raises:
        ResponseDecodeError: If ``OBJECT`` was requested and the body is not JSON.
    """
    if response_format is not ResponseFormat.OBJECT:
        return body
    try:
        return json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError) as exc:
        raise ResponseDecodeError(f"Response body is not valid JSON: {exc}") from exc


class FredDispatcher:
    """Owns the connection configuration and performs FRED requests."""

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        transport: HTTPTransport | None = None,
    ) -> None:
        self._api_key: str = api_key or ""
        self._base_url: str = base_url or DEFAULT_BASE_URL
        self._transport: HTTPTransport = transport or RequestsTransport()

    @property
    def api_key(self) -> str:
        return self._api_key

    @property
    def base_url(self) -> str:
        return self._base_url

    def set_api_key(self, api_key: str) -> None:
        self._api_key = api_key

    def set_base_url(self, base_url: str) -> None:
        self._base_url = base_url

    def build_url(
        self,
        path: str,
        params: Mapping[str, str],
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> str:
        """Return the full request URL using the current configuration."""

        return self._build_url(self._base_url, self._api_key, path, params, response_format)

    @staticmethod
    def _build_url(
        base_url: str,
        api_key: str,
        path: str,
        params: Mapping[str, str],
        response_format: ResponseFormat,
    ) -> str:
        query = build_query(params, response_format, api_key)
        return f"{join_url(base_url, path)}?{urlencode(query)}"

    async def execute(
        self,
        path: str,
        params: Mapping[str, str],
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        """Perform one GET request and resolve it into a result.

        Args:
            path: Endpoint path such as ``/fred/category/children``.
            params: Assembled caller parameters.
            response_format: Wire format and decoding strategy.

        Returns:
            FredResult: ``Success``, ``ServiceError`` or ``TransportFailure``.

        Raises:
            ResponseDecodeError: If the reply succeeded but its body cannot be
                decoded for ``response_format``.
        """
        base_url, api_key = self._base_url, self._api_key
        url = self._build_url(base_url, api_key, path, params, response_format)
        logger.debug("FRED GET %s", url)

        try:
            response: HTTPResponse = await asyncio.to_thread(self._transport.get, url)
        except (TransportError, OSError) as exc:
            logger.warning("FRED transport failure for %s: %s", path, exc)
            return TransportFailure(reason=mask_secrets(str(exc)) or exc.__class__.__name__, error=exc)

        if not 200 <= response.status < 300:
            logger.warning("FRED HTTP error: status=%s path=%s", response.status, path)
            return ServiceError(status=response.status, body=response.body)

        return Success(status=response.status, content=decode_body(response.body, response_format))


__all__ = [
    "API_KEY_PARAM",
    "DEFAULT_BASE_URL",
    "FILE_TYPE_PARAM",
    "FredDispatcher",
    "build_query",
    "decode_body",
    "join_url",
]
