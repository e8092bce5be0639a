"""Where: src/fredsor/platform/fred/client.py
What: Facade exposing FRED endpoints as coroutine methods.
Why: Each endpoint is only a path plus a parameter list; assembly and
     dispatch are delegated to focused collaborators:

- ``params`` assembles the query mapping and formats wire dates
- ``queries`` holds the per-endpoint parameter sets
- ``dispatcher`` injects credentials, performs the GET and builds results
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Final

from fredsor.config.settings import FRED_API_KEY, FRED_BASE_URL

from .dispatcher import FredDispatcher
from .enums import ResponseFormat, coerce_params
from .http_client import HTTPTransport
from .params import ParamTuple, assemble
from .queries import (
    CategoryQuery,
    CategoryRelatedTagsQuery,
    CategorySeriesQuery,
    CategoryTagsQuery,
    FredQuery,
    ReleaseDatesQuery,
    ReleaseSeriesQuery,
    ReleasesQuery,
)
from .results import FredResult

CATEGORY_PATH: Final[str] = "/fred/category"
CATEGORY_CHILDREN_PATH: Final[str] = "/fred/category/children"
CATEGORY_RELATED_PATH: Final[str] = "/fred/category/related"
CATEGORY_SERIES_PATH: Final[str] = "/fred/category/series"
CATEGORY_TAGS_PATH: Final[str] = "/fred/category/tags"
CATEGORY_RELATED_TAGS_PATH: Final[str] = "/fred/category/related_tags"
RELEASES_PATH: Final[str] = "/fred/releases"
RELEASE_DATES_PATH: Final[str] = "/fred/releases/dates"
RELEASE_SERIES_PATH: Final[str] = "/fred/release/series"


class FredClient:
    """FRED web service client.

    Every endpoint method returns a ``FredResult``; only decode failures and
    invalid enum values raise.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        *,
        transport: HTTPTransport | None = None,
    ) -> None:
        self.dispatcher: FredDispatcher = FredDispatcher(api_key, base_url, transport)

    @classmethod
    def from_settings(cls, *, transport: HTTPTransport | None = None) -> "FredClient":
        """Build a client from the configured API key and base URL."""

        return cls(FRED_API_KEY, FRED_BASE_URL, transport=transport)

    def set_api_key(self, api_key: str) -> None:
        self.dispatcher.set_api_key(api_key)

    def set_base_url(self, base_url: str) -> None:
        self.dispatcher.set_base_url(base_url)

    async def request(
        self,
        path: str,
        params: Iterable[ParamTuple] = (),
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        """Call any endpoint with raw ``(name, value)`` pairs.

        Enum-backed parameters such as ``order_by`` are checked here, so an
        unknown value raises ``InvalidParameterError`` before anything is sent.
        """

        return await self.dispatcher.execute(path, assemble(coerce_params(params)), response_format)

    async def _query(
        self,
        path: str,
        query: FredQuery,
        response_format: ResponseFormat,
    ) -> FredResult:
        return await self.request(path, query.to_params(), response_format)

    async def get_category(
        self,
        category_id: str,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self.request(CATEGORY_PATH, [("category_id", category_id)], response_format)

    async def get_category_children(
        self,
        query: CategoryQuery,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(CATEGORY_CHILDREN_PATH, query, response_format)

    async def get_category_related(
        self,
        query: CategoryQuery,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(CATEGORY_RELATED_PATH, query, response_format)

    async def get_category_series(
        self,
        query: CategorySeriesQuery,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(CATEGORY_SERIES_PATH, query, response_format)

    async def get_category_tags(
        self,
        query: CategoryTagsQuery,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(CATEGORY_TAGS_PATH, query, response_format)

    async def get_category_related_tags(
        self,
        query: CategoryRelatedTagsQuery,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(CATEGORY_RELATED_TAGS_PATH, query, response_format)

    async def get_releases(
        self,
        query: ReleasesQuery | None = None,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(RELEASES_PATH, query or ReleasesQuery(), response_format)

    async def get_release_dates(
        self,
        query: ReleaseDatesQuery | None = None,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(RELEASE_DATES_PATH, query or ReleaseDatesQuery(), response_format)

    async def get_release_series(
        self,
        query: ReleaseSeriesQuery,
        response_format: ResponseFormat = ResponseFormat.OBJECT,
    ) -> FredResult:
        return await self._query(RELEASE_SERIES_PATH, query, response_format)


__all__ = ["FredClient"]
