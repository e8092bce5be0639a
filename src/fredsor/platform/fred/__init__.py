"""FRED web service package.

This package assembles query parameters, dispatches GET requests to the
FRED API and resolves every call into a ``Success``, ``ServiceError`` or
``TransportFailure``.
"""

from __future__ import annotations

from .client import FredClient
from .dispatcher import FredDispatcher
from .enums import (
    PARAM_ENUMS,
    FilterAttribute,
    OrderBy,
    ResponseFormat,
    SortOrder,
    TagGroupID,
    coerce_params,
)
from .http_client import HTTPResponse, HTTPTransport, RequestsTransport
from .params import ParamTuple, assemble, date_to_wire
from .queries import (
    CategoryQuery,
    CategoryRelatedTagsQuery,
    CategorySeriesQuery,
    CategoryTagsQuery,
    ReleaseDatesQuery,
    ReleaseSeriesQuery,
    ReleasesQuery,
)
from .results import (
    FredError,
    FredResult,
    InvalidParameterError,
    ResponseDecodeError,
    ServiceError,
    Success,
    TransportError,
    TransportFailure,
)

__all__ = [
    "CategoryQuery",
    "CategoryRelatedTagsQuery",
    "CategorySeriesQuery",
    "CategoryTagsQuery",
    "FilterAttribute",
    "FredClient",
    "FredDispatcher",
    "FredError",
    "FredResult",
    "HTTPResponse",
    "HTTPTransport",
    "InvalidParameterError",
    "OrderBy",
    "PARAM_ENUMS",
    "ParamTuple",
    "ReleaseDatesQuery",
    "ReleaseSeriesQuery",
    "ReleasesQuery",
    "RequestsTransport",
    "ResponseDecodeError",
    "ResponseFormat",
    "ServiceError",
    "SortOrder",
    "Success",
    "TagGroupID",
    "TransportError",
    "TransportFailure",
    "assemble",
    "coerce_params",
    "date_to_wire",
]
