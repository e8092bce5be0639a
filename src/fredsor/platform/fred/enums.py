"""Where: src/fredsor/platform/fred/enums.py
What: Closed value sets accepted by FRED query parameters.
Why: Reject values outside a domain before a request is ever built.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from enum import Enum
from typing import Final, TypeVar

from .params import ParamTuple
from .results import InvalidParameterError

_E = TypeVar("_E", bound="WireEnum")


class WireEnum(str, Enum):
    """Base for enums whose values are sent verbatim on the wire."""

    @classmethod
    def parse(cls: type[_E], value: "_E | str") -> _E:
        """Return the member matching ``value``.

        Accepts a member of this enum or its exact wire string.

        Raises:
            InvalidParameterError: If ``value`` is not part of the domain.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if member.value == value:
                    return member
        valid = ", ".join(member.value for member in cls)
        msg = f"Unsupported {cls.__name__} value {value!r}. Valid options: {valid}"
        raise InvalidParameterError(msg)


class ResponseFormat(Enum):
    """How the reply is requested from the service and decoded for the caller."""

    OBJECT = "object"
    JSON = "json"
    XML = "xml"

    @property
    def file_type(self) -> str:
        """Wire value for the ``file_type`` parameter."""

        if self is ResponseFormat.XML:
            return "xml"
        return "json"


class OrderBy(WireEnum):
    SERIES_ID = "series_id"
    TITLE = "title"
    UNITS = "units"
    FREQUENCY = "frequency"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"
    REALTIME_START = "realtime_start"
    REALTIME_END = "realtime_end"
    LAST_UPDATED = "last_updated"
    OBSERVATION_START = "observation_start"
    OBSERVATION_END = "observation_end"
    POPULARITY = "popularity"
    GROUP_POPULARITY = "group_popularity"


class SortOrder(WireEnum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class FilterAttribute(WireEnum):
    FREQUENCY = "frequency"
    UNITS = "units"
    SEASONAL_ADJUSTMENT = "seasonal_adjustment"


class TagGroupID(WireEnum):
    """Tag groups understood by the ``tag_group_id`` parameter."""

    FREQUENCY = "freq"
    GENERAL_OR_CONCEPT = "gen"
    GEOGRAPHY = "geo"
    GEOGRAPHY_TYPE = "geot"
    RELEASE = "rls"
    SEASONAL_ADJUSTMENT = "seas"
    SOURCE = "src"


def coerce_optional(enum_cls: type[_E], value: "_E | str | None") -> _E | None:
    """Parse ``value`` through ``enum_cls`` unless it is absent."""

    if value is None:
        return None
    return enum_cls.parse(value)


# Query parameter names whose values must come from a closed set
PARAM_ENUMS: Final[Mapping[str, type[WireEnum]]] = {
    "order_by": OrderBy,
    "sort_order": SortOrder,
    "filter_variable": FilterAttribute,
    "tag_group_id": TagGroupID,
}


def coerce_params(tuples: Iterable[ParamTuple]) -> list[ParamTuple]:
    """Parse every enum-backed parameter in ``tuples`` through its enum.

    Absent values (``None`` or ``""``) pass through untouched so ``assemble``
    can drop them.

    Raises:
        InvalidParameterError: If a value falls outside its parameter's domain.
    """
    coerced: list[ParamTuple] = []
    for name, value in tuples:
        enum_cls = PARAM_ENUMS.get(name)
        if enum_cls is not None and value is not None and value != "":
            value = enum_cls.parse(value)
        coerced.append((name, value))
    return coerced


__all__ = [
    "FilterAttribute",
    "OrderBy",
    "PARAM_ENUMS",
    "ResponseFormat",
    "SortOrder",
    "TagGroupID",
    "WireEnum",
    "coerce_optional",
    "coerce_params",
]
