"""Where: src/fredsor/platform/fred/queries.py
What: Named, independently optional parameter sets for each FRED endpoint.
Why: Keyword fields replace long positional argument lists and keep the
     (name, value) list for every endpoint reviewable field by field.
"""

from __future__ import annotations

import abc
from dataclasses import dataclass
from datetime import date
from typing import ClassVar

from .enums import FilterAttribute, OrderBy, SortOrder, TagGroupID, WireEnum, coerce_optional
from .params import ParamTuple, date_to_wire


@dataclass(slots=True, frozen=True, kw_only=True)
class FredQuery(abc.ABC):
    """Fields shared by every endpoint plus enum coercion at construction.

    Enum-typed fields also accept their wire strings; anything else raises
    ``InvalidParameterError`` before a request can be built.
    """

    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = ()

    realtime_start: date | None = None
    realtime_end: date | None = None

    def __post_init__(self) -> None:
        for name, enum_cls in self.ENUM_FIELDS:
            object.__setattr__(self, name, coerce_optional(enum_cls, getattr(self, name)))

    def realtime_params(self) -> list[ParamTuple]:
        return [
            ("realtime_start", date_to_wire(self.realtime_start)),
            ("realtime_end", date_to_wire(self.realtime_end)),
        ]

    @abc.abstractmethod
    def to_params(self) -> list[ParamTuple]:
        """Return the ordered parameter tuples for this query."""


@dataclass(slots=True, frozen=True, kw_only=True)
class CategoryQuery(FredQuery):
    """Parameters for ``category/children`` and ``category/related``."""

    category_id: str

    def to_params(self) -> list[ParamTuple]:
        return [("category_id", self.category_id), *self.realtime_params()]


@dataclass(slots=True, frozen=True, kw_only=True)
class CategorySeriesQuery(FredQuery):
    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = (
        ("filter_variable", FilterAttribute),
        ("order_by", OrderBy),
        ("sort_order", SortOrder),
    )

    category_id: str
    offset: int | None = None
    limit: int | None = None
    filter_variable: FilterAttribute | None = None
    filter_value: str | None = None
    tag_names: str | None = None
    exclude_tag_names: str | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> list[ParamTuple]:
        return [
            ("category_id", self.category_id),
            ("offset", self.offset),
            ("limit", self.limit),
            ("filter_variable", self.filter_variable),
            ("filter_value", self.filter_value),
            ("tag_names", self.tag_names),
            ("exclude_tag_names", self.exclude_tag_names),
            ("sort_order", self.sort_order),
            ("order_by", self.order_by),
            *self.realtime_params(),
        ]


@dataclass(slots=True, frozen=True, kw_only=True)
class CategoryTagsQuery(FredQuery):
    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = (
        ("tag_group_id", TagGroupID),
        ("order_by", OrderBy),
        ("sort_order", SortOrder),
    )

    category_id: str
    offset: int | None = None
    limit: int | None = None
    tag_names: str | None = None
    tag_group_id: TagGroupID | None = None
    search_text: str | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> list[ParamTuple]:
        return [
            ("category_id", self.category_id),
            ("offset", self.offset),
            ("limit", self.limit),
            *self.realtime_params(),
            ("tag_names", self.tag_names),
            ("tag_group_id", self.tag_group_id),
            ("search_text", self.search_text),
            ("order_by", self.order_by),
            ("sort_order", self.sort_order),
        ]


@dataclass(slots=True, frozen=True, kw_only=True)
class CategoryRelatedTagsQuery(FredQuery):
    """The service rejects related-tag requests that omit ``tag_names``."""

    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = (
        ("tag_group_id", TagGroupID),
        ("order_by", OrderBy),
        ("sort_order", SortOrder),
    )

    category_id: str
    offset: int | None = None
    limit: int | None = None
    tag_names: str | None = None
    exclude_tag_names: str | None = None
    tag_group_id: TagGroupID | None = None
    search_text: str | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> list[ParamTuple]:
        return [
            ("category_id", self.category_id),
            ("offset", self.offset),
            ("limit", self.limit),
            *self.realtime_params(),
            ("sort_order", self.sort_order),
            ("order_by", self.order_by),
            ("search_text", self.search_text),
            ("tag_names", self.tag_names),
            ("exclude_tag_names", self.exclude_tag_names),
            ("tag_group_id", self.tag_group_id),
        ]


@dataclass(slots=True, frozen=True, kw_only=True)
class ReleasesQuery(FredQuery):
    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = (
        ("order_by", OrderBy),
        ("sort_order", SortOrder),
    )

    offset: int | None = None
    limit: int | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None

    def to_params(self) -> list[ParamTuple]:
        return [
            ("offset", self.offset),
            ("limit", self.limit),
            *self.realtime_params(),
            ("sort_order", self.sort_order),
            ("order_by", self.order_by),
        ]


@dataclass(slots=True, frozen=True, kw_only=True)
class ReleaseDatesQuery(FredQuery):
    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = (
        ("order_by", OrderBy),
        ("sort_order", SortOrder),
    )

    offset: int | None = None
    limit: int | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None
    include_release_dates_with_no_data: bool = False

    def to_params(self) -> list[ParamTuple]:
        return [
            ("offset", self.offset),
            ("limit", self.limit),
            *self.realtime_params(),
            ("sort_order", self.sort_order),
            ("order_by", self.order_by),
            ("include_release_dates_with_no_data", self.include_release_dates_with_no_data),
        ]


@dataclass(slots=True, frozen=True, kw_only=True)
class ReleaseSeriesQuery(FredQuery):
    ENUM_FIELDS: ClassVar[tuple[tuple[str, type[WireEnum]], ...]] = (
        ("filter_variable", FilterAttribute),
        ("order_by", OrderBy),
        ("sort_order", SortOrder),
    )

    release_id: str
    offset: int | None = None
    limit: int | None = None
    order_by: OrderBy | None = None
    sort_order: SortOrder | None = None
    filter_variable: FilterAttribute | None = None
    filter_value: str | None = None
    tag_names: str | None = None

    def to_params(self) -> list[ParamTuple]:
        return [
            ("release_id", self.release_id),
            ("offset", self.offset),
            ("limit", self.limit),
            *self.realtime_params(),
            ("sort_order", self.sort_order),
            ("order_by", self.order_by),
            ("filter_variable", self.filter_variable),
            ("filter_value", self.filter_value),
            ("tag_names", self.tag_names),
        ]


__all__ = [
    "CategoryQuery",
    "CategoryRelatedTagsQuery",
    "CategorySeriesQuery",
    "CategoryTagsQuery",
    "FredQuery",
    "ReleaseDatesQuery",
    "ReleaseSeriesQuery",
    "ReleasesQuery",
]
