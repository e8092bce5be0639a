"""Where: src/fredsor/platform/fred/params.py
What: Turn ordered (name, value) pairs into a query mapping and format wire dates.
Why: The service treats an omitted parameter differently from an empty one,
     so absent values must never reach the query string.
"""

from __future__ import annotations

from collections.abc import Iterable
from datetime import date, datetime, timezone
from enum import Enum
from typing import TypeAlias

ParamValue: TypeAlias = str | int | bool | Enum
ParamTuple: TypeAlias = tuple[str, ParamValue | None]


def _to_wire_string(value: ParamValue) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    # bool before int: bool is an int subclass
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def assemble(tuples: Iterable[ParamTuple]) -> dict[str, str]:
    """Build the query mapping for a request.

    Pairs whose value is ``None`` or ``""`` are dropped. When a name repeats,
    the later pair wins. Enum members contribute their ``value``.

    Args:
        tuples: Ordered ``(name, value)`` pairs.

    Returns:
        dict[str, str]: Unique-keyed mapping in first-seen key order.
    """
    params: dict[str, str] = {}
    for name, value in tuples:
        if not name or value is None:
            continue
        rendered = _to_wire_string(value)
        if rendered == "":
            continue
        params[name] = rendered
    return params


def date_to_wire(value: date | datetime | None) -> str | None:
    """Render ``value`` as ``YYYY-MM-DD``; ``None`` stays ``None``.

    Aware datetimes are converted to UTC before their calendar fields are
    read. Naive datetimes and plain dates are used as given.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        value = value.date()
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


__all__ = ["ParamTuple", "ParamValue", "assemble", "date_to_wire"]
