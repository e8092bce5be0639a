"""Command line argument options."""

from dataclasses import dataclass
from typing import final

from fredsor.platform.fred import ParamTuple, ResponseFormat


@final
@dataclass(slots=True)
class FetchArgs:
    """Command line arguments for a single FRED request."""

    path: str
    params: list[ParamTuple]
    response_format: ResponseFormat
    api_key: str | None
    base_url: str | None
    quiet: bool


__all__ = ["FetchArgs"]
