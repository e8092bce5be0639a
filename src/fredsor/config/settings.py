"""Where: src/fredsor/config/settings.py
What: Derived runtime settings sourced from persisted configuration.
Why: Expose resolved constants to the client layer without file I/O.
"""

from __future__ import annotations

from typing import Final

from fredsor import __version__
from fredsor.config.config import config as app_config

# Production FRED endpoint used when no base URL is configured.
DEFAULT_BASE_URL: Final[str] = "https://api.stlouisfed.org"

FRED_BASE_URL: str = (app_config.base_url or DEFAULT_BASE_URL).strip()

# An empty key is sent as-is; the service is responsible for rejecting it.
FRED_API_KEY: str = app_config.api_key or ""

USER_AGENT: str = f"fredsor/{__version__}"


__all__ = [
    "DEFAULT_BASE_URL",
    "FRED_API_KEY",
    "FRED_BASE_URL",
    "USER_AGENT",
]
