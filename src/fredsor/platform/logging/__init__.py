"""Logging facade exports.

Where: platform/logging/__init__.py
What: Re-export the configured logger, setup helpers, and masking handlers.
Why: Provide a single canonical import path for every module.
"""

from __future__ import annotations

from .config import logger, setup_logger
from .handlers import MaskingFormatter, MaskingRichHandler, mask_secrets

__all__ = [
    "MaskingFormatter",
    "MaskingRichHandler",
    "logger",
    "mask_secrets",
    "setup_logger",
]
