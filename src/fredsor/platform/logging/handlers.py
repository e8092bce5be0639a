"""Where: src/fredsor/platform/logging/handlers.py
What: Rich console handler and file formatter that hide API credentials.
Why: Request URLs carry ``api_key`` in the query string and are logged verbatim.
"""

from __future__ import annotations

import logging
import re
from typing import Final

from rich.console import ConsoleRenderable
from rich.logging import RichHandler
from rich.text import Text

_SECRET_PATTERN: Final[re.Pattern[str]] = re.compile(r"(api_key=)[^&\s'\"]*")
MASK: Final[str] = "***"


def mask_secrets(message: str) -> str:
    """Replace every ``api_key=...`` value in ``message`` with a fixed mask."""

    return _SECRET_PATTERN.sub(rf"\g<1>{MASK}", message)


class MaskingRichHandler(RichHandler):
    """Rich handler that never renders credential values."""

    def render_message(self, record: logging.LogRecord, message: str) -> ConsoleRenderable:
        rendered = super().render_message(record, mask_secrets(message))
        if isinstance(rendered, Text):
            return rendered
        return Text(mask_secrets(str(rendered)))


class MaskingFormatter(logging.Formatter):
    """Plain formatter for file handlers with the same masking as the console."""

    def format(self, record: logging.LogRecord) -> str:
        return mask_secrets(super().format(record))


__all__ = ["MASK", "MaskingFormatter", "MaskingRichHandler", "mask_secrets"]
