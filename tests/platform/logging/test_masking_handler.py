"""Tests for credential masking in log output."""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path

from rich.console import Console
from rich.text import Text

from fredsor.platform.logging import MaskingFormatter, MaskingRichHandler, mask_secrets, setup_logger


def _build_record(message: str) -> logging.LogRecord:
    return logging.LogRecord(
        name="fredsor",
        level=logging.DEBUG,
        pathname="test",
        lineno=0,
        msg=message,
        args=(),
        exc_info=None,
    )


def test_mask_secrets_hides_api_key_values() -> None:
    url = "https://example.test/fred/category?category_id=13&file_type=json&api_key=SECRET"

    masked = mask_secrets(url)

    assert "SECRET" not in masked
    assert masked.endswith("api_key=***")
    assert "category_id=13&file_type=json" in masked


def test_mask_secrets_leaves_other_text_alone() -> None:
    assert mask_secrets("FRED HTTP error: status=404") == "FRED HTTP error: status=404"


def test_rich_handler_renders_masked_message() -> None:
    console = Console(file=StringIO(), force_terminal=True, soft_wrap=True)
    handler = MaskingRichHandler(console=console)

    rendered = handler.render_message(_build_record(""), "GET /fred?api_key=SECRET&x=1")

    assert isinstance(rendered, Text)
    assert "SECRET" not in rendered.plain
    assert "api_key=***&x=1" in rendered.plain


def test_formatter_masks_file_output() -> None:
    formatter = MaskingFormatter("%(message)s")

    assert formatter.format(_build_record("api_key=SECRET")) == "api_key=***"


def test_setup_logger_writes_masked_file(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "fredsor.log"
    logger = setup_logger(log_file=log_file, console_level=logging.CRITICAL)

    try:
        logger.debug("FRED GET https://example.test/fred/category?api_key=SECRET")
        for handler in logger.handlers:
            handler.flush()
        content = log_file.read_text(encoding="utf-8")
    finally:
        _ = setup_logger()

    assert "api_key=***" in content
    assert "SECRET" not in content
