"""Tests for CLI result rendering."""

from __future__ import annotations

from io import StringIO

from rich.console import Console

from fredsor.platform.fred import ServiceError, Success, TransportFailure
from fredsor.ui.cli.display import ResultDisplay


def _display() -> tuple[ResultDisplay, StringIO, StringIO]:
    out, err = StringIO(), StringIO()
    display = ResultDisplay(
        console=Console(file=out, width=120),
        error_console=Console(file=err, width=120),
    )
    return display, out, err


def test_success_object_prints_json() -> None:
    display, out, err = _display()

    display.show_result(Success(status=200, content={"categories": []}))

    assert '"categories": []' in out.getvalue()
    assert "HTTP 200" in err.getvalue()


def test_success_bytes_printed_verbatim() -> None:
    display, out, _err = _display()

    display.show_result(Success(status=200, content=b"<releases/>"), quiet=True)

    assert "<releases/>" in out.getvalue()


def test_quiet_suppresses_status_line() -> None:
    display, _out, err = _display()

    display.show_result(Success(status=200, content={}), quiet=True)

    assert err.getvalue() == ""


def test_service_error_shows_status_and_body_preview() -> None:
    display, out, err = _display()

    display.show_result(ServiceError(status=400, body=b"Bad Request. [api_key] missing"))

    assert out.getvalue() == ""
    assert "HTTP 400" in err.getvalue()
    assert "[api_key] missing" in err.getvalue()


def test_transport_failure_shows_reason() -> None:
    display, _out, err = _display()

    display.show_result(TransportFailure(reason="connection refused"))

    assert "Transport failure: connection refused" in err.getvalue()


def test_transport_failure_masks_api_key() -> None:
    display, _out, err = _display()

    display.show_result(
        TransportFailure(reason="Max retries exceeded with url: /fred/category?api_key=SECRET")
    )

    assert "SECRET" not in err.getvalue()
    assert "api_key=***" in err.getvalue()
