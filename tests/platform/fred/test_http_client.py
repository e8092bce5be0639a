"""Tests for the requests-backed transport."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest
import requests
from pytest_mock import MockerFixture

from fredsor.platform.fred import HTTPResponse, RequestsTransport, TransportError


@pytest.fixture
def session(mocker: MockerFixture) -> MagicMock:
    """Create a mock session.

    Args:
        mocker: Pytest mocker fixture.

    Returns:
        MagicMock: Session whose ``get`` returns a 200 JSON response.
    """
    mock_session = mocker.create_autospec(requests.Session, instance=True)
    response = mocker.MagicMock()
    response.status_code = 200
    response.content = b'{"categories":[]}'
    mock_session.get.return_value = response
    return mock_session


def test_get_returns_status_and_raw_body(session: MagicMock) -> None:
    transport = RequestsTransport(session)

    result = transport.get("https://example.test/fred/category?category_id=0")

    assert result == HTTPResponse(status=200, body=b'{"categories":[]}')


def test_get_follows_redirects_without_referer(session: MagicMock) -> None:
    transport = RequestsTransport(session, user_agent="fredsor/test")

    _ = transport.get("https://example.test/fred/category")

    session.get.assert_called_once()
    _, kwargs = session.get.call_args
    assert kwargs["allow_redirects"] is True
    assert "Referer" not in kwargs["headers"]
    assert kwargs["headers"]["User-Agent"] == "fredsor/test"
    assert "timeout" not in kwargs


def test_get_passes_error_statuses_through(session: MagicMock) -> None:
    session.get.return_value.status_code = 429
    session.get.return_value.content = b"Too Many Requests"
    transport = RequestsTransport(session)

    result = transport.get("https://example.test/fred/category")

    assert result.status == 429
    assert result.body == b"Too Many Requests"


@pytest.mark.parametrize(
    "error",
    [
        requests.ConnectionError("connection refused"),
        requests.Timeout("timed out"),
        requests.exceptions.InvalidURL("bad url"),
    ],
)
def test_request_exceptions_become_transport_errors(session: MagicMock, error: Exception) -> None:
    session.get.side_effect = error
    transport = RequestsTransport(session)

    with pytest.raises(TransportError) as exc_info:
        _ = transport.get("https://example.test/fred/category")

    assert exc_info.value.__cause__ is error


def test_close_closes_session(session: MagicMock) -> None:
    RequestsTransport(session).close()

    session.close.assert_called_once_with()
