"""Tests for the HTTP transport."""

import logging
from concurrent.futures import ThreadPoolExecutor
from unittest.mock import Mock, patch

import pytest
import requests

from openf1_client.conf.settings import Settings
from openf1_client.exceptions import TransportError
from openf1_client.transport import HTTPFetcher

URL = "https://api.openf1.org/v1/weather?meeting_key=latest&session_key=latest"


def make_response(status_code: int = 200, content: bytes = b"[]") -> Mock:
    response = Mock()
    response.status_code = status_code
    response.content = content
    return response


@pytest.fixture
def session():
    return requests.Session()


def test_returns_buffered_body(session):
    fetcher = HTTPFetcher(Settings(timeout=4.0), session=session)

    with patch.object(session, "get", return_value=make_response(content=b'[{"rainfall": 1}]')) as mock_get:
        body = fetcher(URL)

    assert body == b'[{"rainfall": 1}]'
    mock_get.assert_called_once_with(URL, timeout=4.0)


def test_sets_static_headers(session):
    HTTPFetcher(Settings(user_agent="pit-wall/2.0"), session=session)

    assert session.headers["User-Agent"] == "pit-wall/2.0"
    assert session.headers["Accept"] == "application/json"


def test_connection_failure_raises_transport_error(session):
    fetcher = HTTPFetcher(Settings(), session=session)

    with patch.object(session, "get", side_effect=requests.ConnectionError("refused")):
        with pytest.raises(TransportError) as exc_info:
            fetcher.fetch(URL)

    assert exc_info.value.url == URL
    assert exc_info.value.status_code is None
    assert isinstance(exc_info.value.__cause__, requests.ConnectionError)


def test_timeout_raises_transport_error(session):
    fetcher = HTTPFetcher(Settings(timeout=0.5), session=session)

    with patch.object(session, "get", side_effect=requests.ReadTimeout("slow")):
        with pytest.raises(TransportError, match="Timed out after 0.5s"):
            fetcher.fetch(URL)


def test_error_status_body_is_returned_by_default(session, caplog):
    fetcher = HTTPFetcher(Settings(), session=session)
    error_page = b'{"detail": "Internal Server Error"}'

    with patch.object(session, "get", return_value=make_response(500, error_page)):
        with caplog.at_level(logging.WARNING, logger="openf1_client.transport.http"):
            body = fetcher.fetch(URL)

    assert body == error_page
    assert "HTTP 500" in caplog.text


def test_error_status_raises_when_enabled(session):
    fetcher = HTTPFetcher(Settings(raise_for_status=True), session=session)

    with patch.object(session, "get", return_value=make_response(503, b"")):
        with pytest.raises(TransportError) as exc_info:
            fetcher.fetch(URL)

    assert exc_info.value.status_code == 503


def test_success_passes_when_status_checks_enabled(session):
    fetcher = HTTPFetcher(Settings(raise_for_status=True), session=session)

    with patch.object(session, "get", return_value=make_response(200, b"[]")):
        assert fetcher.fetch(URL) == b"[]"


def test_context_manager_closes_session(session):
    with patch.object(session, "close") as mock_close:
        with HTTPFetcher(Settings(), session=session):
            pass

    mock_close.assert_called_once()


def test_per_thread_fetchers_keep_their_own_bodies():
    urls = [f"https://api.openf1.org/v1/laps?lap_number={n}" for n in range(1, 9)]

    def fetch_in_thread(url: str) -> bytes:
        session = Mock(spec=requests.Session)
        session.headers = {}
        session.get.side_effect = lambda u, timeout: make_response(content=u.encode())
        with HTTPFetcher(Settings(), session=session) as fetcher:
            return fetcher(url)

    with ThreadPoolExecutor(max_workers=4) as pool:
        bodies = list(pool.map(fetch_in_thread, urls))

    assert bodies == [url.encode() for url in urls]
