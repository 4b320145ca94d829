"""ページ取得処理のテスト。requests.get を差し替えて通信は行わない。"""

from __future__ import annotations

import pytest
import requests

from src import scraper
from src.errors import FetchFailure


class FakeResponse:
    def __init__(self, status_code: int, text: str, apparent_encoding: str = "utf-8"):
        self.status_code = status_code
        self.text = text
        self.apparent_encoding = apparent_encoding
        self.encoding = None


@pytest.fixture
def captured(monkeypatch: pytest.MonkeyPatch):
    calls: list[dict] = []
    responses: list = []

    def fake_get(url, **kwargs):
        calls.append({"url": url, **kwargs})
        result = responses.pop(0)
        if isinstance(result, Exception):
            raise result
        return result

    monkeypatch.setattr(scraper.requests, "get", fake_get)
    return calls, responses


@pytest.mark.light
def test_fetch_html_returns_body_on_200(captured):
    calls, responses = captured
    responses.append(FakeResponse(200, "<html>ok</html>", apparent_encoding="ISO-8859-1"))

    assert scraper.fetch_html("https://example.test/a") == "<html>ok</html>"
    assert calls[0]["url"] == "https://example.test/a"


@pytest.mark.light
def test_fetch_html_disables_certificate_verification(captured):
    """対象サイトの証明書を検証せずに取得することを確認する。"""
    calls, responses = captured
    responses.append(FakeResponse(200, ""))

    scraper.fetch_html("https://example.test/a")
    assert calls[0]["verify"] is False


@pytest.mark.light
def test_fetch_html_passes_timeout_through(captured):
    calls, responses = captured
    responses.extend([FakeResponse(200, ""), FakeResponse(200, "")])

    scraper.fetch_html("https://example.test/a")
    scraper.fetch_html("https://example.test/a", timeout=5)
    assert calls[0]["timeout"] is None
    assert calls[1]["timeout"] == 5


@pytest.mark.light
@pytest.mark.parametrize("status", [204, 301, 404, 500, 503])
def test_fetch_html_rejects_non_200(captured, status: int):
    _, responses = captured
    responses.append(FakeResponse(status, "Service Unavailable"))

    with pytest.raises(FetchFailure) as exc_info:
        scraper.fetch_html("https://example.test/a")
    assert exc_info.value.status == status
    assert exc_info.value.body == "Service Unavailable"
    assert exc_info.value.url == "https://example.test/a"


@pytest.mark.light
@pytest.mark.parametrize(
    "error",
    [requests.ConnectionError("reset"), requests.Timeout("timed out"), requests.exceptions.SSLError("bad")],
)
def test_fetch_html_wraps_transport_errors(captured, error: Exception):
    _, responses = captured
    responses.append(error)

    with pytest.raises(FetchFailure) as exc_info:
        scraper.fetch_html("https://example.test/a")
    assert exc_info.value.status is None
    assert exc_info.value.__cause__ is error


@pytest.mark.light
def test_fetch_html_does_not_retry(captured):
    calls, responses = captured
    responses.extend([requests.ConnectionError("reset"), FakeResponse(200, "ok")])

    with pytest.raises(FetchFailure):
        scraper.fetch_html("https://example.test/a")
    assert len(calls) == 1
