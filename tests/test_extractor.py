"""日付指定の抽出処理（URL組み立て → 取得 → 解析）のテスト。"""

from __future__ import annotations

import pytest

from conftest import alarm_cell, flood_table, wrap_content
from src import extractor
from src.errors import FetchFailure, InvalidDateError, ParseFieldError


@pytest.fixture
def fake_fetch(monkeypatch: pytest.MonkeyPatch):
    state = {"urls": [], "timeouts": [], "html": "", "error": None}

    def fetch(url, timeout=None):
        state["urls"].append(url)
        state["timeouts"].append(timeout)
        if state["error"] is not None:
            raise state["error"]
        return state["html"]

    monkeypatch.setattr(extractor, "fetch_html", fetch)
    return state


@pytest.mark.light
def test_extract_flood_reports_composes_pipeline(fake_fetch, sample_html: str):
    fake_fetch["html"] = sample_html

    reports = extractor.extract_flood_reports("2024-01-15", timeout=10)

    assert fake_fetch["urls"] == [
        "https://www.cgesp.org/v3/alagamentos.jsp?dataBusca=15/01/2024&enviaBusca=Buscar"
    ]
    assert fake_fetch["timeouts"] == [10]
    assert len(reports) == 3


@pytest.mark.light
def test_extract_flood_reports_uses_base_url(fake_fetch, empty_html: str):
    fake_fetch["html"] = empty_html

    assert extractor.extract_flood_reports("2024-01-15", base_url="http://mirror.test/a.jsp") == []
    assert fake_fetch["urls"][0].startswith("http://mirror.test/a.jsp?dataBusca=15/01/2024")


@pytest.mark.light
def test_invalid_date_is_raised_before_fetching(fake_fetch):
    with pytest.raises(InvalidDateError):
        extractor.extract_flood_reports("not a date")
    assert fake_fetch["urls"] == []


@pytest.mark.light
def test_fetch_failure_is_propagated(fake_fetch):
    """取得失敗が空リストに置き換えられず、呼び出し元へ伝播することを確認する。"""
    fake_fetch["error"] = FetchFailure("boom", url="u", status=500, body="err")

    with pytest.raises(FetchFailure):
        extractor.extract_flood_reports("2024-01-15")


@pytest.mark.light
def test_parse_failure_is_propagated(fake_fetch):
    fake_fetch["html"] = wrap_content(flood_table(cell=alarm_cell(item_count=2)))

    with pytest.raises(ParseFieldError):
        extractor.extract_flood_reports("2024-01-15")
