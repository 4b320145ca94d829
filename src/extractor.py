"""
冠水情報の抽出処理。

日付 → URL組み立て → ページ取得 → HTML解析 を1回分まとめて実行する。
呼び出し元（CLI や一括取得処理）はこの関数だけを使えばよい。
"""

from __future__ import annotations

from typing import List, Optional

from src.dates import DateLike
from src.models import FloodReport
from src.parser import parse_flood_reports
from src.scraper import fetch_html
from src.urls import DEFAULT_BASE_URL, build_search_url


def extract_flood_reports(
    date_value: DateLike,
    base_url: str = DEFAULT_BASE_URL,
    timeout: Optional[float] = None,
) -> List[FloodReport]:
    """
    指定日の冠水情報を取得して返す。

    冠水が無い日は空リストを返す。取得・解析の失敗は例外として伝播し、
    空リストで代替することはない。

    Args:
        date_value: 対象日。
        base_url: 検索ページのURL。
        timeout: 通信タイムアウト秒。

    Returns:
        FloodReport のリスト。

    Raises:
        InvalidDateError: 日付を解釈できない場合。
        FetchFailure: ページ取得に失敗した場合。
        ParseFieldError: ページ構造が想定と異なる場合。
    """
    url = build_search_url(date_value, base_url=base_url)
    html = fetch_html(url, timeout=timeout)
    return parse_flood_reports(html)
