"""CGESP 冠水検索ページのURL組み立て。"""

from __future__ import annotations

from src.dates import DateLike, to_date

DEFAULT_BASE_URL = "https://www.cgesp.org/v3/alagamentos.jsp"


def build_search_url(date_value: DateLike, base_url: str = DEFAULT_BASE_URL) -> str:
    """
    指定日の冠水検索結果ページのURLを返す。

    日付は DD/MM/YYYY 形式で dataBusca に埋め込み、検索実行用の enviaBusca を付与する。

    Args:
        date_value: 対象日。
        base_url: 検索ページのURL。

    Returns:
        検索結果ページのURL。

    Raises:
        InvalidDateError: 日付を解釈できない場合。
    """
    day = to_date(date_value)
    return f"{base_url}?dataBusca={day.strftime('%d/%m/%Y')}&enviaBusca=Buscar"
