"""
HTMLパーサ。

CGESP 冠水ページのHTMLから、内容ブロック(.content)直下の見出し(h1)とテーブルを
文書順に走査し、冠水情報（FloodReport）へ変換する責務を持つ。

想定仕様:
- 内容ブロックは固定の入れ子構造 CONTENT_SELECTOR で特定する。存在しなければ空リスト
- h1 はゾーン名。次の h1 が現れるまで後続テーブルに引き継ぐ
- テーブル内の td は先頭3セルのみ使用する（地区名 / ポイント番号 / 警報詳細）
- 警報詳細は li の位置と "De " / " a " / "Sentido: " / "Referência: " の固定文言で分解する

ページには ID や data 属性などの安定した目印が無く、位置と文言に依存した解析になる。
テンプレートが変わった場合に誤ったレコードを返さないよう、1テーブルでも
想定外の構造があれば ParseFieldError で抽出全体を中断する。
"""

from __future__ import annotations

import logging
import re
from typing import Any, List, Tuple

from bs4 import BeautifulSoup

from src.errors import ParseFieldError
from src.models import AlarmEntry, FloodReport, HourWindow

logger = logging.getLogger(__name__)

CONTENT_SELECTOR = "#bd > div.fundo_ponto_escuro > div.yui3-u.col-alagamentos > .content"

HOUR_SEPARATOR = " a "
START_PREFIX = "De "
WAY_PREFIX = "Sentido: "
REFERENCE_PREFIX = "Referência: "

# html.parser は <br> を <br/> として書き出す
_LINE_BREAK_RE = re.compile(r"<br\s*/?>", flags=re.IGNORECASE)

_DETAIL_ITEM_INDEX = 4


def split_on_literal(text: str, separator: str) -> Tuple[str, str]:
    """
    text を最初の separator で前後2つに分割する。

    Raises:
        ValueError: separator が含まれない場合。
    """
    before, found, after = text.partition(separator)
    if not found:
        raise ValueError(f"separator {separator!r} not found in {text!r}")
    return before, after


def split_on_break(markup: str) -> List[str]:
    """内部HTMLを改行タグ(<br>)で分割し、各区間の前後空白を除去して返す。"""
    return [segment.strip() for segment in _LINE_BREAK_RE.split(markup)]


def strip_prefix(text: str, prefix: str) -> str:
    """前後空白を除去したうえで、先頭の prefix を1回だけ取り除く。"""
    text = text.strip()
    if text.startswith(prefix):
        return text[len(prefix):]
    return text


def _digits_only(text: str) -> str:
    return re.sub(r"[^0-9]", "", text)


def _inner_html(tag: Any) -> str:
    return tag.decode_contents().strip()


def markup_text(segment: str) -> str:
    """分割後の内部HTML断片をテキストに戻す（タグ除去・文字参照の復元）。"""
    return BeautifulSoup(segment, "html.parser").get_text().strip()


def _parse_alarm_cell(cell: Any, table_index: int) -> AlarmEntry:
    """
    警報詳細セル(3番目の td)から AlarmEntry を組み立てる。

    - 5番目の li: title 属性が状態、内部HTMLが「方向<br>目印」
    - .col-local: 内部HTMLが「開始 a 終了<br>場所」、テキストが「De 開始 a 終了...」

    Args:
        cell: BeautifulSoup の td タグ。
        table_index: エラーメッセージ用のテーブル番号。

    Returns:
        AlarmEntry。

    Raises:
        ParseFieldError: 想定する li / .col-local / 区切り文字が見つからない場合。
    """
    items = cell.find_all("li")
    if len(items) <= _DETAIL_ITEM_INDEX:
        raise ParseFieldError(
            f"expected at least {_DETAIL_ITEM_INDEX + 1} list items, found {len(items)}",
            table_index,
        )
    detail = items[_DETAIL_ITEM_INDEX]

    col_local = cell.select_one(".col-local")
    if col_local is None:
        raise ParseFieldError("missing .col-local element", table_index)

    try:
        _, after = split_on_literal(_inner_html(col_local), HOUR_SEPARATOR)
        start_text, _ = split_on_literal(col_local.get_text().strip(), HOUR_SEPARATOR)
    except ValueError as e:
        raise ParseFieldError(f"malformed .col-local: {e}", table_index) from e

    local_parts = split_on_break(after)
    if len(local_parts) < 2:
        raise ParseFieldError(f"missing location after hour in {after!r}", table_index)

    detail_parts = split_on_break(_inner_html(detail))
    if len(detail_parts) < 2:
        raise ParseFieldError(
            f"missing reference line in detail item {detail_parts!r}", table_index
        )

    return AlarmEntry(
        status=detail.get("title"),
        local=markup_text(local_parts[1]),
        way=strip_prefix(markup_text(detail_parts[0]), WAY_PREFIX),
        reference=strip_prefix(markup_text(detail_parts[1]), REFERENCE_PREFIX),
        hour=HourWindow(
            start=strip_prefix(start_text, START_PREFIX),
            end=markup_text(local_parts[0]),
        ),
    )


def parse_table(table: Any, zone: str, table_index: int = 0) -> FloodReport | None:
    """
    テーブル1件を FloodReport に変換する。

    td は文書順に先頭3セルのみ使用し、4セル目以降は無視する。
    3セルに満たないテーブル（見出しのみ・空）は対象外として None を返す。

    Args:
        table: BeautifulSoup の table タグ。
        zone: 直前の見出しから引き継いだゾーン名。
        table_index: エラーメッセージ用のテーブル番号。

    Returns:
        FloodReport。対象外のテーブルなら None。

    Raises:
        ParseFieldError: 警報詳細セルの構造が想定と異なる場合。
    """
    cells = table.find_all("td")
    if len(cells) < 3:
        logger.debug("Skipping table #%d with %d cells", table_index, len(cells))
        return None

    neighborhood = cells[0].get_text().strip()
    point = _digits_only(cells[1].get_text().strip())
    alarm = _parse_alarm_cell(cells[2], table_index)

    return FloodReport(
        zone=zone,
        neighborhood=neighborhood,
        point=point,
        alarms=(alarm,),
    )


def parse_flood_reports(html: str) -> List[FloodReport]:
    """
    HTML文字列から冠水情報を抽出し、文書順の FloodReport リストとして返す。

    内容ブロックが存在しない場合（当日の冠水なし等）は空リストを返す。

    Args:
        html: 冠水ページのHTML文字列。

    Returns:
        FloodReport のリスト。

    Raises:
        ParseFieldError: いずれかのテーブルの構造が想定と異なる場合。
    """
    soup = BeautifulSoup(html, "html.parser")
    content = soup.select_one(CONTENT_SELECTOR)
    if content is None:
        logger.info("Content block not found; no flood reports on page")
        return []

    logger.info("Collecting flood data from page")

    reports: List[FloodReport] = []
    current_zone = ""
    table_index = 0
    for element in content.find_all(recursive=False):
        if element.name == "h1":
            current_zone = element.get_text().strip()
        elif element.name == "table":
            report = parse_table(element, current_zone, table_index)
            table_index += 1
            if report is not None:
                reports.append(report)

    logger.info("Collected %d flood reports", len(reports))
    return reports
