"""
期間指定の一括取得。

開始日から終了日までを1日ずつ順番に取得する。対象サイトへの負荷を避けるため、
日付ごとの取得の間に throttle で待機を入れる。並列実行はしない。
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Dict, List

from src.dates import DateLike, generate_date_range
from src.errors import FloodReportError
from src.extractor import extract_flood_reports
from src.models import FloodReport

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_INTERVAL = 2.0


async def throttle(seconds: float) -> None:
    """現在のタスクだけを seconds 秒停止する。負の値は0として扱う。"""
    await asyncio.sleep(max(0.0, seconds))


@dataclass
class BatchResult:
    """
    一括取得の結果。

    Attributes:
        reports: 日付('YYYY-MM-DD') → FloodReport のリスト。
        failures: 日付 → 発生した例外（stop_on_error=False の場合のみ記録される）。
    """

    reports: Dict[str, List[FloodReport]] = field(default_factory=dict)
    failures: Dict[str, FloodReportError] = field(default_factory=dict)

    @property
    def total_reports(self) -> int:
        return sum(len(v) for v in self.reports.values())


async def collect_date_range(
    start: DateLike,
    end: DateLike,
    interval: float = DEFAULT_REQUEST_INTERVAL,
    extract: Callable[[str], List[FloodReport]] = extract_flood_reports,
    stop_on_error: bool = True,
) -> BatchResult:
    """
    start から end までの各日について冠水情報を順番に取得する。

    取得処理はブロッキングのため別スレッドで実行し、日付間で interval 秒待機する
    （最後の日付の後は待機しない）。

    Args:
        start: 開始日。
        end: 終了日。
        interval: 取得間隔(秒)。
        extract: 1日分を取得する関数。日付文字列を受け取る。
        stop_on_error: True の場合、最初の失敗で例外を送出する。
            False の場合は failures に記録して次の日付へ進む。

    Returns:
        BatchResult。

    Raises:
        InvalidDateError: 開始日・終了日を解釈できない場合。
        FloodReportError: stop_on_error=True で取得に失敗した場合。
    """
    days = generate_date_range(start, end)
    result = BatchResult()

    for i, day in enumerate(days):
        if i > 0:
            await throttle(interval)
        try:
            reports = await asyncio.to_thread(extract, day)
        except FloodReportError as e:
            if stop_on_error:
                raise
            logger.error("Failed to collect %s: %s", day, e)
            result.failures[day] = e
            continue

        logger.info("Collected %d reports for %s", len(reports), day)
        result.reports[day] = reports

    return result
