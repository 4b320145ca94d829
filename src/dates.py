"""
日付ユーティリティ。

呼び出し元から受け取る日付（文字列 / date / datetime）を暦日に変換し、
URL組み立てや期間指定の一括取得で使う文字列表現を生成する。
"""

from __future__ import annotations

import datetime as dt
from typing import List, Union

from dateutil import parser as date_parser

from src.errors import InvalidDateError

DateLike = Union[str, dt.date, dt.datetime]

_DEFAULT_A = dt.datetime(2000, 1, 1)
_DEFAULT_B = dt.datetime(2001, 2, 2)


def to_date(value: DateLike) -> dt.date:
    """
    日付相当の値を date に変換する。

    文字列は dateutil で解釈する。"01/02/2024" のような曖昧な表記は月/日の順で読む。
    年・月・日のいずれかが欠けた文字列（"2024"、"June 2024" など）は受け付けない。

    Args:
        value: 日付文字列、date、または datetime。

    Returns:
        暦日(date)。

    Raises:
        InvalidDateError: 暦日として解釈できない場合。
    """
    if isinstance(value, dt.datetime):
        return value.date()
    if isinstance(value, dt.date):
        return value
    if not isinstance(value, str) or not value.strip():
        raise InvalidDateError(f"Invalid date: {value!r}")

    # 年・月・日のいずれかが欠けていると dateutil は default で補完するため、
    # 異なる default で2回解釈して結果が一致しなければ不完全な日付とみなす
    try:
        first = date_parser.parse(value.strip(), default=_DEFAULT_A).date()
        second = date_parser.parse(value.strip(), default=_DEFAULT_B).date()
    except (ValueError, OverflowError) as e:
        raise InvalidDateError(f"Invalid date: {value!r} ({e})") from e

    if first != second:
        raise InvalidDateError(f"Invalid date: {value!r} (year, month and day are required)")
    return first


def generate_date_range(start: DateLike, end: DateLike) -> List[str]:
    """
    start から end までの日付を 'YYYY-MM-DD' 形式で返す（両端を含む）。

    start が end より後の場合は空リストを返す。

    Args:
        start: 開始日。
        end: 終了日。

    Returns:
        昇順の日付文字列リスト。

    Raises:
        InvalidDateError: いずれかの日付を解釈できない場合。
    """
    current = to_date(start)
    last = to_date(end)

    result: List[str] = []
    while current <= last:
        result.append(current.isoformat())
        current += dt.timedelta(days=1)
    return result
