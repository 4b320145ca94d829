"""
アプリケーション固有の例外定義モジュール。

日付解釈、ページ取得、HTML解析の各段階で発生する例外を分類して扱うために、
基底例外および派生例外を定義する。

「対象ブロックがページに存在しない」ケースは例外ではなく空の結果として扱うため、
ここには定義しない。
"""

from __future__ import annotations

from typing import Optional


class FloodReportError(Exception):
    """冠水情報抽出システム全体の基底例外。"""


class InvalidDateError(FloodReportError, ValueError):
    """入力された日付を暦日として解釈できない場合の例外。"""


class FetchFailure(FloodReportError):
    """
    ページ取得に失敗した場合の例外。

    ステータスが200以外の応答、および通信レベルの失敗(タイムアウト、DNS、接続断)を含む。

    Attributes:
        url: 取得対象URL。
        status: HTTPステータス。通信レベルの失敗では None。
        body: 応答本文。通信レベルの失敗では None。
    """

    def __init__(
        self,
        message: str,
        url: str,
        status: Optional[int] = None,
        body: Optional[str] = None,
    ):
        super().__init__(message)
        self.url = url
        self.status = status
        self.body = body


class ParseError(FloodReportError):
    """HTML解析処理に起因する例外。"""


class ParseFieldError(ParseError):
    """
    テーブル内の想定要素が欠落・不正な場合の例外。

    1つでも発生した時点で抽出処理全体を中断する。

    Attributes:
        table_index: 対象ブロック内で何番目のテーブルか(0始まり)。
    """

    def __init__(self, message: str, table_index: Optional[int] = None):
        if table_index is not None:
            message = f"table #{table_index}: {message}"
        super().__init__(message)
        self.table_index = table_index
