"""
データモデル定義モジュール。

CGESP の冠水ページから抽出した情報を呼び出し元へ渡すための
FloodReport（テーブル1件分）と AlarmEntry（警報1件分）を定義する。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple


@dataclass(frozen=True)
class HourWindow:
    """
    警報の時間帯。

    元ページの表記が一定しないため、時刻型には変換せず文字列のまま保持する。
    """

    start: str
    end: str

    def to_dict(self) -> dict:
        return {"start": self.start, "end": self.end}


@dataclass(frozen=True)
class AlarmEntry:
    """
    冠水警報1件分の詳細。

    Attributes:
        status: 状態ラベル（例: "Intransitável"）。li要素に title が無い場合は None。
        local: 対象区間・場所の説明。
        way: 影響を受ける通行方向。
        reference: 近隣の目印。
        hour: 発生時間帯。
    """

    status: Optional[str]
    local: str
    way: str
    reference: str
    hour: HourWindow

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "local": self.local,
            "way": self.way,
            "reference": self.reference,
            "hour": self.hour.to_dict(),
        }


@dataclass(frozen=True)
class FloodReport:
    """
    ページ内のテーブル1件に対応する冠水情報。

    - zone は直前に現れた見出し(h1)の値を引き継ぐ。見出しが無ければ空文字
    - point は数字以外を除去した監視ポイント番号。数字が無ければ空文字

    現行のページ構成では alarms は常に1件だが、複数件を保持できる形にしている。
    """

    zone: str
    neighborhood: str
    point: str
    alarms: Tuple[AlarmEntry, ...] = ()

    def to_dict(self) -> dict:
        return {
            "zone": self.zone,
            "neighborhood": self.neighborhood,
            "point": self.point,
            "alarms": [alarm.to_dict() for alarm in self.alarms],
        }
