"""抽出結果の JSON 出力。"""

from __future__ import annotations

import json
import os
from typing import Iterable, List

from src.models import FloodReport


def reports_to_json(reports: Iterable[FloodReport]) -> List[dict]:
    return [report.to_dict() for report in reports]


def write_reports_json(path: str, reports: Iterable[FloodReport]):
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as file_obj:
        json.dump(reports_to_json(reports), file_obj, ensure_ascii=False, indent=2)
        file_obj.write("\n")
