"""
Discord Webhook通知を行うユーティリティ。

このモジュールは冠水情報の取得結果(成功/失敗/件数)をDiscordへ送信する用途で使用する。
通知失敗は処理全体の失敗とはみなさない。
"""

from __future__ import annotations

import logging

import requests
from requests import RequestException

from src.batch import BatchResult

logger = logging.getLogger(__name__)


def build_summary_message(result: BatchResult) -> str:
    """一括取得結果の通知本文を返す。"""
    days = sorted(set(result.reports) | set(result.failures))
    lines = [
        "✅ alagamentos 取得完了" if not result.failures else "⚠️ alagamentos 取得完了(一部失敗)",
        f"- period: {days[0]} - {days[-1]}" if days else "- period: (none)",
        f"- days: {len(result.reports)}",
        f"- reports: {result.total_reports}",
    ]
    for day, error in sorted(result.failures.items()):
        lines.append(f"- failed {day}: {type(error).__name__}")
    return "\n".join(lines) + "\n"


def build_failure_message(traceback_text: str) -> str:
    return f"❌ alagamentos 取得失敗\n```{traceback_text[:1800]}```"


def send_discord(webhook_url: str, message: str) -> None:
    """
    Discord Webhookへメッセージを送信する。

    webhook_urlが空の場合は何もせず終了する。
    通知失敗は致命的なエラーとせず、警告ログのみ出力する。

    Args:
        webhook_url: Discord Webhook URL。
        message: 送信する本文。
    """
    if not webhook_url:
        return

    payload = {"content": message}

    try:
        requests.post(webhook_url, json=payload, timeout=15)
    except RequestException as e:
        # 通知失敗は致命にしない
        logger.warning("Discord notification failed: %s", e)
