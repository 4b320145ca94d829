"""
ログ出力の初期化。

日付ごとのファイルへ ERROR 以上と INFO 以上をそれぞれ書き出し、
本番環境以外ではコンソールにも出力する。
"""

from __future__ import annotations

import datetime as dt
import logging
import os

LOG_FORMAT = "%(asctime)s - [%(levelname)s] - %(name)s - %(message)s"

_HANDLER_MARK = "_flood_report_handler"


def setup_logging(
    log_dir: str = "logs",
    level: str = "INFO",
    production: bool = False,
) -> logging.Logger:
    """
    ルートロガーにハンドラを設定して返す。

    複数回呼び出しても、以前に本関数で追加したハンドラは置き換えられる。

    Args:
        log_dir: ログファイルの出力先ディレクトリ。
        level: コンソール出力のログレベル名。
        production: True の場合はコンソールへ出力しない。

    Returns:
        設定済みのルートロガー。
    """
    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            root.removeHandler(handler)
            handler.close()

    os.makedirs(log_dir, exist_ok=True)
    today = dt.date.today().isoformat()
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = []
    for name, file_level in (("error", logging.ERROR), ("info", logging.INFO)):
        handler = logging.FileHandler(
            os.path.join(log_dir, f"{name}-{today}.log"), encoding="utf-8"
        )
        handler.setLevel(file_level)
        handlers.append(handler)

    if not production:
        console = logging.StreamHandler()
        console.setLevel(getattr(logging, level.upper(), logging.INFO))
        handlers.append(console)

    for handler in handlers:
        handler.setFormatter(formatter)
        setattr(handler, _HANDLER_MARK, True)
        root.addHandler(handler)

    return root
