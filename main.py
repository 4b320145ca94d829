import argparse
import asyncio
import datetime as dt
import functools
import logging
import os
import sys
import traceback

from src.batch import collect_date_range
from src.config import load_settings
from src.dates import to_date
from src.discord_notify import build_failure_message, build_summary_message, send_discord
from src.errors import FloodReportError
from src.extractor import extract_flood_reports
from src.logging_setup import setup_logging
from src.output import write_reports_json

logger = logging.getLogger("alagamentos")


def output_path_for(output_dir: str, day: str) -> str:
    """出力ディレクトリと日付('YYYY-MM-DD')から JSON ファイルパスを返す。"""
    return os.path.join(output_dir, f"alagamentos-{day}.json")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="CGESP の冠水情報を取得して JSON に出力する")
    parser.add_argument("--date", help="対象日（省略時は当日）")
    parser.add_argument("--start", help="期間指定の開始日")
    parser.add_argument("--end", help="期間指定の終了日")
    parser.add_argument("--settings", default="settings.yaml", help="設定ファイルパス")
    parser.add_argument("--output", help="出力ファイルパス（単日指定時のみ）")
    parser.add_argument(
        "--keep-going",
        action="store_true",
        help="期間指定時、失敗した日付を記録して次の日付へ進む",
    )
    args = parser.parse_args(argv)

    if args.date and (args.start or args.end):
        parser.error("--date と --start/--end は同時に指定できません")
    if bool(args.start) != bool(args.end):
        parser.error("--start と --end は両方指定してください")
    if args.output and args.start:
        parser.error("--output は単日指定時のみ使用できます")
    return args


def main(argv=None) -> int:
    """
    冠水情報の取得と出力を行うメイン処理。
    以下の処理を順序実行する:
    1. settings.yaml を読み込み、ログ出力を初期化
    2. 対象日（または期間の各日）の冠水情報を取得
    3. 日付ごとに JSON ファイルへ出力
    4. Discord Webhookで処理結果を通知（設定済みの場合）
    Returns:
        int: 全日付の取得に成功した場合は 0、失敗があれば 1。
    """
    args = parse_args(argv)
    settings = load_settings(args.settings)
    setup_logging(
        log_dir=settings.logging.dir,
        level=settings.logging.level,
        production=settings.logging.production,
    )

    try:
        if args.start:
            start, end = args.start, args.end
        else:
            start = end = to_date(args.date or dt.date.today())

        extract = functools.partial(
            extract_flood_reports,
            base_url=settings.source.base_url,
            timeout=settings.source.timeout,
        )

        # 1. 取得
        result = asyncio.run(
            collect_date_range(
                start,
                end,
                interval=settings.batch.request_interval,
                extract=extract,
                stop_on_error=not args.keep_going,
            )
        )

        # 2. 出力
        for day, reports in result.reports.items():
            path = args.output or output_path_for(settings.output.dir, day)
            write_reports_json(path, reports)
            print(path)

        # 3. 通知
        send_discord(settings.discord_webhook_url, build_summary_message(result))

        for day, error in result.failures.items():
            print(f"{type(error).__name__}: {day}: {error}", file=sys.stderr)
        return 1 if result.failures else 0

    except FloodReportError as e:
        err = traceback.format_exc()
        logger.error("Failed to collect flood reports: %s", e, exc_info=True)
        send_discord(settings.discord_webhook_url, build_failure_message(err))
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
