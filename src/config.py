"""
設定ファイル(settings.yaml)の読み込み処理を提供するモジュール。

settings.yaml から冠水情報の取得に必要な各種設定を読み込み、
アプリ内で扱いやすい dataclass に変換する。
各セクションが省略された場合は既定値を使う。

環境変数:
- APP_ENV: "production" の場合はコンソールへのログ出力を行わない
- DISCORD_WEBHOOK_URL: 実行結果の通知先(任意)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

import yaml

from src.batch import DEFAULT_REQUEST_INTERVAL
from src.urls import DEFAULT_BASE_URL


@dataclass(frozen=True)
class SourceConfig:
    """
    取得元の設定。

    Attributes:
        base_url: 冠水検索ページのURL。
        timeout: 通信タイムアウト秒。
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = 30.0


@dataclass(frozen=True)
class BatchConfig:
    request_interval: float = DEFAULT_REQUEST_INTERVAL


@dataclass(frozen=True)
class OutputConfig:
    dir: str = "output"


@dataclass(frozen=True)
class LoggingConfig:
    """
    ログ出力設定。

    Attributes:
        dir: ログファイルの出力先ディレクトリ。
        level: コンソール出力のログレベル名。
        production: True の場合はコンソールへ出力しない。
    """

    dir: str = "logs"
    level: str = "INFO"
    production: bool = False


@dataclass(frozen=True)
class Settings:
    """
    アプリケーション全体設定。

    Attributes:
        source: 取得元設定。
        batch: 一括取得設定。
        output: JSON出力設定。
        logging: ログ出力設定。
        discord_webhook_url: 通知先 Discord Webhook URL。未設定なら空文字。
    """

    source: SourceConfig = field(default_factory=SourceConfig)
    batch: BatchConfig = field(default_factory=BatchConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    discord_webhook_url: str = ""


def load_settings(path: str) -> Settings:
    """
    settings.yaml を読み込み Settings に変換する。

    Args:
        path: settings.yaml のファイルパス。

    Returns:
        Settingsオブジェクト。

    Raises:
        FileNotFoundError: 設定ファイルが存在しない場合。
        yaml.YAMLError: YAMLのパースに失敗した場合。
        ValueError: timeout / request_interval の数値変換に失敗した場合。
    """
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    source_data = data.get("source") or {}
    batch_data = data.get("batch") or {}
    output_data = data.get("output") or {}
    logging_data = data.get("logging") or {}

    return Settings(
        source=SourceConfig(
            base_url=str(source_data.get("base_url", DEFAULT_BASE_URL)).strip(),
            timeout=float(source_data.get("timeout", 30.0)),
        ),
        batch=BatchConfig(
            request_interval=float(
                batch_data.get("request_interval", DEFAULT_REQUEST_INTERVAL)
            ),
        ),
        output=OutputConfig(
            dir=str(output_data.get("dir", "output")),
        ),
        logging=LoggingConfig(
            dir=str(logging_data.get("dir", "logs")),
            level=str(logging_data.get("level", "INFO")).upper(),
            production=os.environ.get("APP_ENV", "") == "production",
        ),
        discord_webhook_url=os.environ.get("DISCORD_WEBHOOK_URL", ""),
    )
