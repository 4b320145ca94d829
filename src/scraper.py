"""
スクレイピング処理。

指定されたURLからHTMLを取得する責務を持つ。
HTMLの解析は parser.py 側で行い、本モジュールは通信のみを担当する。

証明書方針:
- CGESP のサイトは証明書の検証に失敗するため、TLS検証を無効化して取得する。
  これは対象サイトに限定した意図的な設定であり、他の取得処理には流用しない。

例外方針:
- ステータス200以外の応答、および requests 由来の例外は FetchFailure に変換して上位へ伝播する。
- リトライは行わない。
"""

from __future__ import annotations

import logging
import warnings
from typing import Optional

import requests
from urllib3.exceptions import InsecureRequestWarning

from src.errors import FetchFailure

logger = logging.getLogger(__name__)


def fetch_html(url: str, timeout: Optional[float] = None) -> str:
    """
    指定URLへ1回だけHTTP GETを行い、レスポンスHTML文字列を返す。

    Args:
        url: 取得対象URL。
        timeout: requests.get に渡すタイムアウト秒。None の場合は requests の既定に従う。

    Returns:
        HTML文字列。

    Raises:
        FetchFailure: ステータスが200以外、または通信に失敗した場合。
    """
    logger.info("Fetching page: %s", url)
    try:
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", InsecureRequestWarning)
            r = requests.get(url, timeout=timeout, verify=False)
    except requests.RequestException as e:
        raise FetchFailure(f"HTTP fetch failed: {url} ({e})", url=url) from e

    logger.info("Response status code: %s", r.status_code)
    if r.status_code != 200:
        raise FetchFailure(
            f"HTTP fetch failed: {url} (status {r.status_code})",
            url=url,
            status=r.status_code,
            body=r.text,
        )

    r.encoding = r.apparent_encoding
    return r.text
