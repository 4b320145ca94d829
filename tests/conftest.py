from __future__ import annotations

import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

FIXTURE_DIR = Path(__file__).resolve().parent / "fixtures"

CONTENT_OPEN = (
    '<html><body><div id="bd"><div class="fundo_ponto_escuro">'
    '<div class="yui3-u col-alagamentos"><div class="content">'
)
CONTENT_CLOSE = "</div></div></div></div></body></html>"


def read_fixture(name: str) -> str:
    return (FIXTURE_DIR / name).read_text(encoding="utf-8")


def wrap_content(body: str) -> str:
    """body を冠水ページの内容ブロック(.content)内に配置したHTMLを返す。"""
    return CONTENT_OPEN + body + CONTENT_CLOSE


def alarm_cell(
    hour_markup: str = "De 08:00 a 09:30<br>Rua X",
    detail_markup: str = "Sentido: Centro<br>Referência: Av. Paulista",
    status: str = "Intransitável",
    item_count: int = 5,
) -> str:
    """警報詳細セル(td)のHTMLを返す。item_count は li の個数。"""
    items = ['<li title="Transitável"></li>', f'<li class="col-local">{hour_markup}</li>']
    while len(items) < 4:
        items.append("<li></li>")
    items.append(f'<li title="{status}">{detail_markup}</li>')
    return "<td><ul>" + "".join(items[:item_count]) + "</ul></td>"


def flood_table(
    neighborhood: str = "Santo Amaro",
    point: str = "Ponto 1",
    cell: str | None = None,
    extra_rows: str = "",
) -> str:
    return (
        "<table><tr>"
        f"<td>{neighborhood}</td><td>{point}</td>{cell or alarm_cell()}"
        f"</tr>{extra_rows}</table>"
    )


@pytest.fixture
def sample_html() -> str:
    return read_fixture("alagamentos_sample.html")


@pytest.fixture
def empty_html() -> str:
    return read_fixture("alagamentos_empty.html")
