from datetime import datetime, timezone
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from farmacia.catalog.loader import Farmaco
from farmacia.catalog.summary import InventorySummary
from farmacia.config.display import DisplayConfig
from farmacia.view import render

DISPLAY = DisplayConfig()
NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)


def test_header_text():
    assert render.header_text(9, 11) == "9 productos organizados en 11 categorías"


def test_category_label_shows_icon_count_and_state():
    collapsed = render.category_label("Herpes", 1, False, DISPLAY)
    expanded = render.category_label("Herpes", 2, True, DISPLAY)

    assert collapsed.startswith("🔥")
    assert "1 producto " in collapsed
    assert collapsed.endswith(render.COLLAPSED_MARK)
    assert "2 productos" in expanded
    assert expanded.endswith(render.EXPANDED_MARK)


def test_unknown_category_uses_default_icon():
    assert render.category_label("Vitaminas", 1, False, DISPLAY).startswith("📦")


def test_category_keys_are_unique_per_position():
    assert render.category_key("Analgésico", 0) == "cat-0-analgesico"
    assert render.category_key("Analgesico", 1) != render.category_key("Analgésico", 0)
    assert render.category_key("", 2) == "cat-2-sin-categoria"


def test_status_badges_use_status_colors():
    assert "#dcfce7" in render.status_badge_html("En caja", DISPLAY)
    assert "#fef9c3" in render.status_badge_html("Suelto", DISPLAY)
    assert DISPLAY.other_status_background in render.status_badge_html("Abierto", DISPLAY)


def test_item_card_contents():
    item = Farmaco(
        nombre="Gel <bucal>",
        categoria="Aftas / Herpes",
        descripcion="Protector",
        fecha_caducidad="2026-10-20",
        ubicacion="Cajón 1",
        estado="Suelto",
    )
    html = render.item_card_html(item, DISPLAY, NOW)

    assert "Gel &lt;bucal&gt;" in html
    assert ">Aftas</span>" in html
    assert ">Herpes</span>" in html
    assert "20 de octubre de 2026" in html
    assert "2 días" in html
    assert "Cajón 1" in html
    assert "Suelto" in html


def test_item_card_without_date():
    html = render.item_card_html(Farmaco(nombre="x"), DISPLAY, NOW)
    assert "📅 —" in html
    assert "Caduca en:" in html


def test_summary_metrics_order():
    summary = InventorySummary(
        total=3,
        status_counts={"En caja": 2, "Suelto": 1},
        category_count=4,
        categories=["A", "B", "C", "D"],
    )
    assert render.summary_metrics(summary, DISPLAY) == [
        ("Total productos", 3),
        ("En caja", 2),
        ("Sueltos", 1),
        ("Categorías base", 4),
    ]


def test_summary_tags():
    html = render.summary_tags_html(["Aftas", "Herpes"])
    assert html.count("<span") == 2
    assert render.summary_tags_html([]) == ""
