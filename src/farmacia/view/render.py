"""HTML fragments for the inventory page.

Everything here is a pure function of its arguments so it can be tested
without a running Streamlit session. Text coming from the item source is
escaped.
"""

from __future__ import annotations

from datetime import datetime
from html import escape
from typing import Optional, Sequence

from slugify import slugify

from ..catalog.grouping import split_categories
from ..catalog.loader import Farmaco
from ..catalog.summary import InventorySummary, days_until_expiration, format_date_es, pluralize_products
from ..config.display import DisplayConfig

EXPANDED_MARK = "▼"
COLLAPSED_MARK = "►"


def category_key(category: str, position: int) -> str:
    """Stable widget key for a category section."""
    return f"cat-{position}-{slugify(category) or 'sin-categoria'}"


def header_text(n_items: int, n_categories: int) -> str:
    return f"{n_items} productos organizados en {n_categories} categorías"


def category_label(category: str, n_items: int, expanded: bool, display: DisplayConfig) -> str:
    mark = EXPANDED_MARK if expanded else COLLAPSED_MARK
    return f"{display.icon_for(category)}  {category} · {pluralize_products(n_items)}  {mark}"


def tag_html(text: str) -> str:
    return (
        '<span style="padding:2px 8px;border-radius:9999px;font-size:0.75rem;'
        f'background:#e5e7eb;color:#374151;margin-right:4px">{escape(text)}</span>'
    )


def status_badge_html(status: str, display: DisplayConfig) -> str:
    bg, fg = display.status_style(status)
    return (
        '<span style="padding:2px 10px;border-radius:9999px;font-size:0.75rem;'
        f'font-weight:600;background:{bg};color:{fg}">{escape(status)}</span>'
    )


def _days_text(days: Optional[int]) -> str:
    return "—" if days is None else f"{days} días"


def item_card_html(item: Farmaco, display: DisplayConfig, now: Optional[datetime] = None) -> str:
    """Card for one item. Days remaining are computed against ``now``."""
    tags = "".join(tag_html(c) for c in split_categories(item.category))
    days = days_until_expiration(item, now)
    return f"""
<div style="background:#fff;border:1px solid #e5e7eb;border-radius:12px;padding:16px;margin-bottom:12px">
  <div style="font-weight:700;font-size:1.05rem;margin-bottom:6px">{escape(item.name)}</div>
  <div style="margin-bottom:8px">{tags}</div>
  <div style="display:flex;justify-content:space-between;align-items:center;margin-bottom:8px">
    {status_badge_html(item.status, display)}
    <span style="font-size:0.75rem;color:#6b7280">{escape(item.location)}</span>
  </div>
  <p style="font-size:0.85rem;color:#4b5563">{escape(item.description)}</p>
  <div style="font-size:0.85rem">📅 {format_date_es(item.expiration_date)}</div>
  <div style="font-size:0.85rem">📍 {escape(item.location)}</div>
  <div style="border-top:1px solid #e5e7eb;margin-top:10px;padding-top:6px;font-size:0.75rem;display:flex;justify-content:space-between">
    <span style="color:#6b7280">Caduca en:</span>
    <span style="font-weight:600;color:#16a34a">{_days_text(days)}</span>
  </div>
</div>
"""


def summary_tags_html(categories: Sequence[str]) -> str:
    return "".join(tag_html(c) for c in categories)


def summary_metrics(summary: InventorySummary, display: DisplayConfig) -> list[tuple[str, int]]:
    """(label, value) pairs for the summary boxes, in display order."""
    metrics = [("Total productos", summary.total)]
    for s in display.statuses:
        metrics.append((s.summary_label, summary.count_for(s.label)))
    metrics.append(("Categorías base", summary.category_count))
    return metrics
