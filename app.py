"""Inventory page for the Streamlit UI."""

from __future__ import annotations

import asyncio
from datetime import datetime, timezone

import streamlit as st

from farmacia import items_source
from farmacia.config.display import load_display_config
from farmacia.view.render import (
    category_key,
    category_label,
    header_text,
    item_card_html,
    summary_metrics,
    summary_tags_html,
)
from farmacia.view.state import InventoryView

GRID_COLUMNS = 4


def _view() -> InventoryView:
    # One view per browser session; reloading the page starts a new one.
    if "inventory_view" not in st.session_state:
        st.session_state.inventory_view = InventoryView(items_source(), display=load_display_config())
    return st.session_state.inventory_view


def _load(view: InventoryView) -> None:
    placeholder = st.empty()
    placeholder.markdown("### 🔄 Cargando inventario...")
    asyncio.run(view.load())
    placeholder.empty()


def render_categories(view: InventoryView) -> None:
    now = datetime.now(timezone.utc)
    for pos, (cat, items) in enumerate(view.index.groups()):
        expanded = view.is_expanded(cat)
        st.markdown(
            f'<div style="height:6px;border-radius:6px;background:{view.display.color_for(cat)}"></div>',
            unsafe_allow_html=True,
        )
        st.button(
            category_label(cat, len(items), expanded, view.display),
            key=category_key(cat, pos),
            on_click=view.toggle,
            args=(cat,),
            width="stretch",
        )
        if expanded:
            cols = st.columns(GRID_COLUMNS)
            for i, item in enumerate(items):
                cols[i % GRID_COLUMNS].markdown(item_card_html(item, view.display, now), unsafe_allow_html=True)


def render_summary(view: InventoryView) -> None:
    summary = view.summary()
    st.subheader("📊 Resumen del Inventario")
    metrics = summary_metrics(summary, view.display)
    for col, (label, value) in zip(st.columns(len(metrics)), metrics):
        col.metric(label, value)
    st.markdown("**🏷️ Categorías disponibles:**")
    st.markdown(summary_tags_html(summary.categories), unsafe_allow_html=True)


def main() -> None:
    st.set_page_config(page_title="Inventario de Farmacia", page_icon="🏥", layout="wide")
    view = _view()
    if view.loading:
        _load(view)

    st.title("🏥 Inventario de Farmacia")
    st.caption(header_text(len(view.items), len(view.categories)))

    render_categories(view)
    st.divider()
    render_summary(view)


if __name__ == "__main__":  # pragma: no cover - streamlit entry point
    main()
