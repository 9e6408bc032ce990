"""Logs viewing page."""

from __future__ import annotations

import pandas as pd
import streamlit as st

from farmacia.logs import LOG_TYPES, read_logs


def format_log_entries(logs, colorize=True):
    """Format log entries for display with optional colorization."""
    if not logs:
        return pd.DataFrame()

    df = pd.DataFrame(logs)

    if colorize:
        def color_level(level):
            if level == "ERROR":
                return "background-color: #ffcccc"
            elif level == "WARNING":
                return "background-color: #fff2cc"
            elif level == "INFO":
                return "background-color: #e6f3ff"
            return ""

        return df.style.apply(
            lambda row: [color_level(row["level"]) if col == "level" else "" for col in df.columns],
            axis=1
        )

    return df


def render_log_tab(log_type: str):
    """Render a tab for a specific log type with filtering options."""
    col1, col2 = st.columns(2)
    with col1:
        search_text = st.text_input(f"Buscar en {log_type}.log", key=f"search_{log_type}")
    with col2:
        level_filter = st.selectbox(
            "Nivel",
            ["", "ERROR", "WARNING", "INFO", "DEBUG"],
            key=f"level_{log_type}",
        )

    logs = read_logs(log_type, search_text=search_text or None, level_filter=level_filter or None)
    if logs:
        st.dataframe(format_log_entries(logs), width="stretch")
    else:
        st.info(f"No hay entradas en {log_type}.log.")


def main() -> None:
    st.title("Logs")
    for tab, log_type in zip(st.tabs([t.capitalize() for t in LOG_TYPES]), LOG_TYPES):
        with tab:
            render_log_tab(log_type)


if __name__ == "__main__":  # pragma: no cover - streamlit entry point
    main()
