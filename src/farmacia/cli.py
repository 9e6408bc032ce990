from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import typer

from . import items_source
from .catalog.summary import format_date_es, pluralize_products
from .config.display import load_display_config
from .data.storage import to_frame, write_csv
from .reports.report import write_summary
from .view.state import InventoryView

app = typer.Typer(add_completion=False)


def _load_view(source: Optional[str]) -> InventoryView:
    view = InventoryView(source or items_source(), display=load_display_config())
    asyncio.run(view.load())
    return view


@app.command("summary")
def summary(
    source: Optional[str] = typer.Option(None, "--source", help="JSON file or URL (defaults to settings)"),
    json_out: Optional[Path] = typer.Option(None, "--json-out", help="Also write the summary as JSON"),
):
    """Print the inventory summary panel."""
    view = _load_view(source)
    s = view.summary()

    typer.echo(f"Total productos: {s.total}")
    for st in view.display.statuses:
        typer.echo(f"{st.summary_label}: {s.count_for(st.label)}")
    typer.echo(f"Categorías base: {s.category_count}")
    if s.categories:
        typer.echo("Categorías disponibles: " + ", ".join(s.categories))

    if json_out:
        write_summary(s, view.source, json_out)
        typer.echo(f"Summary written to {json_out}")


@app.command("categories")
def categories(
    source: Optional[str] = typer.Option(None, "--source", help="JSON file or URL (defaults to settings)"),
    expand: List[str] = typer.Option([], "--expand", "-e", help="Category to show expanded (repeatable)"),
):
    """List base categories; expanded ones also list their items."""
    view = _load_view(source)
    for cat in expand:
        view.toggle(cat)

    for cat, items in view.index.groups():
        mark = "▼" if view.is_expanded(cat) else "►"
        typer.echo(f"{mark} {view.display.icon_for(cat)} {cat} ({pluralize_products(len(items))})")
        if view.is_expanded(cat):
            for it in items:
                typer.echo(f"    - {it.name} [{it.status}] {it.location} | caduca {format_date_es(it.expiration_date)}")


@app.command("export")
def export(
    out: Path = typer.Option(..., "--out", "-o", help="CSV destination"),
    source: Optional[str] = typer.Option(None, "--source", help="JSON file or URL (defaults to settings)"),
):
    """Write the loaded items as a CSV table."""
    view = _load_view(source)
    df = to_frame(view.items)
    write_csv(df, out)
    typer.echo(f"{len(df)} rows written to {out}")


@app.command("ui")
def ui():
    """Launch the Streamlit page."""
    import streamlit.web.cli as stcli

    script = Path(__file__).resolve().parents[2] / "app.py"
    sys.argv = ["streamlit", "run", str(script)]
    stcli.main()


if __name__ == "__main__":
    app()
