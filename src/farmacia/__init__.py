"""Farmacia Inventario - Core package initialization."""

from __future__ import annotations
from pathlib import Path

from .config.settings import settings

def data_dir() -> Path:
    """Get the data directory path."""
    return Path(settings.data_dir)


def items_source() -> str:
    """Location of the item source: the configured URL, else the local JSON file."""
    if settings.items_url:
        return settings.items_url
    return str(data_dir() / settings.items_file)
