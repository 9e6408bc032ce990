from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.settings import settings

logger = logging.getLogger(__name__)

ITEMS_KEY = "farmacos"


class Farmaco(BaseModel):
    """One inventory record as published in the item source."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field("", alias="nombre")
    category: str = Field("", alias="categoria")
    description: str = Field("", alias="descripcion")
    expiration_date: Optional[date] = Field(None, alias="fecha_caducidad")
    location: str = Field("", alias="ubicacion")
    status: str = Field("", alias="estado")

    @field_validator("name", "category", "description", "location", "status", mode="before")
    @classmethod
    def text_or_empty(cls, v):
        # A wrong-typed value is shown as its text rather than failing the record.
        if v is None:
            return ""
        return v if isinstance(v, str) else str(v)

    @field_validator("expiration_date", mode="before")
    @classmethod
    def lenient_date(cls, v):
        # Records are never rejected for a bad date; it just renders as unknown.
        if v is None or isinstance(v, date):
            return v
        try:
            return date.fromisoformat(str(v).strip()[:10])
        except ValueError:
            logger.warning(f"Unparseable fecha_caducidad {v!r}")
            return None


def parse_farmacos(payload: Any) -> List[Farmaco]:
    """Build the item list from a decoded ``{"farmacos": [...]}`` document."""
    if not isinstance(payload, dict):
        raise ValueError(f"Item source must be a JSON object, got {type(payload).__name__}")
    records = payload[ITEMS_KEY]
    if not isinstance(records, list):
        raise ValueError(f"'{ITEMS_KEY}' must be a list")
    items = []
    for pos, r in enumerate(records):
        if not isinstance(r, dict):
            logger.warning(f"Record {pos} is not an object: {r!r}")
            r = {}
        items.append(Farmaco.model_validate(r))
    return items


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


async def _fetch_json(url: str) -> Any:
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        r = await client.get(url, headers={"Accept": "application/json"})
        r.raise_for_status()
        return r.json()


def _read_json(path: Path) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


async def fetch_farmacos(source: str) -> List[Farmaco]:
    """Load the item list from a local JSON file or an http(s) URL.

    Errors (network, missing file, invalid JSON, wrong shape) propagate to the
    caller; the view decides what a failed load means.
    """
    if _is_url(source):
        logger.info(f"Fetching items from {source}")
        payload = await _fetch_json(source)
    else:
        logger.info(f"Reading items from {source}")
        payload = _read_json(Path(source))
    items = parse_farmacos(payload)
    logger.info(f"Loaded {len(items)} items")
    return items
