from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from typing import Dict, List, Optional, Sequence

from .loader import Farmaco

SECONDS_PER_DAY = 24 * 60 * 60

MONTHS_ES = (
    "enero", "febrero", "marzo", "abril", "mayo", "junio",
    "julio", "agosto", "septiembre", "octubre", "noviembre", "diciembre",
)


@dataclass(frozen=True)
class InventorySummary:
    total: int
    status_counts: Dict[str, int] = field(default_factory=dict)
    category_count: int = 0
    categories: List[str] = field(default_factory=list)

    def count_for(self, status: str) -> int:
        return self.status_counts.get(status, 0)


def summarize(items: Sequence[Farmaco], categories: Sequence[str], statuses: Sequence[str]) -> InventorySummary:
    """Totals for the summary panel.

    Only the given ``statuses`` are counted; any other label is left out of
    ``status_counts`` rather than bucketed.
    """
    counts = {s: 0 for s in statuses}
    for item in items:
        if item.status in counts:
            counts[item.status] += 1
    return InventorySummary(
        total=len(items),
        status_counts=counts,
        category_count=len(categories),
        categories=list(categories),
    )


def _utc(now: datetime) -> datetime:
    if now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now.astimezone(timezone.utc)


def days_until_expiration(item: Farmaco, now: Optional[datetime] = None) -> Optional[int]:
    """Whole days, rounded up, from ``now`` to the expiration date.

    The expiration instant is midnight UTC of ``fecha_caducidad``. Call this
    at render time; the value drifts with the wall clock.
    """
    if item.expiration_date is None:
        return None
    now = _utc(now or datetime.now(timezone.utc))
    expires_at = datetime.combine(item.expiration_date, time(0), tzinfo=timezone.utc)
    return math.ceil((expires_at - now).total_seconds() / SECONDS_PER_DAY)


def format_date_es(d: Optional[date]) -> str:
    """Long Spanish date, e.g. ``15 de marzo de 2026``."""
    if d is None:
        return "—"
    return f"{d.day} de {MONTHS_ES[d.month - 1]} de {d.year}"


def pluralize_products(n: int) -> str:
    return f"{n} producto{'' if n == 1 else 's'}"
