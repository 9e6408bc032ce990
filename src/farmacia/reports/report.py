from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import orjson

from ..catalog.summary import InventorySummary


def summary_report(summary: InventorySummary, source: str, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Summary panel values plus where and when they were computed."""
    now = now or datetime.now(timezone.utc)
    return {
        "generated_at": now,
        "source": source,
        **asdict(summary),
    }


def write_summary(summary: InventorySummary, source: str, path: Path, now: Optional[datetime] = None) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(orjson.dumps(summary_report(summary, source, now), option=orjson.OPT_INDENT_2))
