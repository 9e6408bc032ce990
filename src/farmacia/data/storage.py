from datetime import datetime
from pathlib import Path
from typing import List, Optional

import pandas as pd

from ..catalog.grouping import split_categories
from ..catalog.loader import Farmaco
from ..catalog.summary import days_until_expiration

COLUMNS = [
    "nombre", "categorias", "estado", "ubicacion",
    "fecha_caducidad", "dias_restantes", "descripcion",
]


def to_frame(items: List[Farmaco], now: Optional[datetime] = None) -> pd.DataFrame:
    rows = []
    for it in items:
        rows.append({
            "nombre": it.name,
            "categorias": ", ".join(split_categories(it.category)),
            "estado": it.status,
            "ubicacion": it.location,
            "fecha_caducidad": it.expiration_date.isoformat() if it.expiration_date else None,
            "dias_restantes": days_until_expiration(it, now),
            "descripcion": it.description,
        })
    df = pd.DataFrame(rows, columns=COLUMNS)
    df["dias_restantes"] = df["dias_restantes"].astype("Int64")
    return df


def write_csv(df: pd.DataFrame, path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(path, index=False)
