import json
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

import pytest

from farmacia.view import state


@pytest.fixture(autouse=True)
def captured_logs(monkeypatch):
    """Keep view logging out of the real log files and record it instead."""
    calls = {"system": [], "error": []}
    monkeypatch.setattr(state, "log_system", lambda msg, level="INFO": calls["system"].append(msg))
    monkeypatch.setattr(state, "log_error", lambda msg, exception=None: calls["error"].append((msg, exception)))
    return calls


@pytest.fixture
def write_source(tmp_path):
    def _write(records, name="farmacos.json"):
        path = tmp_path / name
        path.write_text(json.dumps({"farmacos": records}, ensure_ascii=False), encoding="utf-8")
        return path
    return _write


def _record(nombre="Producto", categoria="Analgésico", estado="En caja", fecha="2027-01-01", **extra):
    data = {
        "nombre": nombre,
        "categoria": categoria,
        "descripcion": f"Descripción de {nombre}",
        "fecha_caducidad": fecha,
        "ubicacion": "Estante A",
        "estado": estado,
    }
    data.update(extra)
    return data


@pytest.fixture
def record():
    return _record
