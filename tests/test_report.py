from datetime import datetime, timezone
import json
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[1] / "src"))

from farmacia.catalog.summary import InventorySummary
from farmacia.reports.report import summary_report, write_summary

NOW = datetime(2026, 10, 18, 12, 0, tzinfo=timezone.utc)
SUMMARY = InventorySummary(
    total=2,
    status_counts={"En caja": 1, "Suelto": 1},
    category_count=2,
    categories=["Aftas", "Herpes"],
)


def test_summary_report_fields():
    report = summary_report(SUMMARY, "data/farmacos.json", NOW)
    assert report["generated_at"] == NOW
    assert report["source"] == "data/farmacos.json"
    assert report["total"] == 2
    assert report["categories"] == ["Aftas", "Herpes"]


def test_write_summary(tmp_path):
    out = tmp_path / "reports" / "summary.json"
    write_summary(SUMMARY, "https://example.test/farmacos.json", out, NOW)

    data = json.loads(out.read_text(encoding="utf-8"))
    assert data["generated_at"] == "2026-10-18T12:00:00+00:00"
    assert data["source"] == "https://example.test/farmacos.json"
    assert data["status_counts"] == {"En caja": 1, "Suelto": 1}
    assert data["category_count"] == 2
