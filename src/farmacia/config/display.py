from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field

from .settings import settings


DEFAULT_ICON = "📦"
DEFAULT_COLOR = "#f3f4f6"


class StatusStyle(BaseModel):
    label: str
    summary_label: str
    background: str
    foreground: str


class DisplayConfig(BaseModel):
    # Statuses counted in the summary panel, in display order.
    statuses: list[StatusStyle] = Field(
        default_factory=lambda: [
            StatusStyle(label="En caja", summary_label="En caja", background="#dcfce7", foreground="#166534"),
            StatusStyle(label="Suelto", summary_label="Sueltos", background="#fef9c3", foreground="#854d0e"),
        ]
    )
    other_status_background: str = "#dbeafe"
    other_status_foreground: str = "#1e40af"
    default_icon: str = DEFAULT_ICON
    default_color: str = DEFAULT_COLOR
    category_icons: dict[str, str] = Field(
        default_factory=lambda: {
            "Dermatología": "🧴",
            "Aftas": "👄",
            "Herpes": "🔥",
            "Antiinflamatorio": "💊",
            "Antifúngico": "🍄",
            "Analgésico": "🤒",
            "Aromaterapia": "🌸",
            "Antihistamínico": "🤧",
            "Antigripal": "🤒",
            "Bienestar": "🌿",
            "Alergias": "🤧",
        }
    )
    category_colors: dict[str, str] = Field(
        default_factory=lambda: {
            "Dermatología": "#dbeafe",
            "Aftas": "#fce7f3",
            "Herpes": "#fee2e2",
            "Antiinflamatorio": "#dcfce7",
            "Antifúngico": "#f3e8ff",
            "Analgésico": "#ffedd5",
            "Aromaterapia": "#fef9c3",
            "Antihistamínico": "#e0e7ff",
            "Antigripal": "#ccfbf1",
            "Bienestar": "#d1fae5",
            "Alergias": "#ffe4e6",
        }
    )

    @property
    def status_labels(self) -> list[str]:
        return [s.label for s in self.statuses]

    def icon_for(self, category: str) -> str:
        return self.category_icons.get(category, self.default_icon)

    def color_for(self, category: str) -> str:
        return self.category_colors.get(category, self.default_color)

    def status_style(self, status: str) -> tuple[str, str]:
        """Badge (background, foreground) colors for a status label."""
        for s in self.statuses:
            if s.label == status:
                return s.background, s.foreground
        return self.other_status_background, self.other_status_foreground


def _display_path(base_dir: str) -> Path:
    return Path(base_dir) / "config" / "display.yaml"


def _load_yaml(path: Path) -> dict[str, Any]:
    if not path.exists():
        return {}
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    return data or {}


def _deep_merge(a: dict[str, Any], b: dict[str, Any]) -> dict[str, Any]:
    out = dict(a)
    for k, v in b.items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def load_display_config(base_dir: str | None = None) -> DisplayConfig:
    base_dir = base_dir or settings.data_dir
    defaults = DisplayConfig().model_dump()
    overrides = _load_yaml(_display_path(base_dir))
    return DisplayConfig(**_deep_merge(defaults, overrides))
